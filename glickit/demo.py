"""
Runs the worked example from http://www.glicko.net/glicko/glicko2.pdf

A player rated 1500 (RD 200) beats a 1400 (RD 30) and loses to a 1550 (RD 100) and a 1700 (RD 300).
"""
import sys
import logging
from glickit.core.game import Game, GameResult
from glickit.core.registry import PlayerRegistry
from glickit.models.glicko2 import Glicko2
from glickit.reporting import confidence_interval, print_leaderboard

logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    root_logger = logging.getLogger()
    stream_handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)
    root_logger.setLevel(level)


def main():
    setup_logging()
    registry = PlayerRegistry()
    player = registry.create('A', rating=1500.0, deviation=200.0)
    registry.create('B', rating=1400.0, deviation=30.0)
    registry.create('C', rating=1550.0, deviation=100.0)
    registry.create('D', rating=1700.0, deviation=300.0)

    games = [
        Game('A', 'B', GameResult.FIRST_WON),
        Game('A', 'C', GameResult.SECOND_WON),
        Game('A', 'D', GameResult.SECOND_WON),
    ]

    model = Glicko2(tau=0.5)
    state = model.process_round(player, games, registry)
    logger.info(f'new rating {state.rating:.4f}, deviation {state.deviation:.4f}, volatility {state.volatility:.6f}')
    print(confidence_interval(player))
    print_leaderboard(registry)


if __name__ == '__main__':
    main()
