"""
example from: http://www.glicko.net/glicko/glicko2.pdf
"""
import logging
import math
import pytest
from glickit.core.game import Game, GameResult
from glickit.core.registry import PlayerRegistry
from glickit.errors import InvalidRatingError, OpponentNotFoundError
from glickit.models.glicko2 import Glicko2


def example_setup():
    registry = PlayerRegistry()
    player = registry.create(0, rating=1500.0, deviation=200.0)
    registry.create(1, rating=1400.0, deviation=30.0)
    registry.create(2, rating=1550.0, deviation=100.0)
    registry.create(3, rating=1700.0, deviation=300.0)
    # competitor 0 wins the first and loses the next 2
    games = [
        Game(0, 1, GameResult.FIRST_WON),
        Game(0, 2, GameResult.SECOND_WON),
        Game(0, 3, GameResult.SECOND_WON),
    ]
    return registry, player, games


def test_glicko2():
    registry, player, games = example_setup()
    model = Glicko2(tau=0.5)
    model.process_round(player, games, registry)
    # Mr. Glickman rounded at each step of the example so compare to 2 decimal places
    assert player.rating == pytest.approx(1464.05, abs=1e-2)
    assert player.deviation == pytest.approx(151.52, abs=1e-2)
    assert player.volatility == pytest.approx(0.05999, abs=1e-5)


def test_glicko2_period_matches_single_player_update():
    registry, player, games = example_setup()
    model = Glicko2(tau=0.5)
    new_states = model.process_period(registry, games)
    assert new_states[0].rating == pytest.approx(1464.05, abs=1e-2)
    assert new_states[0].deviation == pytest.approx(151.52, abs=1e-2)
    assert player.num_rounds == 1
    for other in (1, 2, 3):
        assert registry[other].num_rounds == 1


def test_decay_only_round():
    registry = PlayerRegistry()
    player = registry.create('a', rating=1620.0, deviation=80.0, volatility=0.09)
    registry.create('b')
    registry.create('c')
    model = Glicko2()
    # this round does not involve 'a'
    state = model.process_round(player, [Game('b', 'c', GameResult.DRAW)], registry)
    assert state.rating == 1620.0
    assert state.volatility == 0.09
    assert state.deviation == pytest.approx(math.sqrt(80.0**2 + 0.09**2))


def test_empty_round_decays():
    registry = PlayerRegistry()
    player = registry.create('a')
    state = Glicko2().process_round(player, [], registry)
    assert state.rating == 1500.0
    assert state.deviation == pytest.approx(math.sqrt(350.0**2 + 0.06**2))
    assert state.volatility == 0.06


def test_history_is_append_only():
    registry, player, games = example_setup()
    model = Glicko2()
    model.process_round(player, games, registry)
    before = (player.ratings, player.deviations, player.volatilities)
    model.process_round(player, games, registry)
    assert len(player.ratings) == len(player.deviations) == len(player.volatilities) == 3
    assert player.ratings[:2] == before[0]
    assert player.deviations[:2] == before[1]
    assert player.volatilities[:2] == before[2]


def test_lower_deviation_opponent_gives_more_information():
    def new_deviation(opponent_deviation):
        registry = PlayerRegistry()
        player = registry.create('a', rating=1500.0, deviation=200.0)
        registry.create('b', rating=1500.0, deviation=opponent_deviation)
        return Glicko2().compute_round(player, [Game('a', 'b', GameResult.DRAW)], registry).deviation

    assert new_deviation(50.0) <= new_deviation(300.0)
    assert new_deviation(300.0) < 200.0


def test_win_raises_rating_and_loss_lowers_it():
    registry = PlayerRegistry()
    player = registry.create('a')
    registry.create('b')
    model = Glicko2()
    win = model.compute_round(player, [Game('a', 'b', GameResult.FIRST_WON)], registry)
    loss = model.compute_round(player, [Game('b', 'a', GameResult.FIRST_WON)], registry)
    assert win.rating > 1500.0 > loss.rating
    assert win.rating - 1500.0 == pytest.approx(1500.0 - loss.rating)


def test_missing_opponent_is_skipped(caplog):
    registry, player, games = example_setup()
    model = Glicko2()
    expected = model.compute_round(player, games, registry)
    with caplog.at_level(logging.WARNING, logger='glickit.models.glicko2'):
        state = model.compute_round(player, games + [Game(0, 'ghost', GameResult.FIRST_WON)], registry)
    assert state == pytest.approx(expected)
    assert 'ghost' in caplog.text


def test_missing_opponent_strict():
    registry, player, games = example_setup()
    model = Glicko2(strict=True)
    with pytest.raises(OpponentNotFoundError):
        model.process_round(player, games + [Game(0, 'ghost', GameResult.DRAW)], registry)
    # nothing is appended when the round fails
    assert player.num_rounds == 0


def test_all_opponents_missing_decays():
    registry = PlayerRegistry()
    player = registry.create('a', deviation=100.0)
    state = Glicko2().compute_round(player, [Game('a', 'ghost', GameResult.FIRST_WON)], registry)
    assert state.rating == 1500.0
    assert state.deviation == pytest.approx(math.sqrt(100.0**2 + 0.06**2))


def test_process_period_uses_start_of_round_states():
    def build(order):
        registry = PlayerRegistry()
        initial = {'a': (1600.0, 80.0), 'b': (1450.0, 150.0), 'c': (1500.0, 250.0), 'd': (1700.0, 50.0)}
        for player_id in order:
            rating, deviation = initial[player_id]
            registry.create(player_id, rating=rating, deviation=deviation)
        return registry

    games = [
        Game('a', 'b', GameResult.SECOND_WON),
        Game('b', 'c', GameResult.FIRST_WON),
        Game('c', 'a', GameResult.DRAW),
    ]
    model = Glicko2()
    forward = build('abcd')
    snapshot = forward.snapshot()
    expected = {player.id: model.compute_round(player, games, snapshot) for player in forward}
    model.process_period(forward, games)
    backward = build('dcba')
    model.process_period(backward, games)
    for player_id in 'abcd':
        assert forward[player_id].state == pytest.approx(expected[player_id])
        assert backward[player_id].state == pytest.approx(expected[player_id])
    # d sat out and only decays
    assert forward['d'].rating == 1700.0
    assert forward['d'].deviation == pytest.approx(math.sqrt(50.0**2 + 0.06**2))


def test_fit_rounds():
    registry, player, games = example_setup()
    num_rounds = Glicko2().fit_rounds(registry, [games, [], games])
    assert num_rounds == 3
    assert all(p.num_rounds == 3 for p in registry)


def test_expected_score_between():
    registry = PlayerRegistry()
    a = registry.create('a', rating=1700.0)
    b = registry.create('b', rating=1500.0, deviation=30.0)
    model = Glicko2()
    p = model.expected_score_between(a, b)
    assert 0.5 < p < 1.0
    assert model.expected_score_between(b, b) == pytest.approx(0.5)


def test_contribution_functions():
    assert Glicko2.g_scalar(0.0) == 1.0
    assert 0.0 < Glicko2.g_scalar(100.0) < 0.02
    assert Glicko2.expected_score(0.0, 0.0, 1.0) == pytest.approx(0.5)
    assert 0.0 < Glicko2.expected_score(-5.0, 5.0, 0.1) < 0.5


@pytest.mark.parametrize('kwargs', [{'tau': 0.0}, {'tau': -0.5}, {'epsilon': 0.0}, {'scale': float('nan')}, {'max_iter': 0}])
def test_invalid_parameters(kwargs):
    with pytest.raises(ValueError):
        Glicko2(**kwargs)


def test_saturated_expected_scores():
    registry = PlayerRegistry()
    player = registry.create('a', rating=1500.0, deviation=30.0)
    registry.create('b', rating=151500.0, deviation=30.0)
    with pytest.raises(InvalidRatingError, match='saturated'):
        Glicko2().process_round(player, [Game('a', 'b', GameResult.SECOND_WON)], registry)
    assert player.num_rounds == 0
