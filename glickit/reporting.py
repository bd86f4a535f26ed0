"""confidence intervals and leaderboards"""
from dataclasses import dataclass
from glickit.core.registry import PlayerRegistry


@dataclass(frozen=True)
class RatingInterval:
    """a rating with the band of +/- 2 rating deviations around it (roughly 95% confidence)"""

    rating: float
    low: float
    high: float

    @property
    def half_width(self) -> float:
        return self.high - self.rating

    def __str__(self):
        return (
            f'{round(self.rating, 2)} ± {round(self.half_width, 2)} '
            f'( {round(self.low, 2)} - {round(self.high, 2)} )'
        )


def confidence_interval(player) -> RatingInterval:
    """interval around the player's current rating"""
    rating = player.rating
    deviation = player.deviation
    return RatingInterval(rating, rating - (2.0 * deviation), rating + (2.0 * deviation))


def print_leaderboard(registry: PlayerRegistry, num_places: int = None):
    """print players ranked by the low end of their confidence interval"""
    intervals = sorted(
        ((player, confidence_interval(player)) for player in registry),
        key=lambda pair: pair[1].low,
        reverse=True,
    )
    if num_places is not None:
        intervals = intervals[:num_places]
    max_len = min(max([len(str(player.id)) for player, _ in intervals] + [10]), 36)
    print(f'{"competitor": <{max_len}}\t{"rating - (2*dev)"}\t{"rating": <10}\t{"dev": <10}\t{"vol"}')
    for player, interval in intervals:
        print(
            f'{str(player.id): <{max_len}}\t{interval.low: <16.6f}\t{player.rating: <10.4f}'
            f'\t{player.deviation: <10.4f}\t{player.volatility:.6f}'
        )
