"""competitors and their rating histories"""
import math
import uuid
from typing import NamedTuple
import numpy as np
from glickit.errors import InvalidRatingError
from glickit.utils.constants import DEFAULT_DEVIATION, DEFAULT_RATING, DEFAULT_VOLATILITY


class PlayerState(NamedTuple):
    """a competitor's (rating, deviation, volatility) for one round, on the public scale"""

    rating: float
    deviation: float
    volatility: float


def validate_state(rating, deviation, volatility):
    """fail fast instead of letting NaN flow through the update"""
    if not math.isfinite(rating):
        raise InvalidRatingError(f'rating must be finite, got {rating}')
    if not (math.isfinite(deviation) and deviation > 0.0):
        raise InvalidRatingError(f'deviation must be finite and positive, got {deviation}')
    if not (math.isfinite(volatility) and volatility > 0.0):
        raise InvalidRatingError(f'volatility must be finite and positive, got {volatility}')


class Player:
    """
    A competitor and the full history of its ratings.

    The history is three parallel sequences indexed by round number. Index 0 holds the
    initial values and every processed round appends exactly one more entry to each.
    Entries are never rewritten.

    Attributes:
        id: Opaque identifier used as the registry key.
    """

    def __init__(
        self,
        player_id=None,
        rating: float = DEFAULT_RATING,
        deviation: float = DEFAULT_DEVIATION,
        volatility: float = DEFAULT_VOLATILITY,
    ):
        """
        Parameters:
            player_id (hashable, optional): Identity of the player. A random uuid4 is generated when omitted.
            rating (float, optional): Initial rating. Defaults to 1500.0.
            deviation (float, optional): Initial rating deviation. Defaults to 350.0.
            volatility (float, optional): Initial volatility. Defaults to 0.06.
        """
        self.id = uuid.uuid4() if player_id is None else player_id
        validate_state(rating, deviation, volatility)
        self._ratings = [float(rating)]
        self._deviations = [float(deviation)]
        self._volatilities = [float(volatility)]

    def __repr__(self):
        return (
            f'Player({self.id!r}, rating={self.rating:.2f}, '
            f'deviation={self.deviation:.2f}, volatility={self.volatility:.6f})'
        )

    @property
    def rating(self) -> float:
        return self._ratings[-1]

    @property
    def deviation(self) -> float:
        return self._deviations[-1]

    @property
    def volatility(self) -> float:
        return self._volatilities[-1]

    @property
    def ratings(self) -> tuple:
        return tuple(self._ratings)

    @property
    def deviations(self) -> tuple:
        return tuple(self._deviations)

    @property
    def volatilities(self) -> tuple:
        return tuple(self._volatilities)

    @property
    def num_rounds(self) -> int:
        """number of rounds processed so far"""
        return len(self._ratings) - 1

    @property
    def state(self) -> PlayerState:
        return PlayerState(self.rating, self.deviation, self.volatility)

    def state_at(self, round_idx: int) -> PlayerState:
        """state after round_idx rounds, 0 being the initial values"""
        return PlayerState(self._ratings[round_idx], self._deviations[round_idx], self._volatilities[round_idx])

    def append(self, state: PlayerState):
        """record the outcome of one more round"""
        rating, deviation, volatility = state
        validate_state(rating, deviation, volatility)
        self._ratings.append(float(rating))
        self._deviations.append(float(deviation))
        self._volatilities.append(float(volatility))

    def history_array(self) -> np.ndarray:
        """read only array of shape (num_rounds + 1, 3) with columns rating, deviation, volatility"""
        history = np.column_stack((self._ratings, self._deviations, self._volatilities))
        history.flags.writeable = False
        return history
