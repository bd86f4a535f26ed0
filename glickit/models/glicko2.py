"""
Glicko 2
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

"""
import logging
import math
from typing import Iterable
import numpy as np
from glickit.core.base import RatingPeriodSystem
from glickit.core.game import Game
from glickit.core.player import Player, PlayerState
from glickit.errors import InvalidRatingError, OpponentNotFoundError, VolatilityConvergenceError
from glickit.utils.constants import DEFAULT_EPSILON, DEFAULT_MAX_ITER, DEFAULT_TAU, SCALE, THREE_OVER_PI_SQUARED
from glickit.utils.math_utils import (
    sigmoid,
    sigmoid_scalar,
    to_internal_deviation,
    to_internal_rating,
    to_public_deviation,
    to_public_rating,
)

logger = logging.getLogger(__name__)


class Glicko2(RatingPeriodSystem):
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman.

    Ratings and deviations are stored on the public scale (center 1500) and converted to the
    internal scale (center 0) for each update.
    """

    def __init__(
        self,
        tau: float = DEFAULT_TAU,
        epsilon: float = DEFAULT_EPSILON,
        scale: float = SCALE,
        max_iter: int = DEFAULT_MAX_ITER,
        strict: bool = False,
    ):
        """
        Initializes the Glicko 2 rating system with the given parameters.

        Parameters:
            tau (float, optional): Constraint on the change in volatility, reasonable values are 0.3 to 1.2.
                                   Smaller values prevent large changes in ratings. Defaults to 0.5.
            epsilon (float, optional): Convergence tolerance of the volatility solver. Defaults to 1e-6.
            scale (float, optional): Factor between the public and internal scales. Defaults to 173.7178.
            max_iter (int, optional): Cap on both loops of the volatility solver. Defaults to 1000.
            strict (bool, optional): If True, a game whose opponent cannot be found raises
                                     OpponentNotFoundError. Otherwise the game is skipped with a warning.
        """
        if not (math.isfinite(tau) and tau > 0.0):
            raise ValueError(f'tau must be finite and positive, got {tau}')
        if not (math.isfinite(epsilon) and epsilon > 0.0):
            raise ValueError(f'epsilon must be finite and positive, got {epsilon}')
        if not (math.isfinite(scale) and scale > 0.0):
            raise ValueError(f'scale must be finite and positive, got {scale}')
        if max_iter < 1:
            raise ValueError(f'max_iter must be at least 1, got {max_iter}')
        self.tau = tau
        self.tau2 = tau**2.0
        self.epsilon = epsilon
        self.scale = scale
        self.max_iter = max_iter
        self.strict = strict

    @staticmethod
    def g_scalar(phi):
        """down weights the impact of an opponent with an uncertain rating, always in (0, 1]"""
        return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))

    @staticmethod
    def g_vector(phi):
        """vector version"""
        return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))

    @classmethod
    def expected_score(cls, mu, mu_j, phi_j):
        """probability of beating an opponent with rating mu_j and deviation phi_j, internal scale"""
        return sigmoid_scalar(cls.g_scalar(phi_j) * (mu - mu_j))

    def expected_score_between(self, player, opponent) -> float:
        """expected score of player against opponent, both given on the public scale"""
        return self.expected_score(
            to_internal_rating(player.rating, self.scale),
            to_internal_rating(opponent.rating, self.scale),
            to_internal_deviation(opponent.deviation, self.scale),
        )

    def f(self, x, delta2, phi2, v, a):
        ex = math.exp(x)
        phi2_v_ex = phi2 + v + ex
        num_1 = ex * (delta2 - phi2_v_ex)
        denom_1 = 2 * ((phi2_v_ex) ** 2.0)
        term_2 = (x - a) / self.tau2
        return (num_1 / denom_1) - term_2

    def get_sigma_prime(self, phi, delta, v, sigma):
        """
        Solves for the new volatility with the Illinois variant of regula falsi.

        Parameters:
            phi (float): Rating deviation on the internal scale.
            delta (float): Estimated improvement for the round.
            v (float): Estimated variance for the round.
            sigma (float): Current volatility.

        Returns:
            float: The new volatility.

        Raises:
            InvalidRatingError: If an input is not finite or sigma is not positive.
            VolatilityConvergenceError: If either the bracket search or the root finding exceeds max_iter steps.
        """
        if not all(math.isfinite(val) for val in (phi, delta, v, sigma)) or sigma <= 0.0:
            raise InvalidRatingError(f'cannot solve for volatility with phi={phi}, delta={delta}, v={v}, sigma={sigma}')
        delta2 = delta**2.0
        phi2 = phi**2.0
        A = a = math.log(sigma**2.0)
        if delta2 > (phi2 + v):
            B = math.log(delta2 - phi2 - v)
        else:
            k = 1
            while self.f(a - k * self.tau, delta2, phi2, v, a) < 0:
                k += 1
                if k > self.max_iter:
                    raise VolatilityConvergenceError('bracket search did not terminate', delta, phi, v, sigma)
            B = a - k * self.tau

        f_A = self.f(A, delta2, phi2, v, a)
        f_B = self.f(B, delta2, phi2, v, a)
        iters = 0
        while math.fabs(B - A) > self.epsilon:
            if iters >= self.max_iter or f_B == f_A:
                raise VolatilityConvergenceError('volatility iteration did not converge', delta, phi, v, sigma)
            C = A + ((A - B) * f_A) / (f_B - f_A)
            f_C = self.f(C, delta2, phi2, v, a)
            if f_C == 0.0:
                # landed exactly on the root
                return math.exp(C / 2.0)
            if (f_C * f_B) < 0:
                A = B
                f_A = f_B
            else:
                f_A = f_A / 2.0
            B = C
            f_B = f_C
            iters += 1
        sigma_prime = math.exp(A / 2.0)
        return sigma_prime

    @staticmethod
    def decay(state: PlayerState) -> PlayerState:
        """a round without games: only the deviation grows"""
        rating, deviation, volatility = state
        return PlayerState(rating, math.sqrt(deviation**2.0 + volatility**2.0), volatility)

    def _opponent_arrays(self, player: Player, games, opponents):
        """collect opponent ratings, deviations and the player's scores for every resolvable game"""
        opp_ratings, opp_devs, scores = [], [], []
        for game in games:
            opponent = game.opponent_of(player.id, opponents)
            if opponent is None:
                opponent_id = game.opponent_id(player.id)
                if self.strict:
                    raise OpponentNotFoundError(opponent_id, game)
                logger.warning(f'skipping {game!r}: opponent {opponent_id!r} is not registered')
                continue
            opp_ratings.append(opponent.rating)
            opp_devs.append(opponent.deviation)
            scores.append(game.score_for(player.id))
        return np.array(opp_ratings), np.array(opp_devs), np.array(scores)

    def compute_round(self, player: Player, games: Iterable[Game], opponents) -> PlayerState:
        games = [game for game in games if game.involves(player.id)]
        opp_ratings, opp_devs, scores = self._opponent_arrays(player, games, opponents)
        if scores.shape[0] == 0:
            logger.debug(f'{player.id!r} has no games this round, increasing deviation only')
            return self.decay(player.state)

        mu = to_internal_rating(player.rating, self.scale)
        phi = to_internal_deviation(player.deviation, self.scale)
        opp_mus = to_internal_rating(opp_ratings, self.scale)
        opp_phis = to_internal_deviation(opp_devs, self.scale)

        gs = self.g_vector(opp_phis)
        probs = sigmoid(gs * (mu - opp_mus))
        information = np.sum(np.square(gs) * probs * (1.0 - probs))
        if information == 0.0:
            raise InvalidRatingError(
                f'expected scores of {player.id!r} saturated against every opponent this round, '
                f'rating gaps are too large to estimate a variance'
            )
        v = 1.0 / information
        # this is kinda like a gradient
        grad = np.sum(gs * (scores - probs))
        delta = v * grad

        sigma_prime = self.get_sigma_prime(phi=phi, delta=float(delta), v=float(v), sigma=player.volatility)

        phi_star = math.sqrt((phi**2.0) + (sigma_prime**2.0))
        phi_prime = 1.0 / math.sqrt((1.0 / (phi_star**2.0)) + (1.0 / v))
        mu_prime = mu + (phi_prime**2.0) * np.sum(gs * (scores - probs))

        state = PlayerState(
            float(to_public_rating(mu_prime, self.scale)),
            float(to_public_deviation(phi_prime, self.scale)),
            sigma_prime,
        )
        logger.debug(f'{player.id!r} played {scores.shape[0]} games: {player.state} -> {state}')
        return state
