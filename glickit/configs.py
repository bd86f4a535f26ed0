"""default parameters and construction of a rating setup from a params dict"""
from glickit.core.registry import PlayerRegistry
from glickit.models.glicko2 import Glicko2
from glickit.utils.constants import (
    DEFAULT_DEVIATION,
    DEFAULT_EPSILON,
    DEFAULT_MAX_ITER,
    DEFAULT_RATING,
    DEFAULT_TAU,
    DEFAULT_VOLATILITY,
    SCALE,
)

registry_params = ['initial_rating', 'initial_deviation', 'initial_volatility']
system_params = ['tau', 'epsilon', 'scale', 'max_iter', 'strict']

glicko2_defaults = {
    'initial_rating': DEFAULT_RATING,
    'initial_deviation': DEFAULT_DEVIATION,
    'initial_volatility': DEFAULT_VOLATILITY,
    'tau': DEFAULT_TAU,
    'epsilon': DEFAULT_EPSILON,
    'scale': SCALE,
    'max_iter': DEFAULT_MAX_ITER,
    'strict': False,
}


def from_params(params: dict = None):
    """build a (PlayerRegistry, Glicko2) pair, params override glicko2_defaults"""
    params = params or {}
    unknown = set(params) - set(glicko2_defaults)
    if unknown:
        raise ValueError(f'unknown parameters: {sorted(unknown)}')
    merged = {**glicko2_defaults, **params}
    registry = PlayerRegistry(**{key: merged[key] for key in registry_params})
    model = Glicko2(**{key: merged[key] for key in system_params})
    return registry, model
