"""math utility functions: sigmoids and the glicko <-> glicko 2 scale converter"""
import math
from scipy.special import expit
from glickit.utils.constants import CENTER, SCALE


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    return 1.0 / (1.0 + math.exp(-x))


def to_internal_rating(rating, scale=SCALE):
    """public rating (centered at 1500) -> glicko 2 mu"""
    return (rating - CENTER) / scale


def to_internal_deviation(deviation, scale=SCALE):
    """public rating deviation -> glicko 2 phi"""
    return deviation / scale


def to_public_rating(mu, scale=SCALE):
    """glicko 2 mu -> public rating"""
    return mu * scale + CENTER


def to_public_deviation(phi, scale=SCALE):
    """glicko 2 phi -> public rating deviation"""
    return phi * scale
