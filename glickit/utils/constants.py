"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# glicko 2 constants
SCALE = 173.7178  # 400 / ln(10)
CENTER = 1500.0

# defaults for new competitors, on the public scale
DEFAULT_RATING = 1500.0
DEFAULT_DEVIATION = 350.0
DEFAULT_VOLATILITY = 0.06

# solver defaults
DEFAULT_TAU = 0.5
DEFAULT_EPSILON = 1e-6
DEFAULT_MAX_ITER = 1000
