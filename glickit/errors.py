"""exceptions raised by glickit"""


class GlickitError(Exception):
    """base class for all glickit errors"""


class InvalidRatingError(GlickitError, ValueError):
    """a rating, deviation or volatility is not usable (non finite, or non positive spread)"""


class InvalidGameError(GlickitError, ValueError):
    """a game record cannot be constructed"""


class NotAParticipantError(GlickitError, ValueError):
    """an identity was queried against a game it did not take part in"""

    def __init__(self, identity, game):
        super().__init__(f'{identity!r} did not play in {game!r}')
        self.identity = identity
        self.game = game


class DuplicatePlayerError(GlickitError, ValueError):
    """an identity was registered twice"""


class OpponentNotFoundError(GlickitError, KeyError):
    """an opponent could not be resolved while processing a round"""

    def __init__(self, identity, game):
        super().__init__(f'opponent {identity!r} of {game!r} is not registered')
        self.identity = identity
        self.game = game

    def __str__(self):
        # KeyError would otherwise repr the message
        return self.args[0]


class VolatilityConvergenceError(GlickitError, ArithmeticError):
    """the volatility solver hit its iteration cap"""

    def __init__(self, message, delta, phi, v, sigma):
        super().__init__(f'{message} (delta={delta}, phi={phi}, v={v}, sigma={sigma})')
        self.delta = delta
        self.phi = phi
        self.v = v
        self.sigma = sigma
