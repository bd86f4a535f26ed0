"""game outcome records"""
from dataclasses import dataclass
from enum import IntEnum
from glickit.errors import InvalidGameError, NotAParticipantError


class GameResult(IntEnum):
    DRAW = 0
    FIRST_WON = 1
    SECOND_WON = 2

    @classmethod
    def from_outcome(cls, outcome: float) -> 'GameResult':
        """map the first competitor's score (1.0 win, 0.5 draw, 0.0 loss) to a result"""
        if outcome == 1.0:
            return cls.FIRST_WON
        if outcome == 0.5:
            return cls.DRAW
        if outcome == 0.0:
            return cls.SECOND_WON
        raise InvalidGameError(f'outcome must be one of 1.0, 0.5 or 0.0, got {outcome}')


@dataclass(frozen=True)
class Game:
    """
    The outcome of one contest between two competitors.

    Games hold identities rather than Player objects; opponents are resolved through
    whatever lookup the caller supplies.
    """

    first: object
    second: object
    result: GameResult

    def __post_init__(self):
        if self.first == self.second:
            raise InvalidGameError(f'a competitor cannot play itself: {self.first!r}')
        try:
            result = GameResult(self.result)
        except ValueError as e:
            raise InvalidGameError(f'invalid result code {self.result!r}') from e
        object.__setattr__(self, 'result', result)

    def involves(self, identity) -> bool:
        return identity == self.first or identity == self.second

    def opponent_id(self, identity):
        if identity == self.first:
            return self.second
        if identity == self.second:
            return self.first
        raise NotAParticipantError(identity, self)

    def score_for(self, identity) -> float:
        """1.0 for the winner, 0.0 for the loser and 0.5 each for a draw"""
        if not self.involves(identity):
            raise NotAParticipantError(identity, self)
        if self.result == GameResult.DRAW:
            return 0.5
        winner = self.first if self.result == GameResult.FIRST_WON else self.second
        return 1.0 if identity == winner else 0.0

    def opponent_of(self, identity, lookup):
        """the opponent's entry in lookup, or None when the opponent is not registered there"""
        return lookup.get(self.opponent_id(identity))
