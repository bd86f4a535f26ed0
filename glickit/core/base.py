"""base class for rating period systems"""
from abc import ABC, abstractmethod
from typing import Iterable
from glickit.core.game import Game
from glickit.core.player import Player, PlayerState
from glickit.core.registry import PlayerRegistry


class RatingPeriodSystem(ABC):
    """
    Base class for rating systems that update competitors once per rating period (round).

    A round is a collection of games treated as simultaneous. Subclasses only describe how
    a single player's new state follows from its games; this class provides the
    bookkeeping that applies that rule to one player or to a whole registry.
    """

    @abstractmethod
    def compute_round(self, player: Player, games: Iterable[Game], opponents) -> PlayerState:
        """
        Computes a player's state after a round without modifying anything.

        Parameters:
            player (Player): The player to update.
            games (Iterable[Game]): Games of the round. Games the player did not take part in are ignored.
            opponents: Lookup supplying the current state of each opponent by identity,
                       anything with a get() method such as a PlayerRegistry or a snapshot dict.

        Returns:
            PlayerState: The player's state after the round.
        """
        raise NotImplementedError

    def process_round(self, player: Player, games: Iterable[Game], opponents) -> PlayerState:
        """computes the player's new state for the round and appends it to its history"""
        state = self.compute_round(player, games, opponents)
        player.append(state)
        return state

    def process_period(self, registry: PlayerRegistry, games: Iterable[Game]) -> dict:
        """
        Updates every registered player for one round.

        All new states are computed against the states at the start of the round and only
        appended once every player has been computed, so the result does not depend on the
        order players are visited in.

        Returns:
            dict: identity -> new PlayerState
        """
        games = list(games)
        snapshot = registry.snapshot()
        new_states = {player.id: self.compute_round(player, games, snapshot) for player in registry}
        for player in registry:
            player.append(new_states[player.id])
        return new_states

    def fit_rounds(self, registry: PlayerRegistry, rounds: Iterable[Iterable[Game]]) -> int:
        """process a sequence of rounds in order, returns the number of rounds processed"""
        num_rounds = 0
        for games in rounds:
            self.process_period(registry, games)
            num_rounds += 1
        return num_rounds
