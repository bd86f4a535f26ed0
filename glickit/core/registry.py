"""the identity -> Player lookup a rating system works against"""
from typing import Dict, Optional
from glickit.core.player import Player, PlayerState
from glickit.errors import DuplicatePlayerError
from glickit.utils.constants import DEFAULT_DEVIATION, DEFAULT_RATING, DEFAULT_VOLATILITY


class PlayerRegistry:
    """
    Owns the mapping from identity to Player for one pool of competitors.

    Registries are plain objects handed to the rating system, so independent pools can be
    rated side by side without sharing state.
    """

    def __init__(
        self,
        initial_rating: float = DEFAULT_RATING,
        initial_deviation: float = DEFAULT_DEVIATION,
        initial_volatility: float = DEFAULT_VOLATILITY,
    ):
        """
        Parameters:
            initial_rating (float, optional): Rating for players created without one. Defaults to 1500.0.
            initial_deviation (float, optional): Rating deviation for players created without one. Defaults to 350.0.
            initial_volatility (float, optional): Volatility for players created without one. Defaults to 0.06.
        """
        self.initial_rating = initial_rating
        self.initial_deviation = initial_deviation
        self.initial_volatility = initial_volatility
        self._players: Dict[object, Player] = {}

    def create(self, player_id=None, rating=None, deviation=None, volatility=None) -> Player:
        """construct a player, filling unspecified values from the registry defaults, and register it"""
        player = Player(
            player_id,
            rating=self.initial_rating if rating is None else rating,
            deviation=self.initial_deviation if deviation is None else deviation,
            volatility=self.initial_volatility if volatility is None else volatility,
        )
        return self.add(player)

    def add(self, player: Player) -> Player:
        if player.id in self._players:
            raise DuplicatePlayerError(f'player {player.id!r} is already registered')
        self._players[player.id] = player
        return player

    def get(self, player_id) -> Optional[Player]:
        return self._players.get(player_id)

    def __getitem__(self, player_id) -> Player:
        return self._players[player_id]

    def __contains__(self, player_id) -> bool:
        return player_id in self._players

    def __len__(self):
        return len(self._players)

    def __iter__(self):
        return iter(self._players.values())

    def snapshot(self) -> Dict[object, PlayerState]:
        """frozen copy of every player's current state"""
        return {player_id: player.state for player_id, player in self._players.items()}
