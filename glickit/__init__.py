"""glickit: Glicko 2 ratings updated one rating period at a time"""
from glickit.core.base import RatingPeriodSystem
from glickit.core.game import Game, GameResult
from glickit.core.player import Player, PlayerState
from glickit.core.registry import PlayerRegistry
from glickit.models.glicko2 import Glicko2
from glickit.reporting import RatingInterval, confidence_interval, print_leaderboard

__all__ = [
    'RatingPeriodSystem',
    'Game',
    'GameResult',
    'Player',
    'PlayerState',
    'PlayerRegistry',
    'Glicko2',
    'RatingInterval',
    'confidence_interval',
    'print_leaderboard',
]
