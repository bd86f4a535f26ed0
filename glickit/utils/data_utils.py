"""Functions for turning tables of results into games and rounds"""

import logging
from typing import Iterable, List, Tuple
import polars as pl
from glickit.core.game import Game, GameResult
from glickit.core.registry import PlayerRegistry

logger = logging.getLogger(__name__)


def games_from_frame(df: pl.DataFrame, competitor_cols: List[str], outcome_col: str) -> List[Game]:
    """
    Build games from a table with one row per game.

    Parameters:
        df (pl.DataFrame): Table of results.
        competitor_cols (List[str]): Names of the two columns holding the competitors' identities.
        outcome_col (str): Name of the column holding the first competitor's score (1.0, 0.5 or 0.0).

    Returns:
        List[Game]: One game per row, in row order.
    """
    if len(competitor_cols) != 2:
        raise ValueError(f'expected exactly 2 competitor columns, got {competitor_cols}')
    first_col, second_col = competitor_cols
    rows = df.select([first_col, second_col, pl.col(outcome_col).cast(pl.Float64)]).iter_rows()
    return [Game(first, second, GameResult.from_outcome(outcome)) for first, second, outcome in rows]


def rounds_from_frame(
    df: pl.DataFrame,
    competitor_cols: List[str],
    outcome_col: str,
    round_col: str,
) -> List[Tuple[object, List[Game]]]:
    """split a table of results into rounds ordered by round_col, keeping row order inside each round"""
    df = df.with_row_index('_row').sort([round_col, '_row'])
    rounds = []
    for (round_value,), round_df in df.group_by([round_col], maintain_order=True):
        rounds.append((round_value, games_from_frame(round_df, competitor_cols, outcome_col)))
    logger.info(f'split {len(df)} games into {len(rounds)} rounds')
    return rounds


def register_competitors(registry: PlayerRegistry, games: Iterable[Game]) -> int:
    """create a player with the registry defaults for every identity not seen before, returns how many were added"""
    num_added = 0
    for game in games:
        for player_id in (game.first, game.second):
            if player_id not in registry:
                registry.create(player_id)
                num_added += 1
    return num_added
