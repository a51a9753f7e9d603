"""Weighted symbol selection over a deterministic random stream

Selection walks an explicit cumulative-weight table sorted by symbol id, so
the same draw always maps to the same symbol regardless of platform or
mapping iteration order.
"""
from bisect import bisect_right
from typing import Optional, Sequence, Tuple

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import ConfigurationError
from spin_engine.domain.services import random_stream

DEFAULT_REEL_COUNT = 3
DEFAULT_ROW_COUNT = 3


def select_symbol(value: float, cumulative: Sequence[Tuple[str, float]]) -> str:
    """Map a draw in [0, 1) to the symbol whose cumulative interval contains it"""
    if not cumulative:
        raise ConfigurationError("Cannot select from an empty symbol table")
    total = cumulative[-1][1]
    scaled = value * total
    bounds = [bound for _, bound in cumulative]
    index = bisect_right(bounds, scaled)
    # value * total can still round up to total for draws just below 1
    if index >= len(cumulative):
        index = len(cumulative) - 1
    return cumulative[index][0]


def select_grid(seed_pair: SeedPair, symbol_table: SymbolTable,
                reel_count: int = DEFAULT_REEL_COUNT, row_count: int = DEFAULT_ROW_COUNT,
                nonce: Optional[int] = None) -> Grid:
    """Build a reel_count x row_count grid, one draw per cell in scan order"""
    if symbol_table is None or len(symbol_table) == 0:
        raise ConfigurationError("Symbol table is empty")
    if reel_count <= 0 or row_count <= 0:
        raise ConfigurationError(f"Invalid grid dimensions {reel_count}x{row_count}")
    if nonce is not None:
        seed_pair = seed_pair.with_nonce(nonce)

    cumulative = symbol_table.cumulative_weights()
    reels = []
    for reel_index in range(reel_count):
        reel = []
        for row_index in range(row_count):
            cell_index = reel_index * row_count + row_index
            reel.append(select_symbol(random_stream.draw(seed_pair, cell_index), cumulative))
        reels.append(tuple(reel))
    return Grid(reels=tuple(reels))
