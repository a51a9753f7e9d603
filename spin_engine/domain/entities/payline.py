"""Payline definitions for the 3x3 machine

Cells are (reel, row) pairs, 0-indexed. Reel 0 is the leftmost column and
row 0 the top row.
"""
from dataclasses import dataclass
from typing import List, Tuple

from spin_engine.domain.errors import ConfigurationError

Cell = Tuple[int, int]


@dataclass(frozen=True)
class Payline:
    """Fixed sequence of grid cells checked for a matching-symbol win"""

    id: int
    cells: Tuple[Cell, ...]
    color: str = ""
    name: str = ""
    active: bool = True

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ConfigurationError(f"Payline id must be an integer, got {self.id!r}")
        cells = tuple(tuple(cell) for cell in self.cells)
        if not cells:
            raise ConfigurationError(f"Payline {self.id} has no cells")
        for cell in cells:
            if len(cell) != 2 or not all(isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in cell):
                raise ConfigurationError(f"Payline {self.id}: cell {cell!r} must be a (reel, row) pair of non-negative integers")
        object.__setattr__(self, "cells", cells)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "cells": [list(cell) for cell in self.cells],
            "color": self.color,
            "name": self.name,
            "active": self.active
        }


PAYLINES: Tuple[Payline, ...] = (
    Payline(1, ((0, 0), (1, 0), (2, 0)), "#ff5252", "Top Horizontal"),
    Payline(2, ((0, 1), (1, 1), (2, 1)), "#4caf50", "Middle Horizontal"),
    Payline(3, ((0, 2), (1, 2), (2, 2)), "#2196f3", "Bottom Horizontal"),
    Payline(4, ((0, 0), (1, 1), (2, 2)), "#ff9800", "Diagonal Down"),
    Payline(5, ((0, 2), (1, 1), (2, 0)), "#9c27b0", "Diagonal Up"),
    # Available for expansion, not evaluated in the base game
    Payline(6, ((0, 0), (0, 1), (0, 2)), "#00bcd4", "Left Vertical", active=False),
    Payline(7, ((1, 0), (1, 1), (1, 2)), "#ffc107", "Middle Vertical", active=False),
    Payline(8, ((2, 0), (2, 1), (2, 2)), "#e91e63", "Right Vertical", active=False),
    Payline(9, ((0, 2), (1, 1), (2, 2)), "#8bc34a", "V-Shape", active=False),
    Payline(10, ((0, 0), (1, 1), (2, 0)), "#ff4081", "Inverted V-Shape", active=False),
)


def active_paylines() -> List[Payline]:
    """Paylines evaluated in the base game"""
    return [p for p in PAYLINES if p.active]
