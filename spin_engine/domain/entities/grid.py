"""Spin grid entity"""
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from spin_engine.domain.errors import ConfigurationError


@dataclass(frozen=True)
class Grid:
    """Reel-major symbol grid: reels[reel][row] -> symbol id"""

    reels: Tuple[Tuple[str, ...], ...]

    @classmethod
    def from_reels(cls, reels: Sequence[Sequence[str]]) -> 'Grid':
        """Create from nested lists (one list per reel)"""
        if isinstance(reels, (str, bytes)) or not isinstance(reels, Sequence):
            raise ConfigurationError("Grid must be a sequence of reels")
        converted = []
        for reel in reels:
            if isinstance(reel, (str, bytes)) or not isinstance(reel, Sequence):
                raise ConfigurationError("Each reel must be a sequence of symbol ids")
            converted.append(tuple(str(symbol) for symbol in reel))
        return cls(reels=tuple(converted))

    @property
    def reel_count(self) -> int:
        return len(self.reels)

    @property
    def row_count(self) -> int:
        return len(self.reels[0]) if self.reels else 0

    def symbol_at(self, reel: int, row: int) -> str:
        return self.reels[reel][row]

    def contains(self, reel: int, row: int) -> bool:
        return 0 <= reel < len(self.reels) and 0 <= row < len(self.reels[reel])

    def cells(self) -> Iterator[Tuple[Tuple[int, int], str]]:
        """((reel, row), symbol) in scan order: reel-major, then row"""
        for reel_index, reel in enumerate(self.reels):
            for row_index, symbol in enumerate(reel):
                yield (reel_index, row_index), symbol

    def symbols(self) -> List[str]:
        return [symbol for _, symbol in self.cells()]

    def validate(self, reel_count: int, row_count: int) -> None:
        """Raise ConfigurationError unless the grid is reel_count x row_count"""
        if len(self.reels) != reel_count:
            raise ConfigurationError(
                f"Grid has {len(self.reels)} reels, expected {reel_count}"
            )
        for index, reel in enumerate(self.reels):
            if len(reel) != row_count:
                raise ConfigurationError(
                    f"Reel {index} has {len(reel)} rows, expected {row_count}"
                )

    def to_list(self) -> List[List[str]]:
        return [list(reel) for reel in self.reels]
