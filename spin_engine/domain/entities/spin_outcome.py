"""Spin outcome entity"""
from dataclasses import dataclass, field
from typing import Dict, Tuple

from spin_engine.domain.entities.grid import Grid


@dataclass(frozen=True)
class SpinOutcome:
    """Read-only result of one spin

    total_win is either the jackpot amount or sum(per_line_wins) * multiplier_applied,
    never a combination of both.
    """

    grid: Grid
    bet_amount: float
    per_line_wins: Dict[int, float] = field(default_factory=dict)
    winning_payline_ids: Tuple[int, ...] = ()
    multiplier_applied: int = 1
    is_jackpot: bool = False
    free_spins_awarded: int = 0
    total_win: float = 0.0

    @property
    def is_win(self) -> bool:
        return self.total_win > 0

    @property
    def net_result(self) -> float:
        """Net change for the player, ignoring whether the spin was free"""
        return self.total_win - self.bet_amount

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and publishing"""
        return {
            "grid": self.grid.to_list(),
            "bet_amount": self.bet_amount,
            "per_line_wins": {str(k): v for k, v in self.per_line_wins.items()},
            "winning_payline_ids": list(self.winning_payline_ids),
            "multiplier_applied": self.multiplier_applied,
            "is_jackpot": self.is_jackpot,
            "free_spins_awarded": self.free_spins_awarded,
            "total_win": self.total_win,
            "net_result": self.net_result
        }
