"""Spin response DTO"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from spin_engine.application.ports.settlement_port import SettlementReceipt
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.spin_outcome import SpinOutcome


@dataclass
class SpinResponse:
    """Response DTO for a spin"""

    grid: List[List[str]]
    bet_amount: float
    total_win: float
    per_line_wins: Dict[int, float]
    winning_payline_ids: List[int]
    multiplier_applied: int
    is_jackpot: bool
    free_spins_awarded: int
    server_seed_hash: str
    client_seed: str
    nonce: int
    settlement: Optional[Dict[str, Any]] = None

    @classmethod
    def from_outcome(cls, outcome: SpinOutcome, seed_pair: SeedPair,
                     receipt: Optional[SettlementReceipt] = None) -> 'SpinResponse':
        """Build from the domain outcome; never includes the server seed"""
        return cls(
            grid=outcome.grid.to_list(),
            bet_amount=outcome.bet_amount,
            total_win=outcome.total_win,
            per_line_wins=dict(outcome.per_line_wins),
            winning_payline_ids=list(outcome.winning_payline_ids),
            multiplier_applied=outcome.multiplier_applied,
            is_jackpot=outcome.is_jackpot,
            free_spins_awarded=outcome.free_spins_awarded,
            server_seed_hash=seed_pair.server_seed_hash,
            client_seed=seed_pair.client_seed,
            nonce=seed_pair.nonce,
            settlement=receipt.to_dict() if receipt else None
        )

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        result = {
            "grid": self.grid,
            "betAmount": self.bet_amount,
            "totalWin": self.total_win,
            "perLineWins": {str(k): v for k, v in self.per_line_wins.items()},
            "winningPaylineIds": self.winning_payline_ids,
            "multiplierApplied": self.multiplier_applied,
            "isJackpot": self.is_jackpot,
            "freeSpinsAwarded": self.free_spins_awarded,
            "provablyFair": {
                "serverSeedHash": self.server_seed_hash,
                "clientSeed": self.client_seed,
                "nonce": self.nonce
            }
        }
        if self.settlement:
            result["settlement"] = self.settlement
        return result

