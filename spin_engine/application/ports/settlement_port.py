"""Settlement port (interface)"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.spin_outcome import SpinOutcome


@dataclass(frozen=True)
class SettlementReceipt:
    """Confirmation returned by a settlement backend"""

    settlement_id: str
    mode: str
    confirmed: bool
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "settlement_id": self.settlement_id,
            "mode": self.mode,
            "confirmed": self.confirmed,
            "details": self.details
        }


class SettlementPort(ABC):
    """Capability for settling a spin outcome (simulated or on-chain)"""

    mode = "abstract"

    @abstractmethod
    def settle(self, player_id: str, outcome: SpinOutcome, seed_pair: SeedPair) -> SettlementReceipt:
        """Settle an outcome, returns a receipt or raises SettlementError"""
        pass
