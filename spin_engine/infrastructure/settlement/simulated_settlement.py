"""Simulated settlement for development and tests"""
import logging
import uuid

from spin_engine.application.ports.settlement_port import SettlementPort, SettlementReceipt
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.spin_outcome import SpinOutcome

logger = logging.getLogger(__name__)


class SimulatedSettlement(SettlementPort):
    """Confirms every outcome immediately; receipts only go to the log"""

    mode = "simulated"

    def settle(self, player_id: str, outcome: SpinOutcome, seed_pair: SeedPair) -> SettlementReceipt:
        receipt = SettlementReceipt(
            settlement_id=f"sim-{uuid.uuid4().hex}",
            mode=self.mode,
            confirmed=True,
            details={"nonce": seed_pair.nonce, "total_win": outcome.total_win}
        )
        logger.info(
            f"Simulated settlement {receipt.settlement_id} for player {player_id}: "
            f"nonce={seed_pair.nonce} total_win={outcome.total_win}"
        )
        return receipt
