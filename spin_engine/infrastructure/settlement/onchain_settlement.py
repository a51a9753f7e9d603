"""On-chain settlement through an HTTP settlement gateway"""
import os
import logging
import requests
from typing import Any, Dict

from spin_engine.application.ports.settlement_port import SettlementPort, SettlementReceipt
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.spin_outcome import SpinOutcome
from spin_engine.domain.errors import SettlementError

logger = logging.getLogger(__name__)


class OnChainSettlement(SettlementPort):
    """Submits outcomes to the gateway that signs and confirms the settlement transaction"""

    mode = "onchain"

    def __init__(self, base_url: str = None, timeout: float = 10, session: requests.Session = None):
        self.base_url = (base_url or os.environ.get(
            'SETTLEMENT_GATEWAY_URL', 'http://settlement-gateway:8090'
        )).rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _payload(self, player_id: str, outcome: SpinOutcome, seed_pair: SeedPair) -> Dict[str, Any]:
        return {
            "player_id": player_id,
            "bet_amount": outcome.bet_amount,
            "total_win": outcome.total_win,
            "free_spins_awarded": outcome.free_spins_awarded,
            "is_jackpot": outcome.is_jackpot,
            "grid": outcome.grid.to_list(),
            "server_seed_hash": seed_pair.server_seed_hash,
            "client_seed": seed_pair.client_seed,
            "nonce": seed_pair.nonce
        }

    def settle(self, player_id: str, outcome: SpinOutcome, seed_pair: SeedPair) -> SettlementReceipt:
        """POST the outcome and wait for the gateway's confirmation"""
        try:
            response = self.session.post(
                f"{self.base_url}/settlements",
                json=self._payload(player_id, outcome, seed_pair),
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Settlement gateway unreachable: {e}")
            raise SettlementError(f"Settlement gateway unreachable: {e}")

        if response.status_code not in (200, 201):
            logger.warning(f"Settlement rejected: {response.status_code} - {response.text}")
            raise SettlementError(
                f"Settlement rejected with status {response.status_code}",
                details={"status_code": response.status_code}
            )

        result = response.json()
        transaction_id = result.get('transaction_id')
        if not transaction_id:
            raise SettlementError("Settlement gateway returned no transaction id")
        logger.info(f"Settled spin for player {player_id}: {transaction_id}")
        return SettlementReceipt(
            settlement_id=transaction_id,
            mode=self.mode,
            confirmed=bool(result.get('confirmed', False)),
            details={k: v for k, v in result.items() if k not in ('transaction_id', 'confirmed')}
        )
