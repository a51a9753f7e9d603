"""Seed lifecycle use case: publish, rotate and reveal server seeds"""
import logging
from typing import Optional

from spin_engine import metrics
from spin_engine.application.dto.seed_response import SeedResponse
from spin_engine.application.ports.seed_store_port import SeedStorePort
from spin_engine.domain.errors import InvalidInput

logger = logging.getLogger(__name__)


class SeedLifecycleUseCase:
    """Use case for managing a player's seed commitments"""

    def __init__(self, seed_store: SeedStorePort):
        self.seed_store = seed_store

    def current(self, player_id: str) -> SeedResponse:
        """Active commitment for a player, creating the first pair on demand"""
        self._check_player(player_id)
        record = self.seed_store.get_active(player_id)
        if record is None:
            record = self.seed_store.create(player_id)
            logger.info(f"Published first seed commitment for player {player_id}")
        return SeedResponse.from_record(record)

    def rotate(self, player_id: str, client_seed: Optional[str] = None) -> SeedResponse:
        """Reveal the active server seed and publish a new commitment"""
        self._check_player(player_id)
        revealed, new_record = self.seed_store.rotate(player_id, client_seed)
        metrics.SEED_ROTATIONS_TOTAL.inc()
        logger.info(
            f"Rotated seed for player {player_id} after {revealed.next_nonce} nonce(s); "
            f"new commitment {new_record.server_seed_hash[:16]}"
        )
        return SeedResponse.from_record(new_record, revealed)

    def set_client_seed(self, player_id: str, client_seed: str) -> SeedResponse:
        """Change the client seed of a commitment that has not been used yet"""
        self._check_player(player_id)
        if not isinstance(client_seed, str) or not client_seed:
            raise InvalidInput("clientSeed must be a non-empty string")
        record = self.seed_store.set_client_seed(player_id, client_seed)
        return SeedResponse.from_record(record)

    def _check_player(self, player_id: str) -> None:
        if not isinstance(player_id, str) or not player_id:
            raise InvalidInput("player id is required")
