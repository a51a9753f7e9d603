"""In-memory seed store implementation"""
import logging
import threading
import time
from dataclasses import replace
from typing import Dict, List, Optional, Tuple

from spin_engine.application.ports.seed_store_port import SeedStorePort
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.seed_record import SeedRecord
from spin_engine.domain.errors import CommitmentMismatch, InvalidInput, NonceReuse, SeedNotFound
from spin_engine.domain.services import hash_commitment

logger = logging.getLogger(__name__)

# One spin consumes nonce .. nonce + 8 as draw counters on a 3x3 grid
DEFAULT_NONCE_STRIDE = 9


def new_seed_record(player_id: str, client_seed: Optional[str] = None) -> SeedRecord:
    """Fresh record with a newly generated, committed server seed"""
    server_seed, server_seed_hash = hash_commitment.generate_server_seed()
    return SeedRecord(
        player_id=player_id,
        server_seed=server_seed,
        server_seed_hash=server_seed_hash,
        client_seed=client_seed or hash_commitment.generate_client_seed()
    )


class InMemorySeedStore(SeedStorePort):
    """Process-local seed store; one lock guards reserve-and-increment"""

    def __init__(self, nonce_stride: int = DEFAULT_NONCE_STRIDE):
        if nonce_stride <= 0:
            raise ValueError("nonce_stride must be positive")
        self.nonce_stride = nonce_stride
        self._active: Dict[str, SeedRecord] = {}
        self._revealed: Dict[str, List[SeedRecord]] = {}
        self._lock = threading.Lock()

    def get_active(self, player_id: str) -> Optional[SeedRecord]:
        with self._lock:
            return self._active.get(player_id)

    def create(self, player_id: str, client_seed: Optional[str] = None) -> SeedRecord:
        with self._lock:
            existing = self._active.get(player_id)
            if existing:
                return existing
            record = new_seed_record(player_id, client_seed)
            self._active[player_id] = record
            return record

    def reserve_nonce(self, player_id: str, server_seed_hash: str, nonce: Optional[int] = None) -> SeedPair:
        with self._lock:
            record = self._active.get(player_id)
            if record is None:
                raise SeedNotFound(f"No active seed pair for player {player_id}")
            if record.server_seed_hash != server_seed_hash:
                raise CommitmentMismatch(
                    "Server seed hash is not the active commitment",
                    details={"active_server_seed_hash": record.server_seed_hash}
                )
            if nonce is not None and nonce != record.next_nonce:
                raise NonceReuse(
                    f"Nonce {nonce} is not available; next nonce is {record.next_nonce}",
                    details={"next_nonce": record.next_nonce}
                )
            reserved = record.next_nonce
            self._active[player_id] = replace(record, next_nonce=reserved + self.nonce_stride)
            return record.seed_pair(reserved)

    def rotate(self, player_id: str, client_seed: Optional[str] = None) -> Tuple[SeedRecord, SeedRecord]:
        with self._lock:
            record = self._active.get(player_id)
            if record is None:
                raise SeedNotFound(f"No active seed pair for player {player_id}")
            revealed = record.revealed(time.time())
            new_record = new_seed_record(player_id, client_seed or record.client_seed)
            self._revealed.setdefault(player_id, []).append(revealed)
            self._active[player_id] = new_record
            return revealed, new_record

    def set_client_seed(self, player_id: str, client_seed: str) -> SeedRecord:
        with self._lock:
            record = self._active.get(player_id)
            if record is None:
                raise SeedNotFound(f"No active seed pair for player {player_id}")
            if record.next_nonce != 0:
                raise InvalidInput("Client seed can only change before the first spin under a server seed; rotate first")
            updated = replace(record, client_seed=client_seed)
            self._active[player_id] = updated
            return updated

    def revealed_seeds(self, player_id: str) -> List[SeedRecord]:
        """Retired seeds for a player, oldest first"""
        with self._lock:
            return list(self._revealed.get(player_id, []))
