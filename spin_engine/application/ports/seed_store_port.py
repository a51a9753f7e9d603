"""Seed store port (interface)"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.seed_record import SeedRecord


class SeedStorePort(ABC):
    """Port for per-player seed pairs and nonce counters

    Implementations are passed in by the caller and keyed by player id; there is
    no process-wide seed state.
    """

    @abstractmethod
    def get_active(self, player_id: str) -> Optional[SeedRecord]:
        """Get the player's active seed record, if any"""
        pass

    @abstractmethod
    def create(self, player_id: str, client_seed: Optional[str] = None) -> SeedRecord:
        """Create an active seed record; returns the existing one if present"""
        pass

    @abstractmethod
    def reserve_nonce(self, player_id: str, server_seed_hash: str, nonce: Optional[int] = None) -> SeedPair:
        """Atomically reserve and increment the next nonce under the given commitment.

        Raises CommitmentMismatch if the commitment is not active and NonceReuse if
        the nonce is not the next free one.
        """
        pass

    @abstractmethod
    def rotate(self, player_id: str, client_seed: Optional[str] = None) -> Tuple[SeedRecord, SeedRecord]:
        """Retire and reveal the active seed, publish a new one. Returns (revealed, new)"""
        pass

    @abstractmethod
    def set_client_seed(self, player_id: str, client_seed: str) -> SeedRecord:
        """Replace the client seed before any nonce is used under the current server seed"""
        pass
