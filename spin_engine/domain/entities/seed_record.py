"""Per-player seed record held by the seed store"""
from dataclasses import dataclass, field, replace
from typing import Optional
import time

from spin_engine.domain.entities.seed_pair import SeedPair


@dataclass(frozen=True)
class SeedRecord:
    """Active (or retired) seed pair for a player plus the next free nonce"""

    player_id: str
    server_seed: str
    server_seed_hash: str
    client_seed: str
    next_nonce: int = 0
    created_at: float = field(default_factory=time.time)
    revealed_at: Optional[float] = None

    @property
    def is_revealed(self) -> bool:
        return self.revealed_at is not None

    def seed_pair(self, nonce: int) -> SeedPair:
        return SeedPair(
            server_seed=self.server_seed,
            server_seed_hash=self.server_seed_hash,
            client_seed=self.client_seed,
            nonce=nonce
        )

    def revealed(self, at: Optional[float] = None) -> 'SeedRecord':
        return replace(self, revealed_at=at if at is not None else time.time())

    def to_dict(self) -> dict:
        """Convert to dictionary for storage"""
        return {
            "player_id": self.player_id,
            "server_seed": self.server_seed,
            "server_seed_hash": self.server_seed_hash,
            "client_seed": self.client_seed,
            "next_nonce": self.next_nonce,
            "created_at": self.created_at,
            "revealed_at": self.revealed_at
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SeedRecord':
        """Create from dictionary"""
        return cls(
            player_id=data.get("player_id"),
            server_seed=data.get("server_seed"),
            server_seed_hash=data.get("server_seed_hash"),
            client_seed=data.get("client_seed"),
            next_nonce=data.get("next_nonce", 0),
            created_at=data.get("created_at", time.time()),
            revealed_at=data.get("revealed_at")
        )
