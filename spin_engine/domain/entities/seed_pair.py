"""Seed pair entity"""
from dataclasses import dataclass, replace

from spin_engine.domain.errors import InvalidInput
from spin_engine.domain.services import hash_commitment


@dataclass(frozen=True)
class SeedPair:
    """Server seed, client seed and nonce feeding one spin's draws"""

    server_seed: str
    server_seed_hash: str
    client_seed: str
    nonce: int = 0

    def __post_init__(self):
        for name in ("server_seed", "server_seed_hash", "client_seed"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise InvalidInput(f"{name} must be a non-empty string")
        if isinstance(self.nonce, bool) or not isinstance(self.nonce, int) or self.nonce < 0:
            raise InvalidInput("nonce must be a non-negative integer")

    def matches_commitment(self) -> bool:
        """True when the server seed hashes to the published commitment"""
        return hash_commitment.verify(self.server_seed, self.server_seed_hash)

    def with_nonce(self, nonce: int) -> 'SeedPair':
        """Copy of this pair at a different nonce"""
        return replace(self, nonce=nonce)

    def public_view(self) -> dict:
        """Fields that may be shown before the server seed is revealed"""
        return {
            "server_seed_hash": self.server_seed_hash,
            "client_seed": self.client_seed,
            "nonce": self.nonce
        }
