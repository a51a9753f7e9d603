"""Seed lifecycle response DTO"""
from dataclasses import dataclass
from typing import Optional

from spin_engine.domain.entities.seed_record import SeedRecord


@dataclass
class SeedResponse:
    """Public view of a player's seed commitment, plus a revealed seed after rotation"""

    player_id: str
    server_seed_hash: str
    client_seed: str
    next_nonce: int
    revealed: Optional[SeedRecord] = None

    @classmethod
    def from_record(cls, record: SeedRecord, revealed: Optional[SeedRecord] = None) -> 'SeedResponse':
        return cls(
            player_id=record.player_id,
            server_seed_hash=record.server_seed_hash,
            client_seed=record.client_seed,
            next_nonce=record.next_nonce,
            revealed=revealed
        )

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        result = {
            "playerId": self.player_id,
            "serverSeedHash": self.server_seed_hash,
            "clientSeed": self.client_seed,
            "nextNonce": self.next_nonce
        }
        if self.revealed:
            result["revealed"] = {
                "serverSeed": self.revealed.server_seed,
                "serverSeedHash": self.revealed.server_seed_hash,
                "clientSeed": self.revealed.client_seed,
                "noncesUsed": self.revealed.next_nonce,
                "commitmentVerified": self.revealed.seed_pair(0).matches_commitment()
            }
        return result
