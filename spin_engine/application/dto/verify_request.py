"""Verify request DTO"""
from dataclasses import dataclass
from typing import List, Optional

from spin_engine.application.dto.spin_request import parse_nonce, require
from spin_engine.domain.errors import InvalidInput


@dataclass
class VerifyRequest:
    """Request DTO for auditor verification"""

    server_seed: str
    server_seed_hash: str
    client_seed: Optional[str] = None
    nonce: Optional[int] = None
    expected_grid: Optional[List[List[str]]] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'VerifyRequest':
        """Create from camelCase dictionary"""
        require(data, 'serverSeed', 'serverSeedHash')
        expected_grid = data.get('expectedGrid')
        if expected_grid is not None:
            require(data, 'clientSeed', 'nonce')
            if not isinstance(expected_grid, list) or not all(isinstance(reel, list) for reel in expected_grid):
                raise InvalidInput("expectedGrid must be a list of reels")
        client_seed = data.get('clientSeed')
        return cls(
            server_seed=str(data['serverSeed']),
            server_seed_hash=str(data['serverSeedHash']),
            client_seed=str(client_seed) if client_seed not in (None, "") else None,
            nonce=parse_nonce(data.get('nonce')),
            expected_grid=expected_grid
        )
