"""RTP simulation request DTO"""
from dataclasses import dataclass
from typing import Optional

from spin_engine.application.dto.spin_request import parse_bet
from spin_engine.domain.errors import InvalidInput

MAX_SIMULATION_SPINS = 200_000


@dataclass
class SimulationRequest:
    """Request DTO for a Monte-Carlo RTP run"""

    spins: int = 10_000
    bet_amount: float = 10.0
    server_seed: Optional[str] = None
    client_seed: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationRequest':
        """Create from camelCase dictionary"""
        try:
            spins = int(data.get('spins', 10_000))
        except (TypeError, ValueError):
            raise InvalidInput("spins must be an integer")
        if spins <= 0 or spins > MAX_SIMULATION_SPINS:
            raise InvalidInput(f"spins must be between 1 and {MAX_SIMULATION_SPINS}")
        return cls(
            spins=spins,
            bet_amount=parse_bet(data.get('betAmount', 10.0)),
            server_seed=data.get('serverSeed') or None,
            client_seed=data.get('clientSeed') or None
        )
