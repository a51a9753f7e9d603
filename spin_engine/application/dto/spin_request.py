"""Spin request DTO"""
from dataclasses import dataclass
from typing import Any, Optional

from spin_engine.domain.errors import InvalidBet, InvalidInput


def parse_bet(value: Any) -> float:
    """Coerce a bet from JSON into a float, raising InvalidBet on garbage"""
    if value is None or isinstance(value, bool):
        raise InvalidBet("Bet amount is required")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidBet(f"Bet amount must be a number, got {value!r}")


def parse_nonce(value: Any) -> Optional[int]:
    """Coerce an optional nonce into a non-negative int"""
    if value is None:
        return None
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidInput(f"nonce must be a non-negative integer, got {value!r}")
    try:
        nonce = int(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"nonce must be a non-negative integer, got {value!r}")
    if nonce < 0:
        raise InvalidInput(f"nonce must be a non-negative integer, got {value!r}")
    return nonce


def require(data: dict, *keys: str) -> None:
    """Raise InvalidInput naming every missing or empty key"""
    missing = [key for key in keys if data.get(key) in (None, "")]
    if missing:
        raise InvalidInput(
            f"Missing required fields: {', '.join(missing)}",
            details={"missing": missing}
        )


@dataclass
class SpinRequest:
    """Request DTO for a spin"""

    player_id: str
    server_seed_hash: str
    client_seed: str
    bet_amount: float
    nonce: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> 'SpinRequest':
        """Create from camelCase dictionary"""
        require(data, 'playerId', 'serverSeedHash', 'clientSeed')
        return cls(
            player_id=str(data['playerId']),
            server_seed_hash=str(data['serverSeedHash']),
            client_seed=str(data['clientSeed']),
            bet_amount=parse_bet(data.get('betAmount')),
            nonce=parse_nonce(data.get('nonce'))
        )
