"""Spin engine errors"""
from typing import Any, Dict, Optional


class SpinEngineError(Exception):
    """Base error for the spin engine"""

    code = "internal"
    status_code = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}

    def to_dict(self) -> dict:
        """Convert to error payload"""
        result = {"error": self.message, "code": self.code}
        if self.details:
            result["details"] = self.details
        return result


class InvalidInput(SpinEngineError):
    """Malformed or empty cryptographic or request input"""

    code = "invalid_input"
    status_code = 400


class InvalidBet(SpinEngineError):
    """Bet amount outside the configured bounds"""

    code = "invalid_bet"
    status_code = 400


class ConfigurationError(SpinEngineError):
    """Empty symbol table, malformed payline or grid dimensions"""

    code = "configuration_error"
    status_code = 500


class NonceReuse(SpinEngineError):
    """Nonce already consumed (or not the next free one) under a server seed"""

    code = "nonce_reuse"
    status_code = 409


class CommitmentMismatch(SpinEngineError):
    """Server seed hash is stale or unknown for the player"""

    code = "commitment_mismatch"
    status_code = 409


class SeedNotFound(SpinEngineError):
    """No active seed pair for a player"""

    code = "seed_not_found"
    status_code = 404


class SettlementError(SpinEngineError):
    """Settlement backend rejected or failed to confirm an outcome"""

    code = "settlement_error"
    status_code = 502
