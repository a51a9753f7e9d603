"""Hash commitment for server seeds

A server seed is committed to by publishing SHA-256(seed) before any spin uses
it. After settlement the seed is revealed and anyone can recompute the digest.
"""
import hashlib
import hmac
import secrets
from typing import Tuple, Union

from spin_engine.domain.errors import InvalidInput

SERVER_SEED_BYTES = 32
CLIENT_SEED_BYTES = 16


def _encode(secret: Union[str, bytes]) -> bytes:
    if isinstance(secret, bytes):
        data = secret
    elif isinstance(secret, str):
        data = secret.encode("utf-8")
    else:
        raise InvalidInput(f"Secret must be str or bytes, got {type(secret).__name__}")
    if not data:
        raise InvalidInput("Secret must not be empty")
    return data


def commit(secret: Union[str, bytes]) -> str:
    """Return the hex SHA-256 commitment for a secret"""
    return hashlib.sha256(_encode(secret)).hexdigest()


def verify(secret: Union[str, bytes], commitment: str) -> bool:
    """Check a revealed secret against a published commitment"""
    if not isinstance(commitment, str):
        raise InvalidInput("Commitment must be a hex string")
    return hmac.compare_digest(commit(secret), commitment)


def generate_server_seed() -> Tuple[str, str]:
    """Generate a fresh server seed and its commitment"""
    seed = secrets.token_hex(SERVER_SEED_BYTES)
    return seed, commit(seed)


def generate_client_seed() -> str:
    """Generate a client seed for players who do not supply one"""
    return secrets.token_hex(CLIENT_SEED_BYTES)
