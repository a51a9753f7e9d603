"""Deterministic random stream derived from a seed pair

draw(pair, i) = (uint64(SHA-256("server:client:{nonce + i}")[:8]) >> 11) / 2**53

The top 53 bits of the prefix fill a double exactly, so every draw lies in
[0, 1). Anyone holding the revealed server seed can recompute every draw.
"""
import hashlib
from typing import Iterator

from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.errors import InvalidInput

SEPARATOR = ":"
PREFIX_BYTES = 8
MANTISSA_BITS = 53
DRAW_SHIFT = PREFIX_BYTES * 8 - MANTISSA_BITS
DRAW_SCALE = 2.0 ** -MANTISSA_BITS


def draw_message(seed_pair: SeedPair, draw_index: int) -> bytes:
    """Bytes hashed for a single draw"""
    if isinstance(draw_index, bool) or not isinstance(draw_index, int) or draw_index < 0:
        raise InvalidInput("draw_index must be a non-negative integer")
    counter = seed_pair.nonce + draw_index
    return SEPARATOR.join((seed_pair.server_seed, seed_pair.client_seed, str(counter))).encode("utf-8")


def to_unit_interval(value: int) -> float:
    """Map a 64-bit unsigned integer onto [0, 1) without rounding up to 1.0"""
    return (value >> DRAW_SHIFT) * DRAW_SCALE


def draw(seed_pair: SeedPair, draw_index: int) -> float:
    """Return a value in [0, 1) for the given draw index"""
    digest = hashlib.sha256(draw_message(seed_pair, draw_index)).digest()
    return to_unit_interval(int.from_bytes(digest[:PREFIX_BYTES], "big"))


def draws(seed_pair: SeedPair, count: int) -> Iterator[float]:
    """Yield draws for indices 0..count-1"""
    for index in range(count):
        yield draw(seed_pair, index)
