import hashlib

import pytest

from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.errors import InvalidInput
from spin_engine.domain.services import hash_commitment, random_stream


def expected_draw(message: bytes) -> float:
    return (int.from_bytes(hashlib.sha256(message).digest()[:8], "big") >> 11) / 2 ** 53


def test_draw_message_adds_index_to_nonce():
    pair = SeedPair("server", hash_commitment.commit("server"), "client", 5)
    assert random_stream.draw_message(pair, 0) == b"server:client:5"
    assert random_stream.draw_message(pair, 2) == b"server:client:7"


def test_draw_uses_first_eight_bytes_big_endian():
    pair = SeedPair("server", hash_commitment.commit("server"), "client", 0)
    assert random_stream.draw(pair, 3) == expected_draw(b"server:client:3")


def test_draws_are_deterministic(seed_pair):
    assert list(random_stream.draws(seed_pair, 20)) == list(random_stream.draws(seed_pair, 20))


def test_draws_in_unit_interval(seed_pair):
    for value in random_stream.draws(seed_pair, 500):
        assert 0.0 <= value < 1.0


def test_client_seed_changes_stream(seed_pair):
    other = SeedPair(seed_pair.server_seed, seed_pair.server_seed_hash, "another-client", 0)
    assert list(random_stream.draws(seed_pair, 9)) != list(random_stream.draws(other, 9))


def test_shifted_nonce_shifts_window(seed_pair):
    shifted = seed_pair.with_nonce(9)
    assert random_stream.draw(shifted, 0) == random_stream.draw(seed_pair, 9)


@pytest.mark.parametrize("index", [-1, 1.5, True])
def test_rejects_bad_draw_index(seed_pair, index):
    with pytest.raises(InvalidInput):
        random_stream.draw(seed_pair, index)


@pytest.mark.parametrize("value, expected", [
    (0, 0.0),
    (1 << 63, 0.5),
    ((1 << 11) - 1, 0.0),
])
def test_unit_interval_mapping(value, expected):
    assert random_stream.to_unit_interval(value) == expected


def test_largest_prefix_stays_below_one():
    top = random_stream.to_unit_interval(2 ** 64 - 1)
    assert top < 1.0
    assert top == 1.0 - 2 ** -53
