import hashlib

import pytest

from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.errors import InvalidInput
from spin_engine.domain.services import hash_commitment

ABC_SHA256 = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_commit_is_sha256_hex():
    assert hash_commitment.commit("abc") == ABC_SHA256
    assert hash_commitment.commit(b"abc") == ABC_SHA256


def test_verify_matching_seed():
    assert hash_commitment.verify("abc", hashlib.sha256(b"abc").hexdigest()) is True


def test_verify_wrong_seed():
    assert hash_commitment.verify("abc", hashlib.sha256(b"xyz").hexdigest()) is False


def test_verify_is_case_sensitive_hex():
    assert hash_commitment.verify("abc", ABC_SHA256.upper()) is False


@pytest.mark.parametrize("secret", ["", b"", None, 42])
def test_commit_rejects_empty_or_non_string(secret):
    with pytest.raises(InvalidInput):
        hash_commitment.commit(secret)


def test_verify_rejects_non_string_commitment():
    with pytest.raises(InvalidInput):
        hash_commitment.verify("abc", None)


def test_generated_server_seed_matches_its_commitment():
    seed, commitment = hash_commitment.generate_server_seed()
    assert len(seed) == 64
    assert hash_commitment.verify(seed, commitment)


def test_generated_seeds_differ():
    assert hash_commitment.generate_server_seed()[0] != hash_commitment.generate_server_seed()[0]
    assert hash_commitment.generate_client_seed() != hash_commitment.generate_client_seed()


def test_seed_pair_matches_its_commitment():
    assert SeedPair("abc", ABC_SHA256, "client").matches_commitment()
    assert not SeedPair("abd", ABC_SHA256, "client").matches_commitment()
