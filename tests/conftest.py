import pytest

from spin_engine.domain.entities.payline import Payline, active_paylines
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.symbol_table import SymbolDefinition, SymbolTable, Tier, default_symbol_table
from spin_engine.domain.services import hash_commitment


@pytest.fixture
def small_table():
    """Small table: A/B/C pay, J is the jackpot, M/X multiply, F awards a free spin"""
    return SymbolTable(
        [
            SymbolDefinition("A", "Apple", Tier.LOW, payout_multiple=10, weight=10),
            SymbolDefinition("B", "Bell", Tier.LOW, payout_multiple=2, weight=10),
            SymbolDefinition("C", "Cherry", Tier.MID, payout_multiple=4, weight=5),
            SymbolDefinition("J", "Jackpot", Tier.HIGH, payout_multiple=50, weight=1),
            SymbolDefinition("M", "5x", Tier.SPECIAL, payout_multiple=0, weight=2, multiplier_value=5),
            SymbolDefinition("X", "2x", Tier.SPECIAL, payout_multiple=0, weight=2, multiplier_value=2),
            SymbolDefinition("F", "Free Spin", Tier.SPECIAL, payout_multiple=0, weight=2, free_spin_count=1),
        ],
        jackpot_symbol_id="J",
        jackpot_multiplier=50
    )


@pytest.fixture
def default_table():
    return default_symbol_table()


@pytest.fixture
def paylines():
    return active_paylines()


@pytest.fixture
def first_reel_line():
    return Payline(1, ((0, 0), (0, 1), (0, 2)), name="First reel")


@pytest.fixture
def seed_pair():
    server_seed = "a" * 64
    return SeedPair(server_seed, hash_commitment.commit(server_seed), "player-chosen-seed", 0)
