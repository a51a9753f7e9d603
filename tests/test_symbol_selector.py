from collections import Counter

import pytest

from spin_engine.domain.entities.symbol_table import SymbolDefinition, SymbolTable, Tier
from spin_engine.domain.errors import ConfigurationError
from spin_engine.domain.services.symbol_selector import select_grid, select_symbol


def test_select_symbol_interval_boundaries():
    cumulative = (("A", 1.0), ("B", 3.0))
    assert select_symbol(0.0, cumulative) == "A"
    assert select_symbol(0.33, cumulative) == "A"
    assert select_symbol(1 / 3, cumulative) == "B"
    assert select_symbol(0.999999, cumulative) == "B"


def test_select_symbol_empty_table():
    with pytest.raises(ConfigurationError):
        select_symbol(0.5, ())


def test_grid_shape_and_symbols(seed_pair, default_table):
    grid = select_grid(seed_pair, default_table)
    assert grid.reel_count == 3
    assert grid.row_count == 3
    assert all(symbol in default_table for symbol in grid.symbols())


def test_same_seed_pair_same_grid(seed_pair, default_table):
    assert select_grid(seed_pair, default_table) == select_grid(seed_pair, default_table)


def test_nonce_changes_grid(seed_pair, default_table):
    grids = {select_grid(seed_pair, default_table, nonce=n * 9) for n in range(10)}
    assert len(grids) > 1


def test_table_input_order_does_not_matter(seed_pair, default_table):
    reversed_table = SymbolTable(
        list(reversed(default_table.sorted_symbols())),
        default_table.jackpot_symbol_id,
        default_table.jackpot_multiplier
    )
    assert reversed_table.cumulative_weights() == default_table.cumulative_weights()
    assert select_grid(seed_pair, reversed_table) == select_grid(seed_pair, default_table)


def test_frequencies_follow_weights(seed_pair):
    table = SymbolTable(
        [
            SymbolDefinition("heavy", "Heavy", Tier.LOW, payout_multiple=1, weight=3),
            SymbolDefinition("light", "Light", Tier.LOW, payout_multiple=1, weight=1),
        ],
        jackpot_symbol_id="light"
    )
    counts = Counter()
    spins = 3000
    for n in range(spins):
        counts.update(select_grid(seed_pair, table, nonce=n * 9).symbols())
    share = counts["heavy"] / (spins * 9)
    assert abs(share - 0.75) < 0.02


def test_dominant_weight_wins_almost_every_cell(seed_pair):
    table = SymbolTable(
        [
            SymbolDefinition("common", "Common", Tier.LOW, payout_multiple=1, weight=1_000_000),
            SymbolDefinition("rare", "Rare", Tier.HIGH, payout_multiple=1, weight=1),
            SymbolDefinition("double", "2x", Tier.SPECIAL, payout_multiple=0, weight=1, multiplier_value=2),
            SymbolDefinition("free", "Free", Tier.SPECIAL, payout_multiple=0, weight=1, free_spin_count=1),
        ],
        jackpot_symbol_id="rare"
    )
    symbols = []
    for n in range(200):
        symbols.extend(select_grid(seed_pair, table, nonce=n * 9).symbols())
    assert symbols.count("common") >= len(symbols) - 1


def test_invalid_dimensions(seed_pair, default_table):
    with pytest.raises(ConfigurationError):
        select_grid(seed_pair, default_table, reel_count=0)
