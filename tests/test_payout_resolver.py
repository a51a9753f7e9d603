import pytest

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.errors import ConfigurationError, InvalidBet
from spin_engine.domain.services.payout_resolver import PayoutResolver, validate_bet


def grid(*reels):
    return Grid.from_reels(reels)


@pytest.fixture
def resolver(small_table):
    return PayoutResolver(small_table, min_bet=5, max_bet=100)


def test_single_multiplier_applies_to_line_sum(resolver, paylines):
    # top row B,B,B pays 2 x 10 = 20; the 5x sits on reel 2
    outcome = resolver.resolve(grid(["B", "A", "C"], ["B", "C", "A"], ["B", "A", "M"]), 10, paylines)
    assert outcome.per_line_wins == {1: 20}
    assert outcome.multiplier_applied == 5
    assert outcome.total_win == 100
    assert not outcome.is_jackpot


def test_highest_multiplier_wins_not_product(resolver, paylines):
    outcome = resolver.resolve(grid(["B", "A", "C"], ["B", "C", "X"], ["B", "M", "A"]), 10, paylines)
    assert outcome.multiplier_applied == 5
    assert outcome.total_win == 100


def test_multiplier_without_line_win(resolver, paylines):
    outcome = resolver.resolve(grid(["A", "B", "C"], ["B", "M", "A"], ["B", "A", "C"]), 10, paylines)
    assert outcome.total_win == 0
    assert outcome.multiplier_applied == 1
    assert outcome.winning_payline_ids == ()


def test_jackpot_overrides_line_wins(resolver, paylines):
    outcome = resolver.resolve(grid(["J"] * 3, ["J"] * 3, ["J"] * 3), 10, paylines)
    assert outcome.is_jackpot
    assert outcome.total_win == 10 * 50
    assert outcome.winning_payline_ids == (1, 2, 3, 4, 5)
    assert sum(outcome.per_line_wins.values()) == pytest.approx(outcome.total_win)


def test_eight_jackpot_symbols_is_not_a_jackpot(resolver, paylines):
    outcome = resolver.resolve(grid(["J"] * 3, ["J"] * 3, ["J", "J", "A"]), 10, paylines)
    assert not outcome.is_jackpot
    # rows 0 and 1 plus the rising diagonal still pay as lines
    assert outcome.winning_payline_ids == (1, 2, 5)
    assert outcome.total_win == 3 * 50 * 10


def test_free_spins_awarded_on_a_loss(resolver, paylines):
    outcome = resolver.resolve(grid(["A", "F", "C"], ["B", "C", "F"], ["B", "C", "A"]), 10, paylines)
    assert outcome.total_win == 0
    assert outcome.free_spins_awarded == 2


def test_bet_bounds_are_inclusive(resolver, paylines):
    g = grid(["A", "B", "C"], ["B", "C", "A"], ["C", "A", "B"])
    assert resolver.resolve(g, 5, paylines).bet_amount == 5
    assert resolver.resolve(g, 100, paylines).bet_amount == 100


@pytest.mark.parametrize("bet", [4.99, 100.01, 0, -5, "10", None, True, float("nan")])
def test_invalid_bet(bet):
    with pytest.raises(InvalidBet):
        validate_bet(bet, 5, 100)


def test_wrong_grid_shape(resolver, paylines):
    with pytest.raises(ConfigurationError):
        resolver.resolve(grid(["A"] * 3, ["A"] * 3), 10, paylines)


def test_no_paylines(resolver):
    with pytest.raises(ConfigurationError):
        resolver.resolve(grid(["A"] * 3, ["B"] * 3, ["C"] * 3), 10, [])


def test_invalid_bet_bounds(small_table):
    with pytest.raises(ConfigurationError):
        PayoutResolver(small_table, min_bet=50, max_bet=10)
