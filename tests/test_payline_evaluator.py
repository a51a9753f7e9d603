import pytest

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.errors import ConfigurationError
from spin_engine.domain.services.payline_evaluator import PaylineEvaluator


def grid(*reels):
    return Grid.from_reels(reels)


def test_matching_line_pays_symbol_payout_times_bet(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    g = grid(["A", "A", "A"], ["B", "B", "B"], ["C", "C", "C"])
    assert evaluator.line_symbols(g, first_reel_line) == ["A", "A", "A"]
    assert evaluator.evaluate_line(g, first_reel_line, 5) == 50


def test_mismatch_pays_nothing(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    assert evaluator.evaluate_line(grid(["A", "B", "A"], ["B"] * 3, ["C"] * 3), first_reel_line, 5) == 0


def test_wildcards_complete_a_line(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    g = grid(["A", "M", "F"], ["B"] * 3, ["C"] * 3)
    assert evaluator.evaluate_line(g, first_reel_line, 5) == 50


def test_line_starting_on_wildcard_never_pays(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    g = grid(["M", "A", "A"], ["B"] * 3, ["C"] * 3)
    assert evaluator.evaluate_line(g, first_reel_line, 5) == 0


def test_all_wildcard_line_pays_nothing(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    g = grid(["M", "X", "F"], ["B"] * 3, ["C"] * 3)
    assert evaluator.evaluate_line(g, first_reel_line, 5) == 0


def test_evaluate_lines_keeps_only_winners_in_id_order(small_table, paylines):
    evaluator = PaylineEvaluator(small_table)
    # rows 0 and 1 are complete lines across the three reels
    g = grid(["A", "B", "C"], ["A", "B", "A"], ["A", "B", "B"])
    wins = evaluator.evaluate_lines(g, reversed(paylines), 10)
    assert list(wins) == [1, 2]
    assert wins == {1: 100, 2: 20}


def test_payline_length_must_match_reels(small_table):
    evaluator = PaylineEvaluator(small_table)
    short = Payline(11, ((0, 0), (1, 0)))
    with pytest.raises(ConfigurationError):
        evaluator.evaluate_line(grid(["A"] * 3, ["A"] * 3, ["A"] * 3), short, 5)


def test_payline_outside_grid(small_table):
    evaluator = PaylineEvaluator(small_table)
    outside = Payline(12, ((0, 0), (1, 0), (2, 3)))
    with pytest.raises(ConfigurationError):
        evaluator.evaluate_line(grid(["A"] * 3, ["A"] * 3, ["A"] * 3), outside, 5)


def test_unknown_symbol_is_configuration_error(small_table, first_reel_line):
    evaluator = PaylineEvaluator(small_table)
    with pytest.raises(ConfigurationError):
        evaluator.evaluate_line(grid(["Q", "Q", "Q"], ["A"] * 3, ["A"] * 3), first_reel_line, 5)
