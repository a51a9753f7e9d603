"""Payout resolution: line wins, global multiplier, jackpot override, free spins"""
import logging
import math
from typing import Sequence, Tuple

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.entities.spin_outcome import SpinOutcome
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import ConfigurationError, InvalidBet
from spin_engine.domain.services.payline_evaluator import PaylineEvaluator

logger = logging.getLogger(__name__)

DEFAULT_MIN_BET = 5
DEFAULT_MAX_BET = 100


def validate_bet(bet_amount, min_bet: float = DEFAULT_MIN_BET, max_bet: float = DEFAULT_MAX_BET) -> float:
    """Return the bet as a float or raise InvalidBet"""
    if isinstance(bet_amount, bool) or not isinstance(bet_amount, (int, float)):
        raise InvalidBet(f"Bet amount must be a number, got {bet_amount!r}")
    if not math.isfinite(bet_amount):
        raise InvalidBet("Bet amount must be finite")
    if bet_amount < min_bet or bet_amount > max_bet:
        raise InvalidBet(
            f"Bet amount {bet_amount} outside allowed range [{min_bet}, {max_bet}]",
            details={"min_bet": min_bet, "max_bet": max_bet}
        )
    return float(bet_amount)


class PayoutResolver:
    """Turns a grid and bet into a SpinOutcome"""

    def __init__(self, symbol_table: SymbolTable, min_bet: float = DEFAULT_MIN_BET,
                 max_bet: float = DEFAULT_MAX_BET, reel_count: int = 3, row_count: int = 3):
        if min_bet <= 0 or max_bet < min_bet:
            raise ConfigurationError(f"Invalid bet bounds [{min_bet}, {max_bet}]")
        self.symbol_table = symbol_table
        self.evaluator = PaylineEvaluator(symbol_table)
        self.min_bet = min_bet
        self.max_bet = max_bet
        self.reel_count = reel_count
        self.row_count = row_count

    def scan_specials(self, grid: Grid) -> Tuple[int, int]:
        """Highest multiplier on the grid (1 if none) and total free spins"""
        highest_multiplier = 1
        free_spins = 0
        for _, symbol_id in grid.cells():
            symbol = self.symbol_table.get(symbol_id)
            if symbol.is_multiplier:
                highest_multiplier = max(highest_multiplier, symbol.multiplier_value)
            if symbol.is_free_spin:
                free_spins += symbol.free_spin_count
        return highest_multiplier, free_spins

    def is_jackpot(self, grid: Grid) -> bool:
        jackpot_id = self.symbol_table.jackpot_symbol_id
        return all(symbol == jackpot_id for _, symbol in grid.cells())

    def resolve(self, grid: Grid, bet_amount: float, paylines: Sequence[Payline]) -> SpinOutcome:
        """Evaluate a grid; raises before computing anything on bad input"""
        bet = validate_bet(bet_amount, self.min_bet, self.max_bet)
        grid.validate(self.reel_count, self.row_count)
        paylines = sorted(paylines, key=lambda p: p.id)
        if not paylines:
            raise ConfigurationError("At least one payline is required")

        highest_multiplier, free_spins = self.scan_specials(grid)

        if self.is_jackpot(grid):
            total_win = bet * self.symbol_table.jackpot_multiplier * highest_multiplier
            share = total_win / len(paylines)
            logger.info(f"Jackpot hit: bet={bet} total_win={total_win}")
            return SpinOutcome(
                grid=grid,
                bet_amount=bet,
                per_line_wins={p.id: share for p in paylines},
                winning_payline_ids=tuple(p.id for p in paylines),
                multiplier_applied=highest_multiplier,
                is_jackpot=True,
                free_spins_awarded=free_spins,
                total_win=total_win
            )

        per_line_wins = self.evaluator.evaluate_lines(grid, paylines, bet)
        total_win = sum(per_line_wins.values())

        multiplier_applied = 1
        if total_win > 0 and highest_multiplier > 1:
            total_win *= highest_multiplier
            multiplier_applied = highest_multiplier

        return SpinOutcome(
            grid=grid,
            bet_amount=bet,
            per_line_wins=per_line_wins,
            winning_payline_ids=tuple(per_line_wins.keys()),
            multiplier_applied=multiplier_applied,
            is_jackpot=False,
            free_spins_awarded=free_spins,
            total_win=float(total_win)
        )
