"""Payline evaluation"""
from typing import Dict, Iterable

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import ConfigurationError


class PaylineEvaluator:
    """Evaluates paylines against a grid

    Multiplier and free-spin symbols are wildcards: they never break a match and
    never anchor one, so a line starting on a special symbol never pays.
    """

    def __init__(self, symbol_table: SymbolTable):
        self.symbol_table = symbol_table
        self.wildcards = symbol_table.wildcard_ids

    def line_symbols(self, grid: Grid, payline: Payline) -> list:
        """Symbols at the payline's cells, in payline order"""
        if len(payline.cells) != grid.reel_count:
            raise ConfigurationError(
                f"Payline {payline.id} has {len(payline.cells)} cells, grid has {grid.reel_count} reels"
            )
        symbols = []
        for reel, row in payline.cells:
            if not grid.contains(reel, row):
                raise ConfigurationError(f"Payline {payline.id} cell ({reel}, {row}) is outside the grid")
            symbols.append(grid.symbol_at(reel, row))
        return symbols

    def evaluate_line(self, grid: Grid, payline: Payline, bet_amount: float) -> float:
        """Win amount for one payline (0 if no win)"""
        symbols = self.line_symbols(grid, payline)
        anchor = symbols[0]
        if anchor in self.wildcards:
            return 0

        if all(symbol == anchor or symbol in self.wildcards for symbol in symbols):
            payout = self.symbol_table.get(anchor).payout_multiple
            if payout:
                return payout * bet_amount
        return 0

    def evaluate_lines(self, grid: Grid, paylines: Iterable[Payline], bet_amount: float) -> Dict[int, float]:
        """Nonzero wins keyed by payline id, ascending"""
        wins = {}
        for payline in sorted(paylines, key=lambda p: p.id):
            amount = self.evaluate_line(grid, payline, bet_amount)
            if amount > 0:
                wins[payline.id] = amount
        return wins
