"""Loads the symbol table from a JSON file"""
import json
import logging
import os
from typing import Optional

from spin_engine.domain.entities.symbol_table import SymbolTable, default_symbol_table
from spin_engine.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_symbol_table(path: Optional[str] = None) -> SymbolTable:
    """
    Load a symbol table from JSON, or the built-in table when no path is given.

    Expected shape:
        {"jackpot_symbol": "high-tardi", "jackpot_multiplier": 50,
         "symbols": [{"id": "low-gear", "tier": "low", "payout": 5, "weight": 15}, ...]}

    Raises:
        ConfigurationError: missing file, malformed JSON or invalid table.
    """
    if not path:
        return default_symbol_table()
    if not os.path.exists(path):
        raise ConfigurationError(f"Symbol table file not found: {path}")
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, col {e.colno})")
    table = SymbolTable.from_dict(data)
    logger.info(f"Loaded {len(table)} symbols from {path}")
    return table
