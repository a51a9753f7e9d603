"""Slot machine symbol table with tiers, payouts, weights and special effects"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from spin_engine.domain.errors import ConfigurationError


class Tier(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"
    SPECIAL = "special"


@dataclass(frozen=True)
class SymbolDefinition:
    """One symbol: payout per line (multiple of bet), selection weight and effects"""

    id: str
    name: str
    tier: Tier
    payout_multiple: float
    weight: float
    multiplier_value: Optional[int] = None
    free_spin_count: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ConfigurationError("Symbol id must be a non-empty string")
        if not isinstance(self.tier, Tier):
            raise ConfigurationError(f"Symbol {self.id}: unknown tier {self.tier!r}")
        if not isinstance(self.weight, (int, float)) or self.weight <= 0:
            raise ConfigurationError(f"Symbol {self.id}: weight must be a positive number")
        if not isinstance(self.payout_multiple, (int, float)) or self.payout_multiple < 0:
            raise ConfigurationError(f"Symbol {self.id}: payout_multiple must be non-negative")
        if self.multiplier_value is not None and (
                not isinstance(self.multiplier_value, int) or self.multiplier_value <= 1):
            raise ConfigurationError(f"Symbol {self.id}: multiplier_value must be an integer > 1")
        if self.free_spin_count is not None and (
                not isinstance(self.free_spin_count, int) or self.free_spin_count <= 0):
            raise ConfigurationError(f"Symbol {self.id}: free_spin_count must be a positive integer")

    @property
    def is_multiplier(self) -> bool:
        return self.multiplier_value is not None

    @property
    def is_free_spin(self) -> bool:
        return self.free_spin_count is not None

    @property
    def is_wildcard(self) -> bool:
        """Special symbols never break a line and never anchor one"""
        return self.is_multiplier or self.is_free_spin

    def to_dict(self) -> dict:
        result = {
            "id": self.id,
            "name": self.name,
            "tier": self.tier.value,
            "payout": self.payout_multiple,
            "weight": self.weight
        }
        if self.multiplier_value is not None:
            result["multiplier"] = self.multiplier_value
        if self.free_spin_count is not None:
            result["free_spins"] = self.free_spin_count
        return result

    @classmethod
    def from_dict(cls, data: dict) -> 'SymbolDefinition':
        """Create from a config mapping"""
        try:
            tier = Tier(data.get("tier", "low"))
        except ValueError:
            raise ConfigurationError(f"Symbol {data.get('id')}: unknown tier {data.get('tier')!r}")
        return cls(
            id=data.get("id", ""),
            name=data.get("name", data.get("id", "")),
            tier=tier,
            payout_multiple=data.get("payout", 0),
            weight=data.get("weight", 0),
            multiplier_value=data.get("multiplier"),
            free_spin_count=data.get("free_spins")
        )


class SymbolTable:
    """Immutable symbol configuration, loaded once"""

    def __init__(self, symbols: Iterable[SymbolDefinition], jackpot_symbol_id: str,
                 jackpot_multiplier: float = 50):
        ordered = sorted(symbols, key=lambda s: s.id)
        if not ordered:
            raise ConfigurationError("Symbol table must not be empty")
        by_id: Dict[str, SymbolDefinition] = {}
        for symbol in ordered:
            if symbol.id in by_id:
                raise ConfigurationError(f"Duplicate symbol id {symbol.id}")
            by_id[symbol.id] = symbol
        if jackpot_symbol_id not in by_id:
            raise ConfigurationError(f"Jackpot symbol {jackpot_symbol_id} is not in the table")
        if by_id[jackpot_symbol_id].is_wildcard:
            raise ConfigurationError("Jackpot symbol cannot be a special symbol")
        if not isinstance(jackpot_multiplier, (int, float)) or jackpot_multiplier <= 0:
            raise ConfigurationError("jackpot_multiplier must be positive")

        self._symbols: Tuple[SymbolDefinition, ...] = tuple(ordered)
        self._by_id = by_id
        self.jackpot_symbol_id = jackpot_symbol_id
        self.jackpot_multiplier = jackpot_multiplier

        cumulative = []
        running = 0.0
        for symbol in self._symbols:
            running += symbol.weight
            cumulative.append((symbol.id, running))
        self._cumulative: Tuple[Tuple[str, float], ...] = tuple(cumulative)
        self._wildcards: FrozenSet[str] = frozenset(s.id for s in self._symbols if s.is_wildcard)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol_id: str) -> bool:
        return symbol_id in self._by_id

    def get(self, symbol_id: str) -> SymbolDefinition:
        """Get a symbol definition by id"""
        try:
            return self._by_id[symbol_id]
        except KeyError:
            raise ConfigurationError(f"Unknown symbol {symbol_id}")

    @property
    def ids(self) -> List[str]:
        return [s.id for s in self._symbols]

    def sorted_symbols(self) -> Tuple[SymbolDefinition, ...]:
        """Symbols in ascending id order"""
        return self._symbols

    @property
    def wildcard_ids(self) -> FrozenSet[str]:
        return self._wildcards

    @property
    def total_weight(self) -> float:
        return self._cumulative[-1][1]

    def cumulative_weights(self) -> Tuple[Tuple[str, float], ...]:
        """(symbol_id, cumulative_weight) pairs sorted by symbol id"""
        return self._cumulative

    def probability(self, symbol_id: str) -> float:
        """Normalised selection probability for a symbol"""
        return self.get(symbol_id).weight / self.total_weight

    def to_dict(self) -> dict:
        return {
            "symbols": [s.to_dict() for s in self._symbols],
            "jackpot_symbol": self.jackpot_symbol_id,
            "jackpot_multiplier": self.jackpot_multiplier
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SymbolTable':
        """Create from a config mapping (e.g. loaded JSON)"""
        if not isinstance(data, dict):
            raise ConfigurationError("Symbol table config must be a mapping")
        symbols = data.get("symbols")
        if not isinstance(symbols, list):
            raise ConfigurationError("Symbol table config needs a 'symbols' list")
        return cls(
            symbols=[SymbolDefinition.from_dict(s) for s in symbols],
            jackpot_symbol_id=data.get("jackpot_symbol", ""),
            jackpot_multiplier=data.get("jackpot_multiplier", 50)
        )


DEFAULT_SYMBOLS = [
    SymbolDefinition("low-gear", "Gear", Tier.LOW, payout_multiple=5, weight=15),
    SymbolDefinition("low-token", "Token", Tier.LOW, payout_multiple=8, weight=15),
    SymbolDefinition("low-badge", "Badge", Tier.LOW, payout_multiple=10, weight=15),
    SymbolDefinition("mid-robot", "Robot", Tier.MID, payout_multiple=15, weight=10),
    SymbolDefinition("mid-helmet", "Helmet", Tier.MID, payout_multiple=20, weight=10),
    SymbolDefinition("mid-future", "Future Tech", Tier.MID, payout_multiple=25, weight=10),
    SymbolDefinition("high-tardi", "TARDI Logo", Tier.HIGH, payout_multiple=50, weight=5),
    SymbolDefinition("multiplier-2x", "2x Multiplier", Tier.SPECIAL, payout_multiple=0, weight=5,
                     multiplier_value=2),
    SymbolDefinition("multiplier-5x", "5x Multiplier", Tier.SPECIAL, payout_multiple=0, weight=3,
                     multiplier_value=5),
    SymbolDefinition("multiplier-10x", "10x Multiplier", Tier.SPECIAL, payout_multiple=0, weight=2,
                     multiplier_value=10),
    SymbolDefinition("free-spin", "Free Spin", Tier.SPECIAL, payout_multiple=0, weight=10,
                     free_spin_count=1),
]

JACKPOT_SYMBOL_ID = "high-tardi"
JACKPOT_MULTIPLIER = 50


def default_symbol_table() -> SymbolTable:
    """Production symbol table"""
    return SymbolTable(DEFAULT_SYMBOLS, JACKPOT_SYMBOL_ID, JACKPOT_MULTIPLIER)
