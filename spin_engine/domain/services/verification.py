"""Audit verification of revealed seeds and recomputed grids

Read-only and side-effect free; any party holding the original commitment can
run it. A mismatch is a result, not an error.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from spin_engine.domain.entities.grid import Grid
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import InvalidInput
from spin_engine.domain.services import hash_commitment
from spin_engine.domain.services.symbol_selector import select_grid

# (reel, row, expected symbol, recomputed symbol); None marks a missing cell
Mismatch = Tuple[int, int, Optional[str], Optional[str]]


@dataclass(frozen=True)
class VerificationResult:
    hash_valid: bool
    grid_valid: Optional[bool] = None
    mismatches: Tuple[Mismatch, ...] = ()
    recomputed_grid: Optional[Grid] = None

    @property
    def valid(self) -> bool:
        return self.hash_valid and self.grid_valid is not False

    def to_dict(self) -> dict:
        result = {"valid": self.valid, "hash_valid": self.hash_valid}
        if self.grid_valid is not None:
            result["grid_valid"] = self.grid_valid
            result["mismatches"] = [
                {"reel": reel, "row": row, "expected": expected, "actual": actual}
                for reel, row, expected, actual in self.mismatches
            ]
        if self.recomputed_grid is not None:
            result["recomputed_grid"] = self.recomputed_grid.to_list()
        return result


def compare_grids(expected: Grid, actual: Grid) -> Tuple[Mismatch, ...]:
    """Every cell where the grids differ, including cells present in only one"""
    mismatches = []
    reel_count = max(expected.reel_count, actual.reel_count)
    for reel in range(reel_count):
        expected_reel = expected.reels[reel] if reel < expected.reel_count else ()
        actual_reel = actual.reels[reel] if reel < actual.reel_count else ()
        for row in range(max(len(expected_reel), len(actual_reel))):
            want = expected_reel[row] if row < len(expected_reel) else None
            got = actual_reel[row] if row < len(actual_reel) else None
            if want != got:
                mismatches.append((reel, row, want, got))
    return tuple(mismatches)


class VerificationService:
    """Checks seed commitments and recomputes grids for auditors"""

    def __init__(self, symbol_table: SymbolTable, reel_count: int = 3, row_count: int = 3):
        self.symbol_table = symbol_table
        self.reel_count = reel_count
        self.row_count = row_count

    def verify(self, server_seed: str, server_seed_hash: str, client_seed: Optional[str] = None,
               nonce: Optional[int] = None,
               expected_grid: Union[Grid, Sequence[Sequence[str]], None] = None) -> VerificationResult:
        hash_valid = hash_commitment.verify(server_seed, server_seed_hash)
        if expected_grid is None:
            return VerificationResult(hash_valid=hash_valid)

        if client_seed is None or nonce is None:
            raise InvalidInput("client_seed and nonce are required to recompute a grid")
        if not isinstance(expected_grid, Grid):
            expected_grid = Grid.from_reels(expected_grid)

        # Recompute from the revealed seed even if the hash is wrong, so the
        # auditor sees both failures.
        seed_pair = SeedPair(
            server_seed=server_seed,
            server_seed_hash=server_seed_hash,
            client_seed=client_seed,
            nonce=nonce
        )
        recomputed = select_grid(seed_pair, self.symbol_table, self.reel_count, self.row_count)
        mismatches = compare_grids(expected_grid, recomputed)
        return VerificationResult(
            hash_valid=hash_valid,
            grid_valid=not mismatches,
            mismatches=mismatches,
            recomputed_grid=recomputed
        )
