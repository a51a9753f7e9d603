"""Verify response DTO"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from spin_engine.domain.services.verification import VerificationResult


@dataclass
class VerifyResponse:
    """Response DTO for auditor verification"""

    valid: bool
    hash_valid: Optional[bool] = None
    grid_valid: Optional[bool] = None
    mismatches: List[Dict[str, Any]] = field(default_factory=list)
    recomputed_grid: Optional[List[List[str]]] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: VerificationResult) -> 'VerifyResponse':
        data = result.to_dict()
        error = None
        if not result.hash_valid:
            error = "Server seed does not match the published hash"
        elif result.grid_valid is False:
            error = f"Recomputed grid differs in {len(result.mismatches)} cell(s)"
        return cls(
            valid=result.valid,
            hash_valid=result.hash_valid,
            grid_valid=result.grid_valid,
            mismatches=data.get("mismatches", []),
            recomputed_grid=data.get("recomputed_grid"),
            error=error
        )

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        result = {"valid": self.valid}
        if self.hash_valid is not None:
            result["hashValid"] = self.hash_valid
        if self.grid_valid is not None:
            result["gridValid"] = self.grid_valid
            result["mismatches"] = self.mismatches
        if self.recomputed_grid is not None:
            result["recomputedGrid"] = self.recomputed_grid
        if self.error:
            result["error"] = self.error
        return result
