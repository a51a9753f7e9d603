"""Verify spin use case"""
import logging

from sentry_sdk import start_span

from spin_engine import metrics
from spin_engine.application.dto.verify_request import VerifyRequest
from spin_engine.application.dto.verify_response import VerifyResponse
from spin_engine.domain.services.verification import VerificationService

logger = logging.getLogger(__name__)


class VerifySpinUseCase:
    """Use case for auditor verification of a revealed seed"""

    def __init__(self, verification_service: VerificationService):
        self.verification_service = verification_service

    def execute(self, request: VerifyRequest) -> VerifyResponse:
        """Mismatches come back as valid=False, never as errors"""
        with start_span(op="audit.verify", description="Verify revealed seed") as span:
            result = self.verification_service.verify(
                request.server_seed,
                request.server_seed_hash,
                request.client_seed,
                request.nonce,
                request.expected_grid
            )
            span.set_data("hash_valid", result.hash_valid)
            span.set_data("grid_valid", result.grid_valid)

        metrics.VERIFICATIONS_TOTAL.labels(result="valid" if result.valid else "invalid").inc()
        if not result.valid:
            logger.info(
                f"Verification failed for hash {request.server_seed_hash[:16]}: "
                f"hash_valid={result.hash_valid} grid_valid={result.grid_valid}"
            )
        return VerifyResponse.from_result(result)
