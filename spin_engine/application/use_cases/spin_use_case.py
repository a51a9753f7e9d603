"""Spin use case"""
import logging
from typing import Dict, Optional, Sequence

import sentry_sdk
from sentry_sdk import start_span

from spin_engine import metrics
from spin_engine.application.dto.spin_request import SpinRequest
from spin_engine.application.dto.spin_response import SpinResponse
from spin_engine.application.ports.outcome_publisher_port import OutcomePublisherPort
from spin_engine.application.ports.seed_store_port import SeedStorePort
from spin_engine.application.ports.settlement_port import SettlementPort
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import InvalidInput, SeedNotFound, SpinEngineError
from spin_engine.domain.services.payout_resolver import PayoutResolver, validate_bet
from spin_engine.domain.services.symbol_selector import select_grid

logger = logging.getLogger(__name__)


class SpinUseCase:
    """Use case for running one provably-fair spin"""

    def __init__(
        self,
        seed_store: SeedStorePort,
        settlement: SettlementPort,
        symbol_table: SymbolTable,
        paylines: Sequence[Payline],
        payout_resolver: PayoutResolver,
        outcome_publisher: Optional[OutcomePublisherPort] = None
    ):
        self.seed_store = seed_store
        self.settlement = settlement
        self.symbol_table = symbol_table
        self.paylines = list(paylines)
        self.payout_resolver = payout_resolver
        self.outcome_publisher = outcome_publisher

    def execute(self, request: SpinRequest, trace_headers: Optional[Dict[str, str]] = None) -> SpinResponse:
        """Execute a spin; engine errors abort before any grid is generated"""
        try:
            bet = validate_bet(request.bet_amount, self.payout_resolver.min_bet, self.payout_resolver.max_bet)
            self._check_client_seed(request)

            with start_span(op="seed.reserve", description="Reserve nonce") as span:
                seed_pair = self.seed_store.reserve_nonce(
                    request.player_id, request.server_seed_hash, request.nonce
                )
                span.set_data("nonce", seed_pair.nonce)

            if seed_pair.client_seed != request.client_seed:
                raise InvalidInput("Client seed changed while the spin was in flight")

            with start_span(op="game.rng", description="Select grid"):
                grid = select_grid(
                    seed_pair, self.symbol_table,
                    self.payout_resolver.reel_count, self.payout_resolver.row_count
                )

            with start_span(op="game.payout", description="Resolve payout") as span:
                outcome = self.payout_resolver.resolve(grid, bet, self.paylines)
                span.set_data("total_win", outcome.total_win)
                span.set_data("is_jackpot", outcome.is_jackpot)

        except SpinEngineError as e:
            metrics.SPIN_ERRORS_TOTAL.labels(code=e.code).inc()
            logger.warning(f"Spin rejected for player {request.player_id}: {e.message}")
            raise

        with start_span(op="settlement.settle", description=f"Settle ({self.settlement.mode})") as span:
            receipt = self.settlement.settle(request.player_id, outcome, seed_pair)
            span.set_data("settlement_id", receipt.settlement_id)

        response = SpinResponse.from_outcome(outcome, seed_pair, receipt)

        if self.outcome_publisher:
            with start_span(op="mq.publish", description="Publish spin outcome") as mq_span:
                try:
                    payload = outcome.to_dict()
                    payload.update({
                        "player_id": request.player_id,
                        "provably_fair": seed_pair.public_view(),
                        "settlement": receipt.to_dict()
                    })
                    self.outcome_publisher.publish_outcome(payload, trace_headers or {})
                    mq_span.set_tag("mq.published", "true")
                except Exception as mq_error:
                    logger.error(f"Failed to publish spin outcome: {mq_error}")
                    mq_span.set_tag("mq.published", "false")
                    mq_span.set_tag("mq.error", str(mq_error))

        metrics.track_spin(bet, outcome.total_win, outcome.is_jackpot, outcome.free_spins_awarded)
        sentry_sdk.set_measurement("game.bet_amount", bet)
        sentry_sdk.set_measurement("game.total_win", outcome.total_win)
        sentry_sdk.set_tag("game.win", str(outcome.is_win))
        sentry_sdk.set_tag("game.jackpot", str(outcome.is_jackpot))

        return response

    def _check_client_seed(self, request: SpinRequest) -> None:
        record = self.seed_store.get_active(request.player_id)
        if record is None:
            raise SeedNotFound(f"No active seed pair for player {request.player_id}")
        if record.client_seed != request.client_seed:
            raise InvalidInput(
                "Client seed does not match the active seed pair",
                details={"client_seed": record.client_seed}
            )
