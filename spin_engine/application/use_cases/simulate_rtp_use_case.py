"""Monte-Carlo RTP simulation over the deterministic engine"""
import logging
from typing import Sequence

import numpy as np
import sentry_sdk
from sentry_sdk import start_span

from spin_engine.application.dto.simulation_request import SimulationRequest
from spin_engine.application.dto.simulation_response import SimulationResponse
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.entities.seed_pair import SeedPair
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.services import hash_commitment
from spin_engine.domain.services.payout_resolver import PayoutResolver
from spin_engine.domain.services.symbol_selector import select_grid

logger = logging.getLogger(__name__)


class SimulateRtpUseCase:
    """Use case for estimating return-to-player of the configured machine"""

    def __init__(
        self,
        symbol_table: SymbolTable,
        paylines: Sequence[Payline],
        payout_resolver: PayoutResolver,
        target_rtp: float = 95.0,
        alert_low: float = 85.0,
        alert_high: float = 98.0
    ):
        self.symbol_table = symbol_table
        self.paylines = list(paylines)
        self.payout_resolver = payout_resolver
        self.target_rtp = target_rtp
        self.alert_low = alert_low
        self.alert_high = alert_high

    def execute(self, request: SimulationRequest) -> SimulationResponse:
        """Run request.spins spins from one seed pair, non-overlapping draw windows"""
        if request.server_seed:
            server_seed = request.server_seed
            server_seed_hash = hash_commitment.commit(server_seed)
        else:
            server_seed, server_seed_hash = hash_commitment.generate_server_seed()
        client_seed = request.client_seed or hash_commitment.generate_client_seed()

        reel_count = self.payout_resolver.reel_count
        row_count = self.payout_resolver.row_count
        stride = reel_count * row_count
        base_pair = SeedPair(server_seed, server_seed_hash, client_seed, 0)

        wins = np.zeros(request.spins, dtype=np.float64)
        free_spins = np.zeros(request.spins, dtype=np.int64)
        jackpots = np.zeros(request.spins, dtype=bool)

        with start_span(op="simulation.run", description="Monte-Carlo RTP") as span:
            for index in range(request.spins):
                grid = select_grid(base_pair, self.symbol_table, reel_count, row_count, nonce=index * stride)
                outcome = self.payout_resolver.resolve(grid, request.bet_amount, self.paylines)
                wins[index] = outcome.total_win
                free_spins[index] = outcome.free_spins_awarded
                jackpots[index] = outcome.is_jackpot
            span.set_data("spins", request.spins)

        total_bet = float(request.bet_amount * request.spins)
        total_win = float(wins.sum())
        rtp = 100.0 * total_win / total_bet
        anomaly = rtp < self.alert_low or rtp > self.alert_high

        if anomaly:
            logger.warning(
                f"Simulated RTP {rtp:.2f}% outside [{self.alert_low}, {self.alert_high}] "
                f"(target {self.target_rtp}%)"
            )
            sentry_sdk.capture_message(
                f"RTP anomaly in simulation: {rtp:.2f}% over {request.spins} spins",
                level="warning"
            )

        return SimulationResponse(
            spins=request.spins,
            total_bet=total_bet,
            total_win=total_win,
            rtp_percent=round(rtp, 4),
            hit_rate_percent=round(100.0 * float(np.count_nonzero(wins)) / request.spins, 4),
            mean_win=float(wins.mean()),
            win_std_dev=float(wins.std()),
            max_win=float(wins.max()),
            jackpot_count=int(jackpots.sum()),
            free_spins_per_spin=float(free_spins.mean()),
            target_rtp_percent=self.target_rtp,
            anomaly=anomaly,
            server_seed_hash=server_seed_hash,
            client_seed=client_seed
        )
