"""RTP simulation response DTO"""
from dataclasses import dataclass


@dataclass
class SimulationResponse:
    """Response DTO for a Monte-Carlo RTP run"""

    spins: int
    total_bet: float
    total_win: float
    rtp_percent: float
    hit_rate_percent: float
    mean_win: float
    win_std_dev: float
    max_win: float
    jackpot_count: int
    free_spins_per_spin: float
    target_rtp_percent: float
    anomaly: bool
    server_seed_hash: str
    client_seed: str

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary"""
        return {
            "spins": self.spins,
            "totalBet": self.total_bet,
            "totalWin": self.total_win,
            "rtpPercent": self.rtp_percent,
            "hitRatePercent": self.hit_rate_percent,
            "meanWin": self.mean_win,
            "winStdDev": self.win_std_dev,
            "maxWin": self.max_win,
            "jackpotCount": self.jackpot_count,
            "freeSpinsPerSpin": self.free_spins_per_spin,
            "targetRtpPercent": self.target_rtp_percent,
            "anomaly": self.anomaly,
            "serverSeedHash": self.server_seed_hash,
            "clientSeed": self.client_seed
        }
