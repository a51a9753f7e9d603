"""Prometheus collectors for the spin engine"""
from prometheus_client import Counter, Histogram

SPINS_TOTAL = Counter(
    'spin_engine_spins_total',
    'Spins evaluated',
    ['result']
)

SPIN_ERRORS_TOTAL = Counter(
    'spin_engine_spin_errors_total',
    'Spins rejected before a grid was generated',
    ['code']
)

BET_VOLUME = Counter(
    'spin_engine_bet_volume_total',
    'Sum of bet amounts'
)

PAYOUT_VOLUME = Counter(
    'spin_engine_payout_volume_total',
    'Sum of win amounts'
)

FREE_SPINS_AWARDED = Counter(
    'spin_engine_free_spins_awarded_total',
    'Free spins awarded'
)

WIN_MULTIPLE = Histogram(
    'spin_engine_win_multiple',
    'Total win as a multiple of the bet',
    buckets=(0, 1, 2, 5, 10, 25, 50, 100, 250, 500, 1000)
)

VERIFICATIONS_TOTAL = Counter(
    'spin_engine_verifications_total',
    'Auditor verification requests',
    ['result']
)

SEED_ROTATIONS_TOTAL = Counter(
    'spin_engine_seed_rotations_total',
    'Server seeds retired and revealed'
)


def track_spin(bet: float, total_win: float, is_jackpot: bool, free_spins: int) -> None:
    """Record one evaluated spin"""
    if is_jackpot:
        result = "jackpot"
    elif total_win > 0:
        result = "win"
    else:
        result = "loss"
    SPINS_TOTAL.labels(result=result).inc()
    BET_VOLUME.inc(bet)
    PAYOUT_VOLUME.inc(total_win)
    if free_spins:
        FREE_SPINS_AWARDED.inc(free_spins)
    if bet > 0:
        WIN_MULTIPLE.observe(total_win / bet)
