from .handlers import (
    ClientSeedHandler,
    HealthHandler,
    MetricsHandler,
    PaytableHandler,
    SeedHandler,
    SeedRotateHandler,
    SimulateHandler,
    SpinHandler,
    VerifyHandler
)

__all__ = [
    'ClientSeedHandler',
    'HealthHandler',
    'MetricsHandler',
    'PaytableHandler',
    'SeedHandler',
    'SeedRotateHandler',
    'SimulateHandler',
    'SpinHandler',
    'VerifyHandler'
]
