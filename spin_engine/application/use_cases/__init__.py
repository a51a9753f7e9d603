from .spin_use_case import SpinUseCase
from .verify_spin_use_case import VerifySpinUseCase
from .seed_lifecycle_use_case import SeedLifecycleUseCase
from .simulate_rtp_use_case import SimulateRtpUseCase

__all__ = [
    'SpinUseCase',
    'VerifySpinUseCase',
    'SeedLifecycleUseCase',
    'SimulateRtpUseCase'
]
