from .spin_request import SpinRequest
from .spin_response import SpinResponse
from .verify_request import VerifyRequest
from .verify_response import VerifyResponse
from .seed_response import SeedResponse
from .simulation_request import SimulationRequest
from .simulation_response import SimulationResponse

__all__ = [
    'SpinRequest',
    'SpinResponse',
    'VerifyRequest',
    'VerifyResponse',
    'SeedResponse',
    'SimulationRequest',
    'SimulationResponse'
]
