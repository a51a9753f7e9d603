from .seed_store_port import SeedStorePort
from .settlement_port import SettlementPort, SettlementReceipt
from .outcome_publisher_port import OutcomePublisherPort

__all__ = [
    'SeedStorePort',
    'SettlementPort',
    'SettlementReceipt',
    'OutcomePublisherPort'
]
