"""Dependency Injection Container"""
import logging
from typing import Optional

from spin_engine.application.ports.outcome_publisher_port import OutcomePublisherPort
from spin_engine.application.ports.seed_store_port import SeedStorePort
from spin_engine.application.ports.settlement_port import SettlementPort
from spin_engine.application.use_cases.seed_lifecycle_use_case import SeedLifecycleUseCase
from spin_engine.application.use_cases.simulate_rtp_use_case import SimulateRtpUseCase
from spin_engine.application.use_cases.spin_use_case import SpinUseCase
from spin_engine.application.use_cases.verify_spin_use_case import VerifySpinUseCase
from spin_engine.config.game_config import load_symbol_table
from spin_engine.config.settings import Settings
from spin_engine.domain.entities.payline import active_paylines
from spin_engine.domain.services.payout_resolver import PayoutResolver
from spin_engine.domain.services.verification import VerificationService
from spin_engine.infrastructure.persistence.memory_seed_store import InMemorySeedStore
from spin_engine.infrastructure.settlement.onchain_settlement import OnChainSettlement
from spin_engine.infrastructure.settlement.simulated_settlement import SimulatedSettlement

logger = logging.getLogger(__name__)


class Container:
    """Simple DI Container for the spin engine

    Collaborators can be passed in explicitly; anything omitted is built from settings.
    """

    _instance = None

    def __init__(
        self,
        settings: Optional[Settings] = None,
        seed_store: Optional[SeedStorePort] = None,
        settlement: Optional[SettlementPort] = None,
        outcome_publisher: Optional[OutcomePublisherPort] = None
    ):
        self.settings = settings or Settings()

        # Game configuration
        self.symbol_table = load_symbol_table(self.settings.symbol_table_path)
        self.paylines = active_paylines()
        self.payout_resolver = PayoutResolver(
            self.symbol_table, self.settings.min_bet, self.settings.max_bet
        )
        self.verification_service = VerificationService(self.symbol_table)

        # Adapters
        self.seed_store = seed_store or self._build_seed_store()
        self.settlement = settlement or self._build_settlement()
        self.outcome_publisher = outcome_publisher or self._build_publisher()

        # Use cases
        self.spin_use_case = SpinUseCase(
            seed_store=self.seed_store,
            settlement=self.settlement,
            symbol_table=self.symbol_table,
            paylines=self.paylines,
            payout_resolver=self.payout_resolver,
            outcome_publisher=self.outcome_publisher
        )
        self.verify_use_case = VerifySpinUseCase(self.verification_service)
        self.seed_use_case = SeedLifecycleUseCase(self.seed_store)
        self.simulate_use_case = SimulateRtpUseCase(
            self.symbol_table,
            self.paylines,
            self.payout_resolver,
            target_rtp=self.settings.target_rtp,
            alert_low=self.settings.rtp_alert_low,
            alert_high=self.settings.rtp_alert_high
        )

    def _build_seed_store(self) -> SeedStorePort:
        if self.settings.seed_store == 'mongo':
            from pymongo import MongoClient
            from spin_engine.infrastructure.persistence.mongo_seed_store import MongoSeedStore

            self.mongo_client = MongoClient(self.settings.mongodb_url)
            store = MongoSeedStore(self.mongo_client[self.settings.mongodb_database])
            store.ensure_indexes()
            logger.info("Using MongoDB seed store")
            return store
        logger.info("Using in-memory seed store")
        return InMemorySeedStore()

    def _build_settlement(self) -> SettlementPort:
        if self.settings.settlement_mode == 'onchain':
            logger.info(f"Using on-chain settlement via {self.settings.settlement_gateway_url}")
            return OnChainSettlement(self.settings.settlement_gateway_url, self.settings.settlement_timeout)
        logger.info("Using simulated settlement")
        return SimulatedSettlement()

    def _build_publisher(self) -> Optional[OutcomePublisherPort]:
        if not self.settings.enable_publisher:
            return None
        from spin_engine.infrastructure.messaging.rabbitmq_outcome_publisher import RabbitMQOutcomePublisher
        return RabbitMQOutcomePublisher(self.settings.rabbitmq_url)

    @classmethod
    def get_instance(cls) -> 'Container':
        """Get singleton instance built from the environment"""
        if cls._instance is None:
            cls._instance = cls(Settings.from_env())
        return cls._instance

    def get_spin_use_case(self) -> SpinUseCase:
        return self.spin_use_case

    def get_verify_use_case(self) -> VerifySpinUseCase:
        return self.verify_use_case

    def get_seed_use_case(self) -> SeedLifecycleUseCase:
        return self.seed_use_case

    def get_simulate_use_case(self) -> SimulateRtpUseCase:
        return self.simulate_use_case
