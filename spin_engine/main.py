"""
Spin Engine - Clean Architecture Entry Point

Provably-fair 3x3 slot spins over HTTP REST. Configuration comes from the
environment; see spin_engine.config.settings.
"""
import logging
from typing import Optional

import sentry_sdk
from tornado import web, ioloop
from sentry_sdk.integrations.tornado import TornadoIntegration

from spin_engine.config.container import Container
from spin_engine.config.settings import Settings
from spin_engine.presentation.http.handlers import (
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

logger = logging.getLogger(__name__)


def init_sentry(settings: Settings) -> None:
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        integrations=[TornadoIntegration()],
        traces_sample_rate=settings.sentry_traces_rate,
        environment=settings.sentry_environment,
        profiles_sample_rate=settings.sentry_profiles_rate,
        debug=settings.sentry_debug,
        release=f"spin-engine@{settings.version}",
        auto_session_tracking=True
    )


def make_app(container: Optional[Container] = None):
    """Create Tornado application with Clean Architecture handlers"""
    container = container or Container.get_instance()
    seed_kwargs = {"seed_use_case": container.get_seed_use_case()}

    routes = [
        (r"/health", HealthHandler),
        (r"/metrics", MetricsHandler),
        (r"/spin", SpinHandler, {
            "spin_use_case": container.get_spin_use_case()
        }),
        (r"/verify", VerifyHandler, {
            "verify_use_case": container.get_verify_use_case()
        }),
        (r"/seeds/([^/]+)", SeedHandler, seed_kwargs),
        (r"/seeds/([^/]+)/rotate", SeedRotateHandler, seed_kwargs),
        (r"/seeds/([^/]+)/client-seed", ClientSeedHandler, seed_kwargs),
        (r"/simulate", SimulateHandler, {
            "simulate_use_case": container.get_simulate_use_case()
        }),
        (r"/paytable", PaytableHandler, {
            "symbol_table": container.symbol_table,
            "paylines": container.paylines
        }),
    ]

    return web.Application(routes)


def main():
    logging.basicConfig(level=logging.INFO)
    settings = Settings.from_env()
    init_sentry(settings)

    Container._instance = Container(settings)
    app = make_app(Container._instance)
    app.listen(settings.port)

    logger.info(f"Spin Engine started on :{settings.port}")
    logger.info(f"Settlement mode: {settings.settlement_mode}, seed store: {settings.seed_store}")
    logger.info("Routes: POST /spin, POST /verify, GET /seeds/<id>, POST /seeds/<id>/rotate, "
                "POST /seeds/<id>/client-seed, POST /simulate, GET /paytable")

    ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
