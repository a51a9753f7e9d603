"""HTTP REST handlers for the spin engine"""
import contextvars
import json
import logging
from typing import Sequence

import sentry_sdk
from tornado import web
from tornado.ioloop import IOLoop
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from spin_engine.application.dto.simulation_request import SimulationRequest
from spin_engine.application.dto.spin_request import SpinRequest
from spin_engine.application.dto.verify_request import VerifyRequest
from spin_engine.application.use_cases.seed_lifecycle_use_case import SeedLifecycleUseCase
from spin_engine.application.use_cases.simulate_rtp_use_case import SimulateRtpUseCase
from spin_engine.application.use_cases.spin_use_case import SpinUseCase
from spin_engine.application.use_cases.verify_spin_use_case import VerifySpinUseCase
from spin_engine.domain.entities.payline import Payline
from spin_engine.domain.entities.symbol_table import SymbolTable
from spin_engine.domain.errors import InvalidInput, SpinEngineError

logger = logging.getLogger(__name__)


class HealthHandler(web.RequestHandler):
    """Health check endpoint"""

    def get(self):
        self.write({"status": "ok"})


class MetricsHandler(web.RequestHandler):
    """Prometheus metrics endpoint"""

    def get(self):
        self.set_header('Content-Type', CONTENT_TYPE_LATEST)
        self.write(generate_latest())


class JsonHandler(web.RequestHandler):
    """Shared body parsing, trace continuation and error mapping"""

    def read_json(self, allow_empty: bool = False) -> dict:
        if not self.request.body:
            if allow_empty:
                return {}
            raise InvalidInput("Request body is required")
        try:
            data = json.loads(self.request.body)
        except ValueError as e:
            raise InvalidInput(f"Malformed JSON body: {e}")
        if not isinstance(data, dict):
            raise InvalidInput("Request body must be a JSON object")
        return data

    def continue_trace(self, op: str, name: str):
        """Continue the upstream trace when headers are present"""
        headers = {}
        for header in ("sentry-trace", "baggage"):
            value = self.request.headers.get(header)
            if value:
                headers[header] = value
        return sentry_sdk.continue_trace(headers, op=op, name=name)

    def trace_headers(self) -> dict:
        current_span = sentry_sdk.get_current_span()
        return {
            'sentry-trace': current_span.to_traceparent() if current_span else '',
            'baggage': sentry_sdk.get_baggage() or ''
        }

    def fail(self, error: Exception) -> None:
        """Write an error response; engine errors carry their own status"""
        if isinstance(error, SpinEngineError):
            if error.status_code >= 500:
                sentry_sdk.capture_exception(error)
            self.set_status(error.status_code)
            self.write(error.to_dict())
            return
        logger.exception("Unhandled error")
        sentry_sdk.capture_exception(error)
        self.set_status(500)
        self.write({"error": str(error), "code": "internal_error"})


class SpinHandler(JsonHandler):
    """POST /spin - run one provably-fair spin"""

    def initialize(self, spin_use_case: SpinUseCase):
        self.spin_use_case = spin_use_case

    async def post(self):
        transaction = self.continue_trace(op="game.spin", name="spin")

        with sentry_sdk.start_transaction(transaction):
            try:
                request = SpinRequest.from_dict(self.read_json())
                sentry_sdk.set_user({"id": request.player_id})
                response = self.spin_use_case.execute(request, self.trace_headers())
                self.set_status(200)
                self.write(response.to_dict())
            except Exception as e:
                self.fail(e)


class VerifyHandler(JsonHandler):
    """POST /verify - recompute a grid from a revealed server seed"""

    def initialize(self, verify_use_case: VerifySpinUseCase):
        self.verify_use_case = verify_use_case

    async def post(self):
        transaction = self.continue_trace(op="audit.verify", name="verify_spin")

        with sentry_sdk.start_transaction(transaction):
            try:
                request = VerifyRequest.from_dict(self.read_json())
                response = self.verify_use_case.execute(request)
                self.set_status(200)
                self.write(response.to_dict())
            except InvalidInput as e:
                self.set_status(400)
                self.write({"valid": False, "error": e.message, "code": e.code})
            except Exception as e:
                self.fail(e)


class SeedHandler(JsonHandler):
    """GET /seeds/<player_id> - current commitment, created on first request"""

    def initialize(self, seed_use_case: SeedLifecycleUseCase):
        self.seed_use_case = seed_use_case

    def get(self, player_id):
        try:
            self.write(self.seed_use_case.current(player_id).to_dict())
        except Exception as e:
            self.fail(e)


class SeedRotateHandler(JsonHandler):
    """POST /seeds/<player_id>/rotate - reveal the active seed and commit a new one"""

    def initialize(self, seed_use_case: SeedLifecycleUseCase):
        self.seed_use_case = seed_use_case

    def post(self, player_id):
        try:
            data = self.read_json(allow_empty=True)
            response = self.seed_use_case.rotate(player_id, data.get('clientSeed') or None)
            self.write(response.to_dict())
        except Exception as e:
            self.fail(e)


class ClientSeedHandler(JsonHandler):
    """POST /seeds/<player_id>/client-seed - set the client seed before the first spin"""

    def initialize(self, seed_use_case: SeedLifecycleUseCase):
        self.seed_use_case = seed_use_case

    def post(self, player_id):
        try:
            data = self.read_json()
            response = self.seed_use_case.set_client_seed(player_id, data.get('clientSeed'))
            self.write(response.to_dict())
        except Exception as e:
            self.fail(e)


class SimulateHandler(JsonHandler):
    """POST /simulate - Monte-Carlo RTP estimate"""

    def initialize(self, simulate_use_case: SimulateRtpUseCase):
        self.simulate_use_case = simulate_use_case

    async def post(self):
        transaction = self.continue_trace(op="simulation", name="simulate_rtp")

        with sentry_sdk.start_transaction(transaction):
            try:
                request = SimulationRequest.from_dict(self.read_json(allow_empty=True))
                # CPU bound; keep the IOLoop serving spins while it runs
                context = contextvars.copy_context()
                response = await IOLoop.current().run_in_executor(
                    None, context.run, self.simulate_use_case.execute, request
                )
                self.write(response.to_dict())
            except Exception as e:
                self.fail(e)


class PaytableHandler(web.RequestHandler):
    """GET /paytable - symbols, weights and paylines in play"""

    def initialize(self, symbol_table: SymbolTable, paylines: Sequence[Payline]):
        self.symbol_table = symbol_table
        self.paylines = paylines

    def get(self):
        data = self.symbol_table.to_dict()
        for symbol in data["symbols"]:
            symbol["probability"] = round(self.symbol_table.probability(symbol["id"]), 6)
        data["paylines"] = [payline.to_dict() for payline in self.paylines]
        self.write(data)
