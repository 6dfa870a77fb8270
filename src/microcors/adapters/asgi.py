"""Pure ASGI CORS middleware.

Works with any ASGI application (FastAPI, Starlette). Headers are injected
on the ``http.response.start`` message, so streaming responses are not
buffered.
"""

from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from microcors.core.config.cors_config import CorsConfig
from microcors.core.constants import VARY
from microcors.core.models import CorsAction, RequestFacts
from microcors.evaluator import CorsPolicyEvaluator


class CORSMiddleware:
    """
    ASGI middleware applying a ``CorsPolicyEvaluator`` to every HTTP request.

    Preflight requests are answered with an empty 200 response unless
    ``run_handler_on_preflight_request`` is set. Non-http scopes
    (lifespan, websocket) pass through untouched.
    """

    def __init__(self, app: ASGIApp, config: CorsConfig | None = None, **options: Any) -> None:
        self.app = app
        self.evaluator = CorsPolicyEvaluator(config or CorsConfig.from_options(options))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        facts = RequestFacts.from_headers(scope["method"], Headers(scope=scope))
        decision = self.evaluator.evaluate(facts.method, facts.origin)

        if decision.action == CorsAction.PASS_THROUGH:
            await self.app(scope, receive, send)
            return

        if decision.should_short_circuit:
            response = Response(status_code=200, headers=decision.headers)
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                # Re-evaluate so Origin is appended to whatever Vary the app set
                final = self.evaluator.evaluate(facts.method, facts.origin, existing_vary=headers.get(VARY))
                for name, value in final.headers.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_cors)
