"""
Handler decorator for frameworks with a ``(request, response)`` handler shape.

Example:
    @cors(origin=["https://app.example.com"], expose_headers=["X-Total"])
    async def handler(request, response, context=None):
        ...
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from functools import wraps
from typing import Any

from microcors.adapters.base import PreflightResponder, apply_decision
from microcors.core.config.cors_config import CorsConfig
from microcors.core.constants import VARY
from microcors.core.models import HeaderDecision, RequestFacts
from microcors.evaluator import CorsPolicyEvaluator

Handler = Callable[..., Any]


def _resolve_config(config: CorsConfig | Mapping[str, Any] | None, options: dict[str, Any]) -> CorsConfig:
    if isinstance(config, CorsConfig):
        if not options:
            return config
        merged = {**vars(config), **options}
        return CorsConfig.from_options(merged)
    return CorsConfig.from_options({**(config or {}), **options})


def cors(
    config: CorsConfig | Mapping[str, Any] | None = None,
    **options: Any,
) -> Callable[[Handler], Handler]:
    """
    Build a decorator that adds CORS headers around a request handler.

    The wrapped handler is called as ``handler(request, response, context)``
    and its return value (or exception) is passed through unchanged.
    Coroutine functions get an async wrapper that awaits them.

    Args:
        config: A ``CorsConfig`` or a mapping of options (snake_case or
            camelCase names).
        **options: Options overriding those in ``config``.

    Returns:
        A decorator for request handlers.
    """
    evaluator = CorsPolicyEvaluator(_resolve_config(config, options))

    def prepare(request: Any, response: PreflightResponder) -> HeaderDecision:
        facts = RequestFacts.from_headers(request.method, request.headers)
        decision = evaluator.evaluate(facts.method, facts.origin, existing_vary=response.get_header(VARY))
        apply_decision(decision, response)
        if decision.should_short_circuit:
            response.end()
        return decision

    def decorator(handler: Handler) -> Handler:
        @wraps(handler)
        async def async_wrapper(request: Any, response: PreflightResponder, context: Any = None) -> Any:
            if prepare(request, response).should_short_circuit:
                return None
            return await handler(request, response, context)

        @wraps(handler)
        def sync_wrapper(request: Any, response: PreflightResponder, context: Any = None) -> Any:
            if prepare(request, response).should_short_circuit:
                return None
            return handler(request, response, context)

        # Return appropriate wrapper based on whether handler is async
        if inspect.iscoroutinefunction(handler):
            return async_wrapper
        return sync_wrapper

    return decorator
