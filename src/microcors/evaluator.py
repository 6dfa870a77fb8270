"""CORS policy evaluation.

``CorsPolicyEvaluator`` turns a request's method and ``Origin`` header into
a ``HeaderDecision``. It performs no I/O and holds no reference to any
transport object, so hosts apply the decision to their own response type.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from microcors.core import constants
from microcors.core.config.cors_config import CorsConfig
from microcors.core.models import CorsAction, HeaderDecision
from microcors.origin import OriginPolicy, compile_origin_policy

def _join(values: Any) -> str:
    # Anything that is not a sequence of names is sent verbatim
    if isinstance(values, str) or not isinstance(values, Iterable):
        return str(values)
    return ",".join(str(value) for value in values)


def append_vary(existing: str | None, value: str = "Origin") -> str:
    """Append ``value`` to an existing ``Vary`` header value."""
    if existing:
        return f"{existing},{value}"
    return value


class CorsPolicyEvaluator:
    """
    Decides which CORS headers a response gets.

    The configuration is compiled once; ``evaluate`` is then a pure
    function of the request method, the request origin and any ``Vary``
    value already present on the response.

    Attributes:
        config: The configuration this evaluator was built from.
        policy: The compiled origin policy.
    """

    def __init__(self, config: CorsConfig | None = None) -> None:
        self.config = config or CorsConfig()
        self.policy: OriginPolicy = compile_origin_policy(self.config.origin)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(policy={self.policy!r})"

    def evaluate(self, method: str, origin: str | None, existing_vary: str | None = None) -> HeaderDecision:
        """
        Compute the CORS headers for one request.

        Args:
            method: HTTP method of the request.
            origin: Value of the request ``Origin`` header, None when absent.
            existing_vary: ``Vary`` value already set on the response, if any.

        Returns:
            The headers to set and whether the wrapped handler should run.
        """
        if origin is None:
            return HeaderDecision(action=CorsAction.PASS_THROUGH)

        config = self.config
        is_preflight = method == constants.PREFLIGHT_METHOD
        action = (
            CorsAction.SHORT_CIRCUIT
            if is_preflight and not config.run_handler_on_preflight_request
            else CorsAction.CONTINUE
        )

        if self.policy.disables_cors:
            return HeaderDecision(action=action)

        headers: dict[str, str] = {}

        allow_origin = self.policy.allow_origin(origin)
        if allow_origin is not None:
            headers[constants.ALLOW_ORIGIN] = allow_origin

        if self.policy.is_dynamic:
            headers[constants.VARY] = append_vary(existing_vary)

        if config.allow_credentials:
            headers[constants.ALLOW_CREDENTIALS] = "true"

        if config.expose_headers:
            headers[constants.EXPOSE_HEADERS] = _join(config.expose_headers)

        if is_preflight:
            headers[constants.ALLOW_METHODS] = _join(config.allow_methods)
            headers[constants.ALLOW_HEADERS] = _join(config.allow_headers)
            headers[constants.MAX_AGE] = str(config.max_age)

        return HeaderDecision(action=action, headers=headers)
