"""
CORS configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from microcors.core.constants import (
    DEFAULT_ALLOW_CREDENTIALS,
    DEFAULT_ALLOW_HEADERS,
    DEFAULT_ALLOW_METHODS,
    DEFAULT_EXPOSE_HEADERS,
    DEFAULT_MAX_AGE_SECONDS,
    DEFAULT_RUN_HANDLER_ON_PREFLIGHT_REQUEST,
    WILDCARD_ORIGIN,
)

# camelCase option names accepted by from_options()
_OPTION_ALIASES = {
    "maxAge": "max_age",
    "allowMethods": "allow_methods",
    "allowHeaders": "allow_headers",
    "exposeHeaders": "expose_headers",
    "allowCredentials": "allow_credentials",
    "runHandlerOnPreflightRequest": "run_handler_on_preflight_request",
}

_DEFAULTS: dict[str, Any] = {
    "origin": WILDCARD_ORIGIN,
    "max_age": DEFAULT_MAX_AGE_SECONDS,
    "allow_methods": DEFAULT_ALLOW_METHODS,
    "allow_headers": DEFAULT_ALLOW_HEADERS,
    "expose_headers": DEFAULT_EXPOSE_HEADERS,
    "allow_credentials": DEFAULT_ALLOW_CREDENTIALS,
    "run_handler_on_preflight_request": DEFAULT_RUN_HANDLER_ON_PREFLIGHT_REQUEST,
}

_SEQUENCE_FIELDS = ("allow_methods", "allow_headers", "expose_headers")


@dataclass(frozen=True)
class CorsConfig:
    """CORS configuration.

    Values are not validated. Whatever is given is used as-is when headers
    are built; ``None`` means "unset" and takes the default.
    """

    origin: Any = WILDCARD_ORIGIN
    max_age: int | str = DEFAULT_MAX_AGE_SECONDS
    allow_methods: tuple[str, ...] = field(default=DEFAULT_ALLOW_METHODS)
    allow_headers: tuple[str, ...] = field(default=DEFAULT_ALLOW_HEADERS)
    expose_headers: tuple[str, ...] = field(default=DEFAULT_EXPOSE_HEADERS)
    allow_credentials: bool = DEFAULT_ALLOW_CREDENTIALS
    run_handler_on_preflight_request: bool = DEFAULT_RUN_HANDLER_ON_PREFLIGHT_REQUEST

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                object.__setattr__(self, f.name, _DEFAULTS[f.name])
            elif f.name in _SEQUENCE_FIELDS and isinstance(value, Iterable) and not isinstance(value, (str, tuple)):
                object.__setattr__(self, f.name, tuple(value))

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> CorsConfig:
        """Build a config from a mapping of snake_case or camelCase option names."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                kwargs[name] = value
        return cls(**kwargs)
