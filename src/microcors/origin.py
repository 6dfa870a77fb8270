"""Origin matching policies.

The ``origin`` option accepts a loose set of shapes: a string, a boolean,
a compiled regular expression, a list of those, or a callable.
``compile_origin_policy`` converts it into exactly one ``OriginPolicy``
variant when the evaluator is built, so per-request code only deals with
the variants defined here.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from microcors.core.constants import WILDCARD_ORIGIN

logger = structlog.get_logger(__name__)


class OriginPolicy(ABC):
    """Abstract base class for origin policy variants.

    Attributes:
        is_dynamic: Whether the allow-origin value depends on the request
            origin, in which case caches must see ``Vary: Origin``.
        disables_cors: Whether the policy switches CORS headers off entirely.
    """

    is_dynamic: bool = True
    disables_cors: bool = False

    @abstractmethod
    def matches(self, origin: str) -> bool:
        """Return True if the request origin is accepted by this policy."""

    def allow_origin(self, origin: str) -> str | None:
        """Value for ``Access-Control-Allow-Origin``, or None to omit it."""
        return origin if self.matches(origin) else None


@dataclass(frozen=True)
class Wildcard(OriginPolicy):
    """Any origin, answered with a literal ``*``."""

    is_dynamic = False

    def matches(self, origin: str) -> bool:
        return True

    def allow_origin(self, origin: str) -> str | None:
        return WILDCARD_ORIGIN


@dataclass(frozen=True)
class LiteralOrigin(OriginPolicy):
    """A fixed origin.

    At the top level the value is always sent back as configured. Inside an
    ``AnyOf`` list it matches the request origin by exact equality.
    """

    value: str

    def matches(self, origin: str) -> bool:
        return origin == self.value

    def allow_origin(self, origin: str) -> str | None:
        return self.value


@dataclass(frozen=True)
class Reflect(OriginPolicy):
    """Echo every request origin back."""

    def matches(self, origin: str) -> bool:
        return True


@dataclass(frozen=True)
class Disabled(OriginPolicy):
    """No CORS headers at all."""

    is_dynamic = False
    disables_cors = True

    def matches(self, origin: str) -> bool:
        return False


@dataclass(frozen=True)
class Pattern(OriginPolicy):
    """Reflect origins the regular expression finds a match in."""

    regex: re.Pattern[str]

    def matches(self, origin: str) -> bool:
        return self.regex.search(origin) is not None


@dataclass(frozen=True)
class AnyOf(OriginPolicy):
    """Reflect the origin if any member policy matches, checked in order."""

    policies: tuple[OriginPolicy, ...]

    def matches(self, origin: str) -> bool:
        return any(policy.matches(origin) for policy in self.policies)


@dataclass(frozen=True)
class Predicate(OriginPolicy):
    """Reflect origins the callable returns a truthy value for."""

    func: Callable[[str], Any]

    def matches(self, origin: str) -> bool:
        return bool(self.func(origin))


def compile_origin_policy(value: Any) -> OriginPolicy:
    """
    Convert a loosely typed ``origin`` option into an ``OriginPolicy``.

    Never raises. Values of an unsupported type fall back on their
    truthiness: truthy values reflect the request origin, falsy values
    disable CORS.

    Args:
        value: A string, bool, compiled regex, list/tuple/set of matchers,
            callable, or an already compiled ``OriginPolicy``.

    Returns:
        The matching policy variant.
    """
    if isinstance(value, OriginPolicy):
        return value
    # bool before anything else, True/False are also ints
    if isinstance(value, bool):
        return Reflect() if value else Disabled()
    if isinstance(value, str):
        return Wildcard() if value == WILDCARD_ORIGIN else LiteralOrigin(value)
    if isinstance(value, re.Pattern):
        return Pattern(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return AnyOf(tuple(compile_origin_policy(item) for item in value))
    if callable(value):
        return Predicate(value)

    policy: OriginPolicy = Reflect() if value else Disabled()
    logger.warning(
        "cors_origin_policy_coerced",
        value_type=type(value).__name__,
        policy=type(policy).__name__,
    )
    return policy
