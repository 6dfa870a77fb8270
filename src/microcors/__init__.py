"""
CORS response headers for HTTP request handlers.

``cors()`` decorates ``(request, response, context)`` handlers,
``CORSMiddleware`` wraps ASGI applications, and ``CorsPolicyEvaluator``
exposes the underlying header decision for any other host.
"""

from microcors.adapters import CORSMiddleware, HeaderWriter, PreflightResponder, apply_decision, cors
from microcors.core.config.cors_config import CorsConfig
from microcors.core.models import CorsAction, HeaderDecision, RequestFacts
from microcors.evaluator import CorsPolicyEvaluator
from microcors.origin import (
    AnyOf,
    Disabled,
    LiteralOrigin,
    OriginPolicy,
    Pattern,
    Predicate,
    Reflect,
    Wildcard,
    compile_origin_policy,
)

__version__ = "0.1.0"

__all__ = [
    "AnyOf",
    "CORSMiddleware",
    "CorsAction",
    "CorsConfig",
    "CorsPolicyEvaluator",
    "Disabled",
    "HeaderDecision",
    "HeaderWriter",
    "LiteralOrigin",
    "OriginPolicy",
    "Pattern",
    "Predicate",
    "PreflightResponder",
    "Reflect",
    "RequestFacts",
    "Wildcard",
    "apply_decision",
    "compile_origin_policy",
    "cors",
]
