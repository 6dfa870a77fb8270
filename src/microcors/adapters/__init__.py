"""
Host adapters applying CORS decisions to concrete request/response types.
"""

from microcors.adapters.asgi import CORSMiddleware
from microcors.adapters.base import HeaderWriter, PreflightResponder, apply_decision
from microcors.adapters.decorator import cors

__all__ = [
    "CORSMiddleware",
    "HeaderWriter",
    "PreflightResponder",
    "apply_decision",
    "cors",
]
