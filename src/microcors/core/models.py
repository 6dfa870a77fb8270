from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CorsAction(str, Enum):
    """What the host should do with the request once headers are decided."""

    PASS_THROUGH = "pass_through"  # not a CORS request, nothing was added
    CONTINUE = "continue"
    SHORT_CIRCUIT = "short_circuit"

    def __str__(self) -> str:
        return self.value


class RequestFacts(BaseModel):
    """The parts of a request the CORS decision depends on."""

    model_config = ConfigDict(frozen=True)

    method: str
    origin: str | None = None

    @classmethod
    def from_headers(cls, method: str, headers: Mapping[str, Any]) -> "RequestFacts":
        """Build request facts, looking the ``Origin`` header up case-insensitively."""
        origin = None
        for name, value in headers.items():
            if name.lower() == "origin":
                origin = value
                break
        return cls(method=method, origin=origin)


class HeaderDecision(BaseModel):
    """
    Response headers to set for one request and whether to run the handler.

    Header names missing from ``headers`` are omitted from the response.
    """

    model_config = ConfigDict(frozen=True)

    action: CorsAction = CorsAction.CONTINUE
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def should_short_circuit(self) -> bool:
        return self.action == CorsAction.SHORT_CIRCUIT

    @property
    def should_run_handler(self) -> bool:
        return self.action != CorsAction.SHORT_CIRCUIT
