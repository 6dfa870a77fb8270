from abc import ABC, abstractmethod

from microcors.core.models import HeaderDecision


class HeaderWriter(ABC):
    """
    Abstract base class for response objects CORS headers are written to.

    Implementations wrap whatever response type the host framework uses.
    """

    @abstractmethod
    def set_header(self, name: str, value: str) -> None:
        """Set a response header, replacing any previous value."""
        pass

    @abstractmethod
    def get_header(self, name: str) -> str | None:
        """Return a response header value (case-insensitive name), or None."""
        pass


class PreflightResponder(HeaderWriter):
    """A header writer that can also finish the response early."""

    @abstractmethod
    def end(self) -> None:
        """Finalize the response with status 200 and an empty body."""
        pass


def apply_decision(decision: HeaderDecision, writer: HeaderWriter) -> None:
    """Write every header of ``decision`` to ``writer``, in order."""
    for name, value in decision.headers.items():
        writer.set_header(name, value)
