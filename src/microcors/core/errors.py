"""
Core error classes for microcors.
"""


class CorsConfigurationError(ValueError):
    """Raised when CORS settings loaded from the environment cannot be parsed."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        self.variable = variable
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {variable}: {value!r} ({reason})")
