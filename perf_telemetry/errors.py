"""Error types raised by the telemetry engine.

The engine is permissive by default and reports missing data through
sentinel values. These errors only surface when strict duration
validation is switched on in ``TelemetryConfig``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TelemetryError(Exception):
    """Base class for telemetry errors.

    Attributes:
        message: Human-readable error message.
        details: Optional additional context.
    """

    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Initialize the exception with the message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class InvalidDurationError(TelemetryError, ValueError):
    """Raised in strict mode when a duration is negative or not finite."""

    @classmethod
    def for_metric(cls, name: str, duration: float) -> InvalidDurationError:
        return cls(
            message=f"Invalid duration for metric '{name}'",
            details={"name": name, "duration": duration},
        )


__all__ = ["TelemetryError", "InvalidDurationError"]
