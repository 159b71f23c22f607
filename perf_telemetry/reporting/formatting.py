"""Value formatting shared by the text exporters."""

from datetime import UTC, datetime


def ms(value: float) -> str:
    """Format a duration with two decimals."""
    return f"{value:.2f}"


def percent(fraction: float) -> str:
    """Format a fractional change as a whole-number percent with two decimals."""
    return f"{fraction * 100:.2f}"


def iso_timestamp(epoch_seconds: float) -> str:
    """Render an epoch timestamp as UTC ISO-8601."""
    return datetime.fromtimestamp(epoch_seconds, UTC).isoformat(timespec="milliseconds")
