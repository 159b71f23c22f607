"""JSON rendering of a report."""

import json
import math
from typing import Any

from ..models import Report


def _finite(value: Any) -> Any:
    """Replace NaN and infinities with None, recursively."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_finite(v) for v in value]
    return value


def export_as_json(report: Report) -> str:
    """Serialize the full report structure, pretty-printed.

    Non-finite durations are written as ``null`` so the output stays
    strict JSON.
    """
    return json.dumps(_finite(report.to_dict()), indent=2, allow_nan=False)


__all__ = ["export_as_json"]
