"""JSON rendering of account snapshots."""

import json
from dataclasses import fields
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable

from atm_sim.models import AccountSummary


def serialize_value(value: Any) -> Any:
    """Convert a summary field to a JSON-compatible value.

    Decimals become strings so amounts survive without float rounding.
    """
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    return value


def summary_to_dict(summary: AccountSummary) -> dict[str, Any]:
    """Convert an ``AccountSummary`` to a flat dict."""
    return {f.name: serialize_value(getattr(summary, f.name)) for f in fields(summary)}


def summaries_to_json(summaries: Iterable[AccountSummary], pretty: bool = False) -> str:
    """Render summaries as a JSON array."""
    data = [summary_to_dict(s) for s in summaries]
    return json.dumps(data, indent=2 if pretty else None, ensure_ascii=False)
