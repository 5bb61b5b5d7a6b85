"""JSON decoding limited to standard JSON.

``json.loads`` accepts ``NaN``, ``Infinity`` and ``-Infinity``; catalog
sources and request bodies must not contain them.
"""

from __future__ import annotations

import json
from typing import Any


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON value: {name}")


def loads(data: str | bytes) -> Any:
    """
    Decode standard JSON.

    Raises:
        ValueError: On malformed JSON or a NaN/Infinity token
    """
    return json.loads(data, parse_constant=_reject_constant)
