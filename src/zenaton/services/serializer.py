"""Payload serializer.

Turns task data, workflow data and event input into the string the
worker agent stores, and back.
"""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel


def _default(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    raise TypeError(f"Object of type {type(value).__name__} is not serializable")


class Serializer:
    """JSON serializer for payloads sent to Zenaton."""

    def encode(self, value: Any) -> str:
        return json.dumps(value, default=_default)

    def decode(self, encoded: str) -> Any:
        return json.loads(encoded)


_serializer: Optional[Serializer] = None


def get_serializer() -> Serializer:
    """Get or create the global serializer."""
    global _serializer
    if _serializer is None:
        _serializer = Serializer()
    return _serializer
