# docquery/core/templates/serialization.py
"""
Structured-document literal serialization.

Values are rendered the way they appear inside a JSON-like query document:
numbers and booleans bare, text quoted, ``None`` as ``null``, containers as
nested literals. Types without a JSON counterpart use the extended-JSON
wrappers understood by document stores (``{"$date": ...}`` and friends).
"""
from __future__ import annotations

import base64
import dataclasses
import json
import logging
import re
import uuid
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel

from docquery.core.exceptions import ValueSerializationError

logger = logging.getLogger(__name__)

_REGEX_FLAGS = (
    (re.IGNORECASE, "i"),
    (re.MULTILINE, "m"),
    (re.DOTALL, "s"),
    (re.VERBOSE, "x"),
)


def _format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _regex_options(pattern: re.Pattern) -> str:
    return "".join(flag for bit, flag in _REGEX_FLAGS if pattern.flags & bit)


def _document_default(value: Any) -> Any:
    """``json.dumps`` hook for values outside the plain JSON types."""
    if isinstance(value, datetime):
        return {"$date": _format_datetime(value)}
    if isinstance(value, date):
        return {"$date": _format_datetime(datetime.combine(value, time.min))}
    if isinstance(value, uuid.UUID):
        return {"$uuid": value.hex}
    if isinstance(value, Decimal):
        return {"$numberDecimal": str(value)}
    if isinstance(value, re.Pattern):
        return {"$regex": value.pattern, "$options": _regex_options(value)}
    if isinstance(value, (bytes, bytearray)):
        return {"$binary": base64.b64encode(bytes(value)).decode("ascii")}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise ValueSerializationError(
        f"Cannot serialize value of type {type(value).__name__} into a query document",
        details={"type": type(value).__name__},
    )


def serialize_value(value: Any) -> str:
    """Serialize ``value`` to its structured-document literal.

    Examples:
        >>> serialize_value(30)
        '30'
        >>> serialize_value("Alice")
        '"Alice"'
        >>> serialize_value({"tags": ["a", "b"]})
        '{"tags": ["a", "b"]}'

    Raises:
        ValueSerializationError: If ``value`` (or a nested value) has no
            document literal form.
    """
    # Enums subclassing str/int would otherwise be emitted as plain JSON.
    if isinstance(value, Enum):
        value = value.value
    try:
        return json.dumps(value, default=_document_default, ensure_ascii=False)
    except ValueSerializationError:
        raise
    except (TypeError, ValueError) as exc:
        # Circular references, mapping keys without a JSON form
        logger.warning("Value serialization failed: %s", exc)
        raise ValueSerializationError(
            f"Cannot serialize value into a query document: {exc}"
        ) from exc
