"""Push payload derivation.

Turns a raw notification document into a display title and body, a flat
string-keyed data map, and the fixed platform hints. Pure functions only;
the input record is never modified.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from streetlight_alerts.common.constants import DEFAULT_APP_NAME, ID_ATTRIBUTE_KEYS
from streetlight_alerts.common.schemas import PlatformHints, PushMessage


def _app_name(record: Mapping[str, Any], default_app_name: str) -> Any:
    return record.get("appName") or default_app_name


def derive_title(
    record: Mapping[str, Any], default_app_name: str = DEFAULT_APP_NAME,
) -> str:
    """Title from the record, falling back to the app name."""
    title = record.get("title")
    if title:
        return str(title)
    return str(_app_name(record, default_app_name))


def derive_body(record: Mapping[str, Any]) -> str:
    """Body from ``body``, else ``message``, else empty."""
    for key in ("body", "message"):
        value = record.get(key)
        if value:
            return str(value)
    return ""


_JSON_OPTIONS: dict[str, Any] = {
    "separators": (",", ":"),
    "ensure_ascii": False,
    "allow_nan": False,
}


def _normalize_numbers(value: Any, seen: frozenset[int] = frozenset()) -> Any:
    """Turn integral floats into ints so ``3.0`` encodes as ``3``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, (dict, list, tuple)):
        if id(value) in seen:
            raise ValueError("Circular reference detected")
        seen = seen | {id(value)}
        if isinstance(value, dict):
            return {k: _normalize_numbers(v, seen) for k, v in value.items()}
        return [_normalize_numbers(v, seen) for v in value]
    return value


def stringify_value(value: Any) -> str:
    """Render a data value as a string.

    Strings pass through. Anything else is encoded as compact JSON.
    Containers holding values JSON cannot encode (e.g. timestamps) still
    encode, with those values as strings. Scalars JSON cannot encode,
    NaN and cycles fall back to ``str()``.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(_normalize_numbers(value), **_JSON_OPTIONS)
    except (TypeError, ValueError):
        pass
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(_normalize_numbers(value), default=str, **_JSON_OPTIONS)
        except (TypeError, ValueError):
            pass
    return str(value)


def build_attributes(
    record: Mapping[str, Any],
    record_id: str,
    default_app_name: str = DEFAULT_APP_NAME,
) -> dict[str, str]:
    """Build the FCM data map for a record.

    Every record field is carried over, then the document id is injected
    under each of ``ID_ATTRIBUTE_KEYS`` so clients can dedupe, and
    ``appName``/``lightName`` are normalized.
    """
    merged: dict[str, Any] = dict(record)
    for key in ID_ATTRIBUTE_KEYS:
        merged[key] = record_id
    merged["appName"] = _app_name(record, default_app_name)
    merged["lightName"] = record.get("lightName") or record.get("name") or ""

    attributes: dict[str, str] = {}
    for key, value in merged.items():
        attributes[str(key)] = stringify_value(value)
    return attributes


def build_platform_hints() -> PlatformHints:
    return PlatformHints()


def build_push_message(
    record: Mapping[str, Any],
    record_id: str,
    default_app_name: str = DEFAULT_APP_NAME,
) -> PushMessage:
    """Assemble the complete push message for a record."""
    return PushMessage(
        title=derive_title(record, default_app_name),
        body=derive_body(record),
        attributes=build_attributes(record, record_id, default_app_name),
        hints=build_platform_hints(),
    )


__all__ = [
    "derive_title",
    "derive_body",
    "stringify_value",
    "build_attributes",
    "build_platform_hints",
    "build_push_message",
]
