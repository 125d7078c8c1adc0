"""Text encoding for structured document fields.

``points``, ``contacts`` and ``tables`` are stored as JSON text. Decoding
never raises: missing or corrupt values decode to an empty list.
"""

import json
from datetime import date, datetime
from typing import Any

from loguru import logger


def _json_default(value: Any) -> Any:
    # YAML turns unquoted dates into date objects
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def _json_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (date, datetime)):
        return key.isoformat()
    if isinstance(key, bool) or key is None:
        return json.dumps(key)
    return str(key)


def _stringify_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_json_key(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_stringify_keys(item) for item in value]
    return value


def serialize_field(value: Any) -> str:
    """Encode a structured value as JSON text.

    JSON object keys are always strings, so mapping keys are stringified:
    dates become ISO strings, ``True``/``False``/``None`` become
    ``"true"``/``"false"``/``"null"`` and numbers their decimal text.
    Values keep their types; only string-keyed mappings round-trip exactly.

    Args:
        value: Any YAML-derived value (lists, dicts, scalars).

    Returns:
        JSON text. ``None`` encodes as an empty list.
    """
    if value is None:
        value = []
    return json.dumps(_stringify_keys(value), ensure_ascii=False, default=_json_default)


def deserialize_field(text: str | None) -> Any:
    """Decode JSON text produced by serialize_field.

    Args:
        text: Stored column value.

    Returns:
        The decoded value, or ``[]`` if text is empty or not valid JSON.
    """
    if not text:
        return []
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        logger.warning(f"Discarding corrupt structured field: {e}")
        return []
