"""Coerce parsed front matter into a fixed document record.

Missing or malformed fields are defaulted, never rejected, so a document
with broken metadata still seeds.
"""

import re
from datetime import date, datetime
from typing import Any, Mapping

from ..core.types import DocumentRecord
from .serialization import serialize_field

_NON_DIGITS = re.compile(r"[^0-9]")
_MAX_SORT_KEY = 2**63 - 1

STRING_FIELDS = ("title", "description", "date", "category", "categoryLabel")


def _digits_as_int(value: str) -> int | None:
    digits = _NON_DIGITS.sub("", value)
    if not digits:
        return None
    try:
        number = int(digits)
    except ValueError:
        return None
    # sort is an SQLite INTEGER column
    return number if number <= _MAX_SORT_KEY else None


def derive_sort_key(slug: str, doc_id: Any = None) -> int:
    """Compute the listing sort key for a document.

    Digits in ``doc_id`` take precedence ("doc-007" -> 7). Without a usable
    id the digits of the slug are used, and 0 when there are none.

    Args:
        slug: Document slug.
        doc_id: Raw ``id`` value from front matter.

    Returns:
        Integer sort key.
    """
    if doc_id:
        from_id = _digits_as_int(str(doc_id))
        if from_id is not None:
            return from_id

    from_slug = _digits_as_int(slug)
    return from_slug if from_slug is not None else 0


def coerce_string(value: Any) -> str:
    """Return value as a string field, or "" if it is not one."""
    if isinstance(value, str):
        return value
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return ""


def coerce_id(value: Any) -> str:
    """Like coerce_string, but numeric ids are kept."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return coerce_string(value)


def coerce_document(metadata: Mapping[str, Any], slug: str, content: str) -> DocumentRecord:
    """Build a fully populated DocumentRecord from raw front matter.

    Args:
        metadata: Parsed front-matter map; any keys may be missing.
        slug: Slug derived from the source file name.
        content: Document body.

    Returns:
        DocumentRecord with every field set.
    """
    raw_id = metadata.get("id")
    strings = {name: coerce_string(metadata.get(name)) for name in STRING_FIELDS}
    return DocumentRecord(
        slug=slug,
        id=coerce_id(raw_id),
        title=strings["title"],
        description=strings["description"],
        date=strings["date"],
        category=strings["category"],
        category_label=strings["categoryLabel"],
        points=serialize_field(metadata.get("points")),
        contacts=serialize_field(metadata.get("contacts")),
        tables=serialize_field(metadata.get("tables")),
        content=content,
        sort=derive_sort_key(slug, raw_id),
    )
