"""Front-matter coercion and structured field serialization."""

from .coercion import coerce_document, derive_sort_key
from .serialization import deserialize_field, serialize_field

__all__ = [
    "coerce_document",
    "derive_sort_key",
    "serialize_field",
    "deserialize_field",
]
