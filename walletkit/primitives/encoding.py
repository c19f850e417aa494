"""JSON encoding for archive members.

``encode_properties`` is the default property encoder handed to builders.
``canonical_json`` is used for the manifest so identical inputs always
produce identical bytes.
"""

import dataclasses
import json
from typing import Any, Callable

from pydantic import BaseModel

PropertyEncoder = Callable[[Any], bytes]


def canonical_json(data: Any) -> bytes:
    """Serialize data to canonical JSON bytes.

    Canonical form: sorted keys, no whitespace, ASCII-escaped.

    Args:
        data: JSON-serializable data.

    Returns:
        UTF-8 encoded canonical JSON.
    """
    return json.dumps(
        data, sort_keys=True, separators=(",", ":"), ensure_ascii=True
    ).encode("utf-8")


def encode_properties(properties: Any) -> bytes:
    """Encode a properties object to JSON bytes.

    Accepts pydantic models, dataclass instances, and plain JSON-compatible
    values. Serialization errors (TypeError, ValueError) propagate unchanged.

    Args:
        properties: The pass.json / order.json / personalization.json content.

    Returns:
        UTF-8 encoded JSON.
    """
    if isinstance(properties, BaseModel):
        return properties.model_dump_json(by_alias=True, exclude_none=True).encode(
            "utf-8"
        )
    if dataclasses.is_dataclass(properties) and not isinstance(properties, type):
        properties = dataclasses.asdict(properties)
    return json.dumps(properties, separators=(",", ":"), ensure_ascii=False).encode(
        "utf-8"
    )
