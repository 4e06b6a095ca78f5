"""JSON serialization for contracts."""

from .json_codec import (
    SerializationError,
    to_json,
    from_json,
    to_dict,
    from_dict,
)

__all__ = [
    "SerializationError",
    "to_json",
    "from_json",
    "to_dict",
    "from_dict",
]
