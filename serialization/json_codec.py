"""JSON codec for contracts.

Names are camelCase on the wire and ``None`` is always written out as
``null``, so ``from_json(type(x), to_json(x)) == x`` for every contract.
"""

import logging
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from config import settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class SerializationError(ValueError):
    """Input could not be decoded into the requested contract."""

    def __init__(self, model_cls: Type[BaseModel], detail: str):
        self.model_cls = model_cls
        self.detail = detail
        super().__init__(f"Cannot decode {model_cls.__name__}: {detail}")


def to_json(model: BaseModel, indent: Optional[int] = None) -> str:
    """Encode a contract as JSON text.

    Args:
        model: Contract instance to encode
        indent: Indentation; falls back to ``settings.json_indent``

    Returns:
        JSON text with camelCase keys
    """
    if indent is None:
        indent = settings.json_indent
    return model.model_dump_json(by_alias=True, indent=indent)


def from_json(model_cls: Type[M], data: Union[str, bytes]) -> M:
    """Decode JSON text (or UTF-8 bytes) into a contract.

    Raises:
        SerializationError: On malformed JSON or a shape that does not fit.
    """
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as e:
        logger.debug("Failed to decode %s: %s", model_cls.__name__, e)
        raise SerializationError(model_cls, _summarize(e)) from e


def to_dict(model: BaseModel) -> Dict[str, Any]:
    """Encode a contract as a JSON-compatible dict."""
    return model.model_dump(mode="json", by_alias=True)


def from_dict(model_cls: Type[M], data: Dict[str, Any]) -> M:
    """Decode a JSON-compatible dict into a contract.

    Raises:
        SerializationError: When the dict does not fit the contract.
    """
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        logger.debug("Failed to decode %s: %s", model_cls.__name__, e)
        raise SerializationError(model_cls, _summarize(e)) from e


def _summarize(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
