"""Rule vocabulary for input contracts.

Rules are attached to fields through ``typing.Annotated`` metadata and read
back by :func:`validation.engine.rule_registry`. Each rule is a small frozen
dataclass: it knows how to check one value and how to word its failure.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Optional

from email_validator import EmailNotValidError, validate_email


class RuleKind(str, Enum):
    """Kind of a declared validation rule."""
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    RANGE = "range"
    EMAIL = "email"


class Rule(ABC):
    """Base class for a field-level validation rule."""

    kind: ClassVar[RuleKind]
    message: Optional[str]

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Return True when ``value`` satisfies this rule."""

    @abstractmethod
    def default_message(self, field_name: str) -> str:
        """Message used when no custom message was declared."""

    def format_message(self, field_name: str) -> str:
        return self.message if self.message is not None else self.default_message(field_name)


@dataclass(frozen=True)
class Required(Rule):
    """Value must be present; text must not be empty.

    Whitespace-only text is accepted.
    """
    message: Optional[str] = None
    kind: ClassVar[RuleKind] = RuleKind.REQUIRED

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return False
        if isinstance(value, str):
            return value != ""
        return True

    def default_message(self, field_name: str) -> str:
        return f"The {field_name} field is required."


@dataclass(frozen=True)
class MinLength(Rule):
    """Text must contain at least ``length`` characters once non-empty.

    Characters are counted as UTF-16 code units, so an emoji outside the
    BMP counts as two.
    """
    length: int
    message: Optional[str] = None
    kind: ClassVar[RuleKind] = RuleKind.MIN_LENGTH

    def is_valid(self, value: Any) -> bool:
        if value is None or value == "":
            return True
        if isinstance(value, str):
            return len(value.encode("utf-16-le")) // 2 >= self.length
        return len(value) >= self.length

    def default_message(self, field_name: str) -> str:
        return f"The field {field_name} must have a minimum length of '{self.length}'."


@dataclass(frozen=True)
class Range(Rule):
    """Numeric value must lie in ``[minimum, maximum]``."""
    minimum: int
    maximum: int
    message: Optional[str] = None
    kind: ClassVar[RuleKind] = RuleKind.RANGE

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        return self.minimum <= value <= self.maximum

    def default_message(self, field_name: str) -> str:
        return f"The field {field_name} must be between {self.minimum} and {self.maximum}."


@dataclass(frozen=True)
class EmailFormat(Rule):
    """Present text must be shaped like an e-mail address. None is allowed.

    Only the shape is checked: single-label and special-use domains such
    as ``a@b`` or ``x@dominio.test`` pass.
    """
    message: Optional[str] = None
    kind: ClassVar[RuleKind] = RuleKind.EMAIL

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        if not isinstance(value, str):
            return False
        try:
            validate_email(
                value,
                check_deliverability=False,
                globally_deliverable=False,
                test_environment=True,
            )
        except EmailNotValidError:
            return False
        return True

    def default_message(self, field_name: str) -> str:
        return f"The {field_name} field is not a valid e-mail address."
