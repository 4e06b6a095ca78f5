"""Declarative validation for input contracts."""

from .rules import (
    RuleKind,
    Rule,
    Required,
    MinLength,
    Range,
    EmailFormat,
)

from .engine import (
    ValidationFailure,
    rule_registry,
    validate,
    is_valid,
)

__all__ = [
    # Rules
    "RuleKind",
    "Rule",
    "Required",
    "MinLength",
    "Range",
    "EmailFormat",
    # Engine
    "ValidationFailure",
    "rule_registry",
    "validate",
    "is_valid",
]
