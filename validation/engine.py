"""Generic validation routine for input contracts.

Content problems are returned as data, never raised. Shape problems are
pydantic's job and surface at construction or decode time.
"""

import logging
from typing import Dict, List, Type

from pydantic import BaseModel, Field

from .rules import Required, Rule, RuleKind

logger = logging.getLogger(__name__)


class ValidationFailure(BaseModel):
    """A single rule violation on one or more fields."""
    member_names: List[str] = Field(..., description="Python names of the offending fields")
    message: str = Field(..., description="Human-readable failure message")
    rule: RuleKind = Field(..., description="Kind of rule that failed")


def rule_registry(model_cls: Type[BaseModel]) -> Dict[str, List[Rule]]:
    """Collect the declared rules of a model, keyed by field name.

    Rules keep their declaration order. Fields without rules are omitted.
    """
    registry: Dict[str, List[Rule]] = {}
    for name, field_info in model_cls.model_fields.items():
        rules = [m for m in field_info.metadata if isinstance(m, Rule)]
        if rules:
            registry[name] = rules
    return registry


def validate(instance: BaseModel) -> List[ValidationFailure]:
    """Evaluate every declared rule against the instance's current values.

    A failed Required rule stops evaluation of the remaining rules on that
    field only; every other field is still checked.
    """
    failures: List[ValidationFailure] = []
    for name, rules in rule_registry(type(instance)).items():
        value = getattr(instance, name)
        for rule in rules:
            if rule.is_valid(value):
                continue
            failures.append(ValidationFailure(
                member_names=[name],
                message=rule.format_message(name),
                rule=rule.kind,
            ))
            if isinstance(rule, Required):
                break

    logger.debug("Validated %s: %d failure(s)", type(instance).__name__, len(failures))
    return failures


def is_valid(instance: BaseModel) -> bool:
    """Check whether the instance passes all of its declared rules."""
    return not validate(instance)
