"""Shared base models and field types for the BPM contracts."""

from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

# Identifier and counter widths of the upstream system.
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX)]
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]

# Text that starts empty but may still carry None, e.g. a JSON null.
Text = Optional[str]

# Value of a required timestamp that was never set.
UNSET_TIMESTAMP = datetime.min


class ContractModel(BaseModel):
    """Base for every contract.

    JSON names are camelCase (``department_id`` <-> ``departmentId``) and
    construction accepts either spelling. Assignment is deliberately left
    unvalidated: any value can be set after construction.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class RecordContract(ContractModel):
    """Plain data holder moved between layers unchanged. Declares no rules."""


class InputContract(ContractModel):
    """Externally supplied data, checked by the validation engine before use."""
