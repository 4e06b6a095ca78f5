"""Pydantic contracts for the BPM data layer.

Record contracts (DTOs) move entity state between layers unchanged.
Input contracts (view models) carry declarative rules checked by the
validation engine.
"""

from .base import (
    INT64_MIN,
    INT64_MAX,
    INT32_MIN,
    INT32_MAX,
    Int64,
    Int32,
    Text,
    UNSET_TIMESTAMP,
    ContractModel,
    RecordContract,
    InputContract,
)

from .dto_contracts import (
    DepartmentDto,
    ProcessDto,
    ProcessStepDto,
    ProcessExecutionDto,
    RoleDto,
    UserDto,
    ScreenDto,
    RoleScreenPermissionDto,
)

from .auth_contracts import (
    LoginRequest,
    LoginResponse,
)

from .viewmodel_contracts import (
    NAME_MIN_LENGTH,
    MSG_NAME_REQUIRED,
    MSG_DEPARTMENT_REQUIRED,
    MSG_PASSWORD_REQUIRED,
    DepartmentCreateVm,
    DepartmentEditVm,
    DepartmentDeleteVm,
    ProcessCreateVm,
    ProcessDeleteVm,
    ProcessStepCreateVm,
    ProcessStepDeleteVm,
    ProcessExecutionCreateVm,
    ProcessExecutionEditVm,
    ProcessExecutionDeleteVm,
    RoleCreateVm,
    RoleEditVm,
    RoleDeleteVm,
    UserCreateVm,
    UserEditVm,
    UserDeleteVm,
)

from .registry import CONTRACTS, get_contract

__all__ = [
    # Base
    "INT64_MIN",
    "INT64_MAX",
    "INT32_MIN",
    "INT32_MAX",
    "Int64",
    "Int32",
    "Text",
    "UNSET_TIMESTAMP",
    "ContractModel",
    "RecordContract",
    "InputContract",
    # Records
    "DepartmentDto",
    "ProcessDto",
    "ProcessStepDto",
    "ProcessExecutionDto",
    "RoleDto",
    "UserDto",
    "ScreenDto",
    "RoleScreenPermissionDto",
    # Login
    "LoginRequest",
    "LoginResponse",
    # View models
    "NAME_MIN_LENGTH",
    "MSG_NAME_REQUIRED",
    "MSG_DEPARTMENT_REQUIRED",
    "MSG_PASSWORD_REQUIRED",
    "DepartmentCreateVm",
    "DepartmentEditVm",
    "DepartmentDeleteVm",
    "ProcessCreateVm",
    "ProcessDeleteVm",
    "ProcessStepCreateVm",
    "ProcessStepDeleteVm",
    "ProcessExecutionCreateVm",
    "ProcessExecutionEditVm",
    "ProcessExecutionDeleteVm",
    "RoleCreateVm",
    "RoleEditVm",
    "RoleDeleteVm",
    "UserCreateVm",
    "UserEditVm",
    "UserDeleteVm",
    # Registry
    "CONTRACTS",
    "get_contract",
]
