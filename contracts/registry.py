"""Name lookup for every contract, used by the CLI."""

from typing import Dict, Type

from .base import ContractModel
from .auth_contracts import LoginRequest, LoginResponse
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
from .viewmodel_contracts import (
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


CONTRACTS: Dict[str, Type[ContractModel]] = {
    cls.__name__: cls
    for cls in (
        DepartmentDto,
        ProcessDto,
        ProcessStepDto,
        ProcessExecutionDto,
        RoleDto,
        UserDto,
        ScreenDto,
        RoleScreenPermissionDto,
        LoginRequest,
        LoginResponse,
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
}


def get_contract(name: str) -> Type[ContractModel]:
    """Look up a contract class by name.

    Raises:
        KeyError: If no contract has that name.
    """
    try:
        return CONTRACTS[name]
    except KeyError:
        raise KeyError(f"Unknown contract: {name}") from None
