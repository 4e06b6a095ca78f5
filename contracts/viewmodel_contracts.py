"""Input contracts (view models) for create, edit and delete requests.

Rules are declared on the fields and evaluated by ``validation.validate``.
Delete models carry a single identifier and nothing else.
"""

from datetime import datetime
from typing import Annotated, Optional

from validation import EmailFormat, MinLength, Range, Required
from .base import INT64_MAX, Int32, Int64, InputContract, Text


NAME_MIN_LENGTH = 3

MSG_NAME_REQUIRED = "Informe o nome"
MSG_DEPARTMENT_REQUIRED = "Selecione um departamento"
MSG_PASSWORD_REQUIRED = "Senha inicial é obrigatória na criação"

EntityName = Annotated[Text, Required(), MinLength(NAME_MIN_LENGTH)]


# Department

class DepartmentCreateVm(InputContract):
    department_name: EntityName = ""
    description: Optional[str] = None


class DepartmentEditVm(InputContract):
    department_id: Int64 = 0
    department_name: EntityName = ""
    description: Optional[str] = None


class DepartmentDeleteVm(InputContract):
    department_id: Int64 = 0


# Process

class ProcessCreateVm(InputContract):
    """New process request. ``department_id`` fails its range until set."""
    process_name: Annotated[Text, Required(message=MSG_NAME_REQUIRED)] = ""
    department_id: Annotated[Int64, Range(1, INT64_MAX, message=MSG_DEPARTMENT_REQUIRED)] = 0
    description: Optional[str] = None
    created_by: Int64 = 0


class ProcessDeleteVm(InputContract):
    process_id: Int64 = 0


# Process step

class ProcessStepCreateVm(InputContract):
    """New step request. Unlike the record, ``process_id`` is optional here."""
    process_id: Optional[Int64] = None
    step_name: EntityName = ""
    step_order: Int32 = 0
    assigned_role_id: Optional[Int64] = None


class ProcessStepDeleteVm(InputContract):
    step_id: Int64 = 0


# Process execution

class ProcessExecutionCreateVm(InputContract):
    process_id: Int64 = 0
    step_id: Int64 = 0
    user_id: Optional[Int64] = None
    status: Text = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    remarks: Optional[str] = None


class ProcessExecutionEditVm(InputContract):
    execution_id: Int64 = 0
    process_id: Int64 = 0
    step_id: Int64 = 0
    user_id: Optional[Int64] = None
    status: Text = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    remarks: Optional[str] = None


class ProcessExecutionDeleteVm(InputContract):
    execution_id: Int64 = 0


# Role

class RoleCreateVm(InputContract):
    role_name: EntityName = ""
    description: Optional[str] = None


class RoleEditVm(InputContract):
    role_id: Int64 = 0
    role_name: EntityName = ""
    description: Optional[str] = None


class RoleDeleteVm(InputContract):
    role_id: Int64 = 0


# User

class UserCreateVm(InputContract):
    """New user request.

    ``is_active`` starts False here (the record defaults to True) so the
    caller has to decide it explicitly.
    """
    username: EntityName = ""
    email: Annotated[Optional[str], EmailFormat()] = None
    department_id: Optional[Int64] = None
    is_active: bool = False
    password_hash: Annotated[Optional[str], Required(message=MSG_PASSWORD_REQUIRED)] = None


class UserEditVm(InputContract):
    user_id: Int64 = 0
    username: EntityName = ""
    email: Annotated[Optional[str], EmailFormat()] = None
    department_id: Optional[Int64] = None
    is_active: bool = False
    password_hash: Annotated[Optional[str], Required(message=MSG_PASSWORD_REQUIRED)] = None


class UserDeleteVm(InputContract):
    user_id: Int64 = 0
