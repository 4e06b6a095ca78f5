"""Record contracts (DTOs) for BPM entities."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import Int32, Int64, RecordContract, Text


class DepartmentDto(RecordContract):
    """An organisational department."""
    department_id: Int64 = 0
    department_name: Text = ""
    description: Optional[str] = None


class ProcessDto(RecordContract):
    """A business process owned by a department."""
    process_id: Int64 = 0
    process_name: Text = ""
    department_id: Int64 = 0
    description: Optional[str] = Field(
        default=None,
        description="Declared non-null upstream but starts out as None; kept as observed (known defect)",
    )
    created_by: Int64 = 0


class ProcessStepDto(RecordContract):
    """An ordered step of a process."""
    step_id: Int64 = 0
    process_id: Int64 = 0
    step_name: Text = ""
    step_order: Int32 = 0
    assigned_role_id: Optional[Int64] = None


class ProcessExecutionDto(RecordContract):
    """A run of a process step.

    No ordering is enforced between ``started_at`` and ``completed_at``.
    """
    execution_id: Int64 = 0
    process_id: Int64 = 0
    step_id: Int64 = 0
    user_id: Optional[Int64] = None
    status: Text = ""
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    remarks: Optional[str] = None


class RoleDto(RecordContract):
    """A role that users can hold."""
    role_id: Int64 = 0
    role_name: Text = ""
    description: Optional[str] = None


class UserDto(RecordContract):
    """A system user. Active unless told otherwise."""
    user_id: Int64 = 0
    username: Text = ""
    department_id: Optional[Int64] = None
    email: Optional[str] = None
    is_active: bool = True
    password_hash: Optional[str] = None


class ScreenDto(RecordContract):
    """A UI screen that permissions are granted on."""
    id: Int64 = 0
    name: Text = ""
    description: Optional[str] = None


class RoleScreenPermissionDto(RecordContract):
    """What a role may do on a screen."""
    id: Int64 = 0
    role_id: Int64 = 0
    screen_id: Int64 = 0
    can_view: bool = False
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False
