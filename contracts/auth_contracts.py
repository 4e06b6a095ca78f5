"""Login request and response contracts."""

from datetime import datetime
from typing import List

from pydantic import Field, field_validator

from config import settings
from .base import Int64, RecordContract, Text, UNSET_TIMESTAMP


class LoginRequest(RecordContract):
    """Credentials posted to the login endpoint.

    Both fields start empty. ``None`` is accepted, both assigned and decoded.
    """
    username: Text = ""
    password: Text = ""


class LoginResponse(RecordContract):
    """Token issued after a successful login."""
    access_token: Text = ""
    token_type: Text = Field(default_factory=lambda: settings.bearer_token_type)
    expires_at_utc: datetime = UNSET_TIMESTAMP
    user_id: Int64 = 0
    username: Text = ""
    roles: List[str] = Field(default_factory=list, description="Role names; never None")

    @field_validator("roles", mode="before")
    @classmethod
    def _roles_never_none(cls, value):
        return [] if value is None else value
