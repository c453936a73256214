"""Pydantic schemas for login and the current user."""

from datetime import datetime
from typing import Optional

from artline.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str
    password: str


class UserOut(CamelModel):
    user_id: int
    username: str
    name: Optional[str] = None
    is_admin: bool
    is_active: bool
    created_at: Optional[datetime] = None


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut
