"""
Authentication models.

Session shape shared by the remote and fallback sign-in paths, and the
credential request schema.

Dependencies: pydantic
System role: Auth API contracts
"""

from pydantic import BaseModel, Field


class SessionUser(BaseModel):
    """Signed-in user."""

    id: str | None = None
    email: str | None = None


class AuthSession(BaseModel):
    """An established sign-in session."""

    user: SessionUser
    access_token: str
    refresh_token: str | None = None
    expires_in: int | None = None


class CredentialsRequest(BaseModel):
    """Request schema for sign-in and sign-up."""

    email: str = Field(..., min_length=1, description="User identifier")
    password: str = Field(..., min_length=1, description="User secret")


class SessionResponse(BaseModel):
    """Current session, None when signed out."""

    session: AuthSession | None = None
