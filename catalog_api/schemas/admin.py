"""Admin Schemas — login payload, token response, and decoded claims.

Invariants:
    - AdminClaims mirrors the token payload: sub (admin id as str), username, role, iat, exp
    - LoginResponse.expires_in is in seconds
"""

from pydantic import BaseModel, ConfigDict, Field


class AdminLogin(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1, max_length=256)


class LoginResponse(BaseModel):
    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_in: int


class AdminClaims(BaseModel):
    """Decoded access-token payload attached to the request by require_admin."""
    model_config = ConfigDict(extra="ignore")

    sub: str
    username: str
    role: str
    iat: int | None = None
    exp: int

    @property
    def admin_id(self) -> int:
        return int(self.sub)


class DashboardResponse(BaseModel):
    message: str
    admin: AdminClaims
