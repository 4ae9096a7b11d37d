"""User Schemas — request/response contracts for /users.

Invariants:
    - email validated by email-validator (via EmailStr), then lowercased
    - email-validator caps addresses at 254 characters, inside the users.email width
    - uniqueness is the DB's job
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from catalog_api.schemas.common import NamedPayload


class UserCreate(NamedPayload):
    name: str = Field(min_length=1, max_length=100)
    email: EmailStr

    @field_validator("email", mode="before")
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class UserUpdate(UserCreate):
    pass


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
