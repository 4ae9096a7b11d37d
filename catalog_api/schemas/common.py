"""Shared Schemas — small response shapes reused across resources."""

from pydantic import BaseModel, field_validator


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. after a delete."""
    message: str


def strip_required(v: str) -> str:
    """Strip surrounding whitespace; reject strings that become empty."""
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class NamedPayload(BaseModel):
    """Base for payloads with a required, stripped `name`."""
    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return strip_required(v)
