"""Identity-related Pydantic schemas."""

from pydantic import BaseModel, Field


class AllocateRequest(BaseModel):
    """Schema for registering an identity by email."""

    email: str = Field(..., min_length=3, max_length=255, description="Registration email")


class AllocateResponse(BaseModel):
    """Serial issued for the email and whether it already existed."""

    serial: int
    existed: bool
    slug: str | None = Field(None, description="Default page slug for new identities")


class NextSerialResponse(BaseModel):
    """Serial the next registration would receive."""

    serial: int
