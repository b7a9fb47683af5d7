from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from app.schemas.user import UserOut


class UserUpdate(BaseModel):
    """Fields an admin may change on a user; anything else is rejected."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, pattern=r"^\+?\d{10,15}$")

    # Fields may be left out, but not set to null
    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class UserUpdateResponse(BaseModel):
    success: bool = True
    data: UserOut
