from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.models.enums import UserRole


class UserBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class UserCreate(UserBase):
    password: str = Field(min_length=1)
    role: Optional[str] = None


class UserLogin(BaseModel):
    email: EmailStr
    password: str


class UserOut(UserBase):
    id: int
    role: UserRole


class AuthResponse(BaseModel):
    user: UserOut
    token: str
    token_type: str = "bearer"
