from pydantic import BaseModel, Field, constr
from typing import Literal, Optional

Email = constr(strip_whitespace=True, to_lower=True, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class SignupRequest(BaseModel):
    email: Email
    password: str = Field(min_length=6, max_length=128)
    name: constr(strip_whitespace=True, min_length=1, max_length=100)
    role: Literal["vendor", "supplier"] = "vendor"


class LoginRequest(BaseModel):
    email: Email
    password: str = Field(min_length=1)


class RefreshRequest(BaseModel):
    refresh_token: str


class ProfileUpdateRequest(BaseModel):
    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    business_name: Optional[str] = Field(default=None, max_length=150)
    phone: Optional[constr(pattern=r"^\+?[\d\s-]{7,20}$")] = None
    location: Optional[str] = Field(default=None, max_length=150)
