"""
Pydantic schemas for admin sign-in
"""
from pydantic import BaseModel, Field


class AdminLoginRequest(BaseModel):
    """Credentials posted by the admin dashboard"""
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserInfo(BaseModel):
    """User details returned with a token"""
    username: str
    role: str


class AdminLoginResponse(BaseModel):
    """Schema for a successful admin sign-in"""
    message: str = "Authentication successful"
    token: str
    user: UserInfo
