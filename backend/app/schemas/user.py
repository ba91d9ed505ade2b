"""User 요청/응답 계약을 위한 Pydantic 스키마입니다."""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class UserBase(BaseModel):
    email: str
    display_name: Optional[str] = None
    phone_number: Optional[str] = None
    profile_image: Optional[str] = None
    role: str = "user"


class UserCreate(UserBase):
    pass


class UserOut(UserBase):
    user_id: int
    is_blocked: bool = False
    created_at: Optional[datetime] = None
    last_logged_in: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserBlockUpdate(BaseModel):
    is_blocked: bool


class LoginRequest(BaseModel):
    email: str


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserOut
