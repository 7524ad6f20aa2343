from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime
from frontend.models.mod_auth import UserRole, SessionUser
from frontend.schemas.sch_notification import Notification

class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    role: UserRole = UserRole.USER

class RegisterRequest(BaseModel):
    fullName: str
    email: EmailStr
    password: str
    role: UserRole = UserRole.USER
    phone: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None

class SessionResponse(BaseModel):
    token: str
    user: SessionUser
    redirect: str
    expiresAt: Optional[datetime] = None
    notification: Optional[Notification] = None

class LogoutResponse(BaseModel):
    redirect: str = "/"
    notification: Notification
