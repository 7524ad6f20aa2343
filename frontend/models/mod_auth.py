from enum import Enum
from pydantic import BaseModel
from typing import Optional
from datetime import datetime, timezone

class UserRole(str, Enum):
    USER = "user"
    PHOTOGRAPHER = "photographer"
    ADMIN = "admin"

# Landing view for each role after login or registration
ROLE_HOME = {
    UserRole.USER: "/bookings",
    UserRole.PHOTOGRAPHER: "/dashboard",
    UserRole.ADMIN: "/admin",
}

def home_path(role) -> str:
    try:
        return ROLE_HOME[UserRole(role)]
    except ValueError:
        return "/"

class SessionUser(BaseModel):
    id: Optional[str] = None
    email: Optional[str] = None
    fullName: Optional[str] = None
    role: UserRole = UserRole.USER

class ClientSession(BaseModel):
    """A logged-in caller: the upstream token plus the user it belongs to."""
    token: str
    user: SessionUser
    issued_at: datetime
    expires_at: Optional[datetime] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        current = now or datetime.now(timezone.utc)
        return current >= self.expires_at

    @property
    def role(self) -> UserRole:
        return self.user.role

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id
