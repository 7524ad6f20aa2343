from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from enum import Enum
from frontend.models.mod_booking import StatusBadge, UNKNOWN_BADGE

class AccountStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"

ACCOUNT_STATUS_BADGES = {
    AccountStatus.ACTIVE: StatusBadge(label="Active", color="bg-green-500"),
    AccountStatus.INACTIVE: StatusBadge(label="Inactive", color="bg-red-500"),
    AccountStatus.PENDING: StatusBadge(label="Pending", color="bg-yellow-500"),
}

def account_badge(status) -> StatusBadge:
    if isinstance(status, AccountStatus):
        return ACCOUNT_STATUS_BADGES[status]
    try:
        return ACCOUNT_STATUS_BADGES[AccountStatus(str(status or "").lower())]
    except ValueError:
        return UNKNOWN_BADGE

class UserAccount(BaseModel):
    id: str = Field(alias="_id")
    fullName: str
    email: str
    role: str
    status: Optional[str] = None
    createdAt: Optional[datetime] = None

    class Config:
        from_attributes = True
        populate_by_name = True

class PhotographerAccount(UserAccount):
    specialty: Optional[str] = None
    bookings: Optional[int] = None
    rating: Optional[float] = None
