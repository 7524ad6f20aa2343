from pydantic import BaseModel, Field, validator
from typing import Optional, Union, Dict, Any
from datetime import date, datetime
from enum import Enum

class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"

TERMINAL_STATUSES = frozenset({BookingStatus.CANCELLED, BookingStatus.COMPLETED})
OPEN_STATUSES = frozenset({BookingStatus.PENDING, BookingStatus.CONFIRMED})

def status_value(status) -> str:
    """Plain string form of a known or unknown booking status"""
    if isinstance(status, BookingStatus):
        return status.value
    return str(status)

class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"

class ContactInfo(BaseModel):
    name: str
    email: str
    phone: str

def parse_calendar_date(value):
    """Accept 'yyyy-MM-dd' as well as ISO datetimes the API stores at midnight"""
    if isinstance(value, str) and len(value) > 10:
        return value[:10]
    if isinstance(value, datetime):
        return value.date()
    return value

class Booking(BaseModel):
    id: Optional[str] = Field(default=None, alias="_id")
    contactInfo: Optional[ContactInfo] = None
    # Either an id or the object populated by the API
    photographer: Union[str, Dict[str, Any], None] = None
    package: Union[str, Dict[str, Any], None] = None
    date: date
    timeSlot: str
    location: Optional[str] = None
    totalPrice: float
    notes: Optional[str] = None
    # Statuses this layer does not know stay plain strings with no actions
    status: Union[BookingStatus, str] = Field(default=BookingStatus.PENDING, union_mode="left_to_right")
    paymentStatus: Optional[str] = PaymentStatus.PENDING.value
    createdAt: Optional[datetime] = None

    @validator("date", pre=True)
    def parse_date(cls, v):
        return parse_calendar_date(v)

    class Config:
        from_attributes = True
        populate_by_name = True

    def reference_name(self, field: str) -> Optional[str]:
        """Display name of a populated photographer/package reference"""
        value = getattr(self, field)
        if isinstance(value, dict):
            return value.get("fullName") or value.get("name")
        return None

class StatusBadge(BaseModel):
    label: str
    color: str

# Single lookup used by every booking view
STATUS_BADGES = {
    BookingStatus.PENDING: StatusBadge(label="Pending", color="bg-yellow-500"),
    BookingStatus.CONFIRMED: StatusBadge(label="Confirmed", color="bg-green-500"),
    BookingStatus.CANCELLED: StatusBadge(label="Cancelled", color="bg-red-500"),
    BookingStatus.COMPLETED: StatusBadge(label="Completed", color="bg-blue-500"),
}

UNKNOWN_BADGE = StatusBadge(label="Unknown", color="bg-gray-500")

def status_badge(status) -> StatusBadge:
    if isinstance(status, BookingStatus):
        return STATUS_BADGES[status]
    try:
        return STATUS_BADGES[BookingStatus(str(status).lower())]
    except ValueError:
        return UNKNOWN_BADGE
