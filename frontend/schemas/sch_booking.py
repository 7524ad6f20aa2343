from pydantic import BaseModel, validator
from typing import Optional, List
from datetime import date
from frontend.models.mod_booking import Booking, BookingStatus, StatusBadge, parse_calendar_date
from frontend.schemas.sch_notification import Notification

class ContactInfoForm(BaseModel):
    # Emptiness is checked by BookingValidator so the caller gets a notification
    name: str = ""
    email: str = ""
    phone: str = ""

class BookingCreate(BaseModel):
    photographer: str
    package: str
    date: date  # yyyy-MM-dd
    timeSlot: str
    location: Optional[str] = None
    notes: Optional[str] = None
    contactInfo: ContactInfoForm = ContactInfoForm()

    @validator("date", pre=True)
    def parse_date(cls, v):
        return parse_calendar_date(v)

class BookingStatusUpdate(BaseModel):
    status: BookingStatus

class BookingReschedule(BaseModel):
    date: date  # yyyy-MM-dd
    timeSlot: str

    @validator("date", pre=True)
    def parse_date(cls, v):
        return parse_calendar_date(v)

class BookingView(BaseModel):
    booking: Booking
    badge: StatusBadge
    allowedStatuses: List[BookingStatus] = []
    canReschedule: bool = False

class BookingActionResponse(BaseModel):
    booking: BookingView
    notification: Notification

class UserBookingsPage(BaseModel):
    upcoming: List[BookingView] = []
    past: List[BookingView] = []
    notifications: List[Notification] = []
