from datetime import date, datetime, timedelta, timezone
from fastapi import HTTPException
from typing import Set
from frontend.configuration.config import Config
from frontend.models.mod_auth import UserRole
from frontend.models.mod_booking import Booking, BookingStatus, OPEN_STATUSES, status_value
from frontend.schemas.sch_booking import BookingCreate, BookingReschedule, ContactInfoForm
from frontend.services.svc_api import ApiError

# from-status -> {to-status: roles allowed to make that move}
# Terminal statuses have no outgoing moves and nothing ever returns to pending.
TRANSITIONS = {
    BookingStatus.PENDING: {
        BookingStatus.CONFIRMED: {UserRole.PHOTOGRAPHER, UserRole.ADMIN},
        BookingStatus.CANCELLED: {UserRole.USER, UserRole.PHOTOGRAPHER, UserRole.ADMIN},
        BookingStatus.COMPLETED: {UserRole.ADMIN},
    },
    BookingStatus.CONFIRMED: {
        BookingStatus.CANCELLED: {UserRole.USER, UserRole.ADMIN},
        BookingStatus.COMPLETED: {UserRole.PHOTOGRAPHER, UserRole.ADMIN},
    },
    BookingStatus.CANCELLED: {},
    BookingStatus.COMPLETED: {},
}

def next_allowed(status, actor_role) -> Set[BookingStatus]:
    """Statuses the given actor may move a booking in ``status`` to; none for unknown statuses"""
    try:
        moves = TRANSITIONS[BookingStatus(status_value(status))]
    except ValueError:
        return set()
    role = UserRole(actor_role)
    return {target for target, roles in moves.items() if role in roles}

class BookingValidationError(HTTPException):
    def __init__(self, message: str, context: str = ""):
        super().__init__(
            status_code=400,
            detail=ApiError.notification(ApiError.VALIDATION, message, context)
        )

class BookingTransitionError(HTTPException):
    def __init__(self, current, requested, role: UserRole):
        super().__init__(
            status_code=409,
            detail=ApiError.notification(
                ApiError.INVALID_TRANSITION,
                f"A {UserRole(role).value} cannot move a {status_value(current)} booking to {status_value(requested)}",
                context="status_change"
            )
        )

class BookingValidator:
    @staticmethod
    def current_date() -> date:
        """Get today's date in UTC"""
        return datetime.now(timezone.utc).date()

    @staticmethod
    def validate_contact_info(contact: ContactInfoForm):
        """Validate that name, email and phone are all filled in"""
        missing = [
            field for field in ("name", "email", "phone")
            if not (getattr(contact, field) or "").strip()
        ]
        if missing:
            raise BookingValidationError(
                f"Please fill in all required contact information: {', '.join(missing)}",
                context="create_booking"
            )

    @staticmethod
    def validate_booking_date(session_date: date):
        """Validate that a session is booked for a future day"""
        if session_date <= BookingValidator.current_date():
            raise BookingValidationError(
                "Please choose a date in the future",
                context="create_booking"
            )

    @staticmethod
    def validate_time_slot(time_slot: str, context: str):
        if not (time_slot or "").strip():
            raise BookingValidationError("Please select a time slot", context=context)

    @staticmethod
    def validate_create_booking(booking: BookingCreate):
        """Validate all rules for creating a booking"""
        BookingValidator.validate_contact_info(booking.contactInfo)
        BookingValidator.validate_booking_date(booking.date)
        BookingValidator.validate_time_slot(booking.timeSlot, "create_booking")

    @staticmethod
    def is_noop(current, requested) -> bool:
        return status_value(current) == status_value(requested)

    @staticmethod
    def validate_status_change(current, requested: BookingStatus, role: UserRole):
        """Reject any move the role is not allowed to make from the current status"""
        allowed = {target.value for target in next_allowed(current, role)}
        if status_value(requested) not in allowed:
            raise BookingTransitionError(current, requested, role)

    @staticmethod
    def can_reschedule(status, role: UserRole) -> bool:
        return (
            status_value(status) in {s.value for s in OPEN_STATUSES}
            and UserRole(role) in (UserRole.USER, UserRole.ADMIN)
        )

    @staticmethod
    def validate_reschedule_date(new_date: date):
        """Validate that the new date leaves the photographer enough notice"""
        min_days = Config.RESCHEDULE_MIN_NOTICE_DAYS
        earliest = BookingValidator.current_date() + timedelta(days=min_days)
        if new_date < earliest:
            raise BookingValidationError(
                f"Bookings can only be moved to a date at least {min_days} days from today",
                context="reschedule_booking"
            )

    @staticmethod
    def validate_reschedule(booking: Booking, request: BookingReschedule, role: UserRole):
        """Validate all rules for rescheduling a booking"""
        if not BookingValidator.can_reschedule(booking.status, role):
            raise HTTPException(
                status_code=409,
                detail=ApiError.notification(
                    ApiError.INVALID_TRANSITION,
                    f"A {status_value(booking.status)} booking cannot be rescheduled by a {UserRole(role).value}",
                    context="reschedule_booking"
                )
            )
        BookingValidator.validate_time_slot(request.timeSlot, "reschedule_booking")
        BookingValidator.validate_reschedule_date(request.date)
