from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_session, get_current_client
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_booking import status_value
from frontend.schemas.sch_booking import (
    BookingCreate,
    BookingStatusUpdate,
    BookingReschedule,
    BookingView,
    BookingActionResponse,
    UserBookingsPage
)
from frontend.schemas.sch_notification import ErrorDetail, Notification
from frontend.services.svc_api import ApiClient, load_section
from frontend.services.svc_booking import BookingService
from frontend.validators.val_booking import BookingValidator

router = APIRouter(
    prefix="/bookings",
    tags=["Bookings"],
    responses={404: {"model": ErrorDetail}, 409: {"model": ErrorDetail}},
)

STATUS_MESSAGES = {
    "confirmed": ("Booking Confirmed", "The booking has been confirmed."),
    "cancelled": ("Booking Cancelled", "The booking has been cancelled."),
    "completed": ("Booking Completed", "The booking has been marked as completed."),
}

@router.get('/', response_model=UserBookingsPage)
async def user_bookings_page(
    search: Optional[str] = Query(default=None),
    current: ClientSession = Depends(get_current_client),
    api: ApiClient = Depends(get_api_client)
):
    """
    The client's bookings page.

    - Upcoming bookings (today onwards, soonest first) and past bookings (latest first)
    - Each booking carries its status badge and the actions available to the client
    - A failed load returns empty lists plus a notification
    """
    notifications: List[Notification] = []
    bookings = await load_section(
        BookingService.get_user_bookings(api, current), [], notifications, "Failed to Load Bookings"
    )
    bookings = BookingService.search_bookings(bookings, search)
    upcoming, past = BookingService.split_upcoming_past(bookings, BookingValidator.current_date())
    return UserBookingsPage(
        upcoming=[BookingService.to_view(b, current.role) for b in upcoming],
        past=[BookingService.to_view(b, current.role) for b in past],
        notifications=notifications
    )

@router.post('/', response_model=BookingActionResponse)
async def create_booking(
    booking: BookingCreate,
    current: ClientSession = Depends(get_current_client),
    api: ApiClient = Depends(get_api_client)
):
    """
    Book a session with a photographer.

    - Requires name, email and phone contact information
    - The date must be in the future
    - The total price is the selected package's current price
    """
    created = await BookingService.create_booking(api, current, booking)
    return BookingActionResponse(
        booking=BookingService.to_view(created, current.role),
        notification=Notification(
            title="Booking Requested",
            description=f"Your session is scheduled for {created.date.strftime('%B %d, %Y')} at {created.timeSlot}."
        )
    )

@router.get('/{booking_id}', response_model=BookingView)
async def get_booking(
    booking_id: str,
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """
    Booking detail card: the booking, its badge and the caller's available actions.
    Only bookings visible to the caller's role are found.
    """
    booking = await BookingService.get_booking(api, current, booking_id)
    return BookingService.to_view(booking, current.role)

@router.put('/{booking_id}/status', response_model=BookingActionResponse)
async def update_booking_status(
    booking_id: str,
    update: BookingStatusUpdate,
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """
    Move a booking to a new status.

    - Photographers confirm or cancel pending bookings and complete confirmed ones
    - Clients cancel their own pending or confirmed bookings
    - Admins may make any forward move
    - Cancelled and completed bookings cannot change
    - Requesting the current status changes nothing
    """
    booking = await BookingService.update_status(api, current, booking_id, update.status)
    title, description = STATUS_MESSAGES.get(
        status_value(booking.status), ("Booking Updated", "The booking status is unchanged.")
    )
    return BookingActionResponse(
        booking=BookingService.to_view(booking, current.role),
        notification=Notification(title=title, description=description)
    )

@router.put('/{booking_id}/cancel', response_model=BookingActionResponse)
async def cancel_booking(
    booking_id: str,
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """
    Cancel a booking. Cancelling an already cancelled booking is a no-op.
    """
    booking = await BookingService.cancel_booking(api, current, booking_id)
    return BookingActionResponse(
        booking=BookingService.to_view(booking, current.role),
        notification=Notification(
            title="Booking Cancelled",
            description="Your booking has been cancelled successfully."
        )
    )

@router.put('/{booking_id}/reschedule', response_model=BookingActionResponse)
async def reschedule_booking(
    booking_id: str,
    request: BookingReschedule,
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """
    Move a booking to another date and time slot.

    - The new date must be at least 2 days from today
    - Only the client or an admin can reschedule, and only open bookings
    """
    booking = await BookingService.reschedule_booking(api, current, booking_id, request)
    return BookingActionResponse(
        booking=BookingService.to_view(booking, current.role),
        notification=Notification(
            title="Booking Rescheduled",
            description=f"Your booking has been rescheduled to {booking.date.strftime('%B %d, %Y')} at {booking.timeSlot}."
        )
    )

@router.get('/{booking_id}/photos')
async def get_booking_photos(
    booking_id: str,
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """Photos delivered for a booking."""
    return await BookingService.get_booking_photos(api, current, booking_id)
