from datetime import date
from typing import List, Tuple, Optional
from frontend.configuration.config import Config
from frontend.configuration.monitor import log_event, log_exception, log_metric, start_span
from frontend.models.mod_auth import ClientSession, UserRole
from frontend.models.mod_booking import Booking, BookingStatus, status_badge, status_value
from frontend.schemas.sch_booking import BookingCreate, BookingReschedule, BookingView
from frontend.services.svc_api import ApiClient, ApiError
from frontend.services.svc_package import PackageService
from frontend.validators.val_booking import BookingValidator, next_allowed

class BookingService:
    # Where each role reads the bookings it may act on
    LIST_PATHS = {
        UserRole.USER: "/bookings/user",
        UserRole.PHOTOGRAPHER: "/bookings/photographer",
        UserRole.ADMIN: "/bookings",
    }

    @staticmethod
    def _to_bookings(data) -> List[Booking]:
        return [Booking(**item) for item in (data or [])]

    @staticmethod
    def to_view(booking: Booking, role: UserRole) -> BookingView:
        allowed = next_allowed(booking.status, role)
        return BookingView(
            booking=booking,
            badge=status_badge(booking.status),
            allowedStatuses=[status for status in BookingStatus if status in allowed],
            canReschedule=BookingValidator.can_reschedule(booking.status, role)
        )

    @staticmethod
    async def create_booking(api: ApiClient, session: ClientSession, booking: BookingCreate) -> Booking:
        try:
            with start_span("create_booking", attributes={
                "user_id": session.user_id,
                "photographer_id": booking.photographer
            }):
                log_event("Create booking started", {
                    "user_id": session.user_id,
                    "photographer_id": booking.photographer,
                    "package_id": booking.package,
                    "date": booking.date.isoformat(),
                    "time_slot": booking.timeSlot
                })

                # Validate business rules
                BookingValidator.validate_create_booking(booking)

                # The price is taken from the package as it is now and never recomputed
                package = await PackageService.get_bookable_package(api, booking.photographer, booking.package)

                payload = {
                    "photographer": booking.photographer,
                    "package": booking.package,
                    "date": booking.date.isoformat(),
                    "timeSlot": booking.timeSlot,
                    "location": booking.location or Config.DEFAULT_BOOKING_LOCATION,
                    "totalPrice": package.price,
                    "notes": booking.notes,
                    "contactInfo": booking.contactInfo.dict()
                }
                data = await api.post("/bookings", token=session.token, json=payload, context="create_booking")
                created = Booking(**data) if data else Booking(**payload, status=BookingStatus.PENDING)

                log_event("Booking created successfully", {
                    "booking_id": created.id,
                    "user_id": session.user_id,
                    "total_price": created.totalPrice
                })
                return created
        except Exception as e:
            log_exception(e, {
                "operation": "create_booking",
                "user_id": session.user_id,
                "photographer_id": booking.photographer
            })
            raise

    @staticmethod
    async def _list(api: ApiClient, session: ClientSession, path: str, operation: str) -> List[Booking]:
        try:
            with start_span(operation, attributes={"user_id": session.user_id}):
                data = await api.get(path, token=session.token, context=operation)
                bookings = BookingService._to_bookings(data)
                log_metric(operation, len(bookings), {"user_id": session.user_id})
                return bookings
        except Exception as e:
            log_exception(e, {"operation": operation, "user_id": session.user_id})
            raise

    @staticmethod
    async def get_user_bookings(api: ApiClient, session: ClientSession) -> List[Booking]:
        """Bookings made by the logged-in client"""
        return await BookingService._list(api, session, "/bookings/user", "get_user_bookings")

    @staticmethod
    async def get_photographer_bookings(api: ApiClient, session: ClientSession) -> List[Booking]:
        """Bookings made with the logged-in photographer"""
        return await BookingService._list(api, session, "/bookings/photographer", "get_photographer_bookings")

    @staticmethod
    async def get_all_bookings(api: ApiClient, session: ClientSession) -> List[Booking]:
        """Every booking in the marketplace (admin)"""
        return await BookingService._list(api, session, "/bookings", "get_all_bookings")

    @staticmethod
    async def get_bookings(api: ApiClient, session: ClientSession) -> List[Booking]:
        path = BookingService.LIST_PATHS[session.role]
        return await BookingService._list(api, session, path, f"get_{session.role.value}_bookings")

    @staticmethod
    async def get_booking(api: ApiClient, session: ClientSession, booking_id: str) -> Booking:
        """
        Read a booking fresh from the API, through the list the caller's role may see.
        A booking outside that list does not exist for the caller.
        """
        for booking in await BookingService.get_bookings(api, session):
            if booking.id == booking_id:
                return booking
        log_event("Booking not found", {"booking_id": booking_id, "user_id": session.user_id})
        ApiError.raise_http_exception(404, ApiError.NOT_FOUND, "Booking not found", context="get_booking")

    @staticmethod
    async def update_status(
        api: ApiClient, session: ClientSession, booking_id: str, status: BookingStatus
    ) -> Booking:
        try:
            with start_span("update_booking_status", attributes={"booking_id": booking_id, "status": status.value}):
                log_event("Update booking status started", {
                    "booking_id": booking_id,
                    "requested_status": status.value,
                    "role": session.role.value
                })

                existing = await BookingService.get_booking(api, session, booking_id)
                if BookingValidator.is_noop(existing.status, status):
                    log_event("Booking already has requested status", {"booking_id": booking_id, "status": status.value})
                    return existing

                BookingValidator.validate_status_change(existing.status, status, session.role)

                data = await api.put(
                    f"/bookings/{booking_id}",
                    token=session.token,
                    json={"status": status.value},
                    context="update_booking_status"
                )
                updated = Booking(**data) if data else existing.copy(update={"status": status})

                log_event("Booking status updated successfully", {
                    "booking_id": booking_id,
                    "previous_status": status_value(existing.status),
                    "status": status_value(updated.status)
                })
                return updated
        except Exception as e:
            log_exception(e, {"operation": "update_booking_status", "booking_id": booking_id})
            raise

    @staticmethod
    async def cancel_booking(api: ApiClient, session: ClientSession, booking_id: str) -> Booking:
        """Cancel a booking; cancelling an already cancelled booking changes nothing"""
        try:
            with start_span("cancel_booking", attributes={"booking_id": booking_id}):
                log_event("Cancel booking started", {"booking_id": booking_id, "role": session.role.value})

                existing = await BookingService.get_booking(api, session, booking_id)
                if BookingValidator.is_noop(existing.status, BookingStatus.CANCELLED):
                    log_event("Booking already cancelled", {"booking_id": booking_id})
                    return existing

                BookingValidator.validate_status_change(existing.status, BookingStatus.CANCELLED, session.role)

                data = await api.put(f"/bookings/{booking_id}/cancel", token=session.token, context="cancel_booking")
                cancelled = Booking(**data) if data else existing.copy(update={"status": BookingStatus.CANCELLED})

                log_event("Booking cancelled successfully", {"booking_id": booking_id})
                return cancelled
        except Exception as e:
            log_exception(e, {"operation": "cancel_booking", "booking_id": booking_id})
            raise

    @staticmethod
    async def reschedule_booking(
        api: ApiClient, session: ClientSession, booking_id: str, request: BookingReschedule
    ) -> Booking:
        """Move a booking to a new date and time slot; nothing else changes"""
        try:
            with start_span("reschedule_booking", attributes={"booking_id": booking_id}):
                log_event("Reschedule booking started", {
                    "booking_id": booking_id,
                    "date": request.date.isoformat(),
                    "time_slot": request.timeSlot
                })

                existing = await BookingService.get_booking(api, session, booking_id)
                BookingValidator.validate_reschedule(existing, request, session.role)

                data = await api.put(
                    f"/bookings/{booking_id}/reschedule",
                    token=session.token,
                    json={"date": request.date.isoformat(), "timeSlot": request.timeSlot},
                    context="reschedule_booking"
                )
                rescheduled = Booking(**data) if data else existing.copy(
                    update={"date": request.date, "timeSlot": request.timeSlot}
                )

                log_event("Booking rescheduled successfully", {
                    "booking_id": booking_id,
                    "previous_date": existing.date.isoformat(),
                    "date": rescheduled.date.isoformat()
                })
                return rescheduled
        except Exception as e:
            log_exception(e, {"operation": "reschedule_booking", "booking_id": booking_id})
            raise

    @staticmethod
    async def get_booking_photos(api: ApiClient, session: ClientSession, booking_id: str) -> list:
        """Photos delivered for a booking"""
        try:
            with start_span("get_booking_photos", attributes={"booking_id": booking_id}):
                data = await api.get(f"/bookings/{booking_id}/photos", token=session.token, context="get_booking_photos")
                return data or []
        except Exception as e:
            log_exception(e, {"operation": "get_booking_photos", "booking_id": booking_id})
            raise

    @staticmethod
    def split_upcoming_past(bookings: List[Booking], today: date) -> Tuple[List[Booking], List[Booking]]:
        """Bookings from today on are upcoming (soonest first), older ones past (latest first)"""
        upcoming = sorted((b for b in bookings if b.date >= today), key=lambda b: b.date)
        past = sorted((b for b in bookings if b.date < today), key=lambda b: b.date, reverse=True)
        return upcoming, past

    @staticmethod
    def search_bookings(bookings: List[Booking], term: Optional[str]) -> List[Booking]:
        """Match the term against client name, photographer, location and package name"""
        if not term:
            return list(bookings)
        needle = term.lower()

        def haystack(booking: Booking):
            yield booking.contactInfo.name if booking.contactInfo else None
            yield booking.reference_name("photographer")
            yield booking.location
            yield booking.reference_name("package")

        return [
            booking for booking in bookings
            if any(value and needle in value.lower() for value in haystack(booking))
        ]

    @staticmethod
    def bookings_on(bookings: List[Booking], day: date) -> List[Booking]:
        return [booking for booking in bookings if booking.date == day]
