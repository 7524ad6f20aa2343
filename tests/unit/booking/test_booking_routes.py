import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from fastapi.testclient import TestClient
from fastapi import FastAPI, HTTPException
from datetime import datetime, timedelta, timezone

from frontend.routers.rou_booking import router
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_session
from frontend.models.mod_auth import ClientSession, SessionUser, UserRole
from frontend.models.mod_booking import Booking, BookingStatus
from frontend.services.svc_api import ApiError, register_error_handlers
from frontend.services.svc_booking import BookingService
from frontend.validators.val_booking import BookingTransitionError

app = FastAPI()
app.include_router(router)
register_error_handlers(app)

mock_api = MagicMock()
app.dependency_overrides[get_api_client] = lambda: mock_api

def make_session(role):
    return ClientSession(
        token="token-abc",
        user=SessionUser(id="user123", email="jane@example.com", fullName="Jane Doe", role=role),
        issued_at=datetime.now(timezone.utc)
    )

@pytest.fixture
def client():
    return TestClient(app)

@pytest.fixture
def as_role():
    def _as_role(role):
        app.dependency_overrides[get_current_session] = lambda: make_session(role)
    yield _as_role
    app.dependency_overrides.pop(get_current_session, None)

@pytest.fixture
def sample_booking():
    return Booking(
        _id="booking123",
        contactInfo={"name": "Jane Doe", "email": "jane@example.com", "phone": "555-0100"},
        photographer="photographer456",
        package="package789",
        date=datetime.now(timezone.utc).date() + timedelta(days=3),
        timeSlot="10:00 AM",
        location="Central Park",
        totalPrice=150,
        status="pending"
    )

@pytest.fixture
def create_booking_payload():
    return {
        "photographer": "photographer456",
        "package": "package789",
        "date": (datetime.now(timezone.utc).date() + timedelta(days=3)).isoformat(),
        "timeSlot": "10:00 AM",
        "contactInfo": {"name": "Jane Doe", "email": "jane@example.com", "phone": "555-0100"}
    }

def test_create_booking_success(client, as_role, sample_booking, create_booking_payload):
    as_role(UserRole.USER)
    with patch.object(BookingService, 'create_booking', new=AsyncMock(return_value=sample_booking)) as mock_create:
        response = client.post("/bookings/", json=create_booking_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["booking"]["booking"]["_id"] == "booking123"
    assert body["booking"]["booking"]["totalPrice"] == 150
    assert body["booking"]["badge"] == {"label": "Pending", "color": "bg-yellow-500"}
    assert body["booking"]["allowedStatuses"] == ["cancelled"]
    assert body["notification"]["title"] == "Booking Requested"
    assert mock_create.called

def test_create_booking_ignores_client_price(client, as_role, sample_booking, create_booking_payload):
    as_role(UserRole.USER)
    create_booking_payload["totalPrice"] = 1
    with patch.object(BookingService, 'create_booking', new=AsyncMock(return_value=sample_booking)) as mock_create:
        client.post("/bookings/", json=create_booking_payload)

    booking_arg = mock_create.call_args.args[2]
    assert not hasattr(booking_arg, "totalPrice")

def test_create_booking_photographer_forbidden(client, as_role, create_booking_payload):
    as_role(UserRole.PHOTOGRAPHER)
    response = client.post("/bookings/", json=create_booking_payload)

    assert response.status_code == 403
    assert response.json()["detail"]["code"] == ApiError.FORBIDDEN

def test_create_booking_bad_date_is_notification(client, as_role, create_booking_payload):
    as_role(UserRole.USER)
    create_booking_payload["date"] = "not-a-date"
    response = client.post("/bookings/", json=create_booking_payload)

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == ApiError.VALIDATION
    assert detail["variant"] == "destructive"

def test_create_booking_without_session(client, create_booking_payload):
    response = client.post("/bookings/", json=create_booking_payload)

    assert response.status_code == 401
    assert response.json()["detail"]["code"] == ApiError.NOT_AUTHENTICATED

def test_user_bookings_page(client, as_role, sample_booking):
    past = sample_booking.copy(update={"id": "old", "date": sample_booking.date - timedelta(days=30)})
    as_role(UserRole.USER)
    with patch.object(BookingService, 'get_user_bookings', new=AsyncMock(return_value=[past, sample_booking])):
        response = client.get("/bookings/")

    assert response.status_code == 200
    body = response.json()
    assert [v["booking"]["_id"] for v in body["upcoming"]] == ["booking123"]
    assert [v["booking"]["_id"] for v in body["past"]] == ["old"]
    assert body["notifications"] == []

def test_user_bookings_page_degrades_on_failure(client, as_role):
    as_role(UserRole.USER)
    failure = AsyncMock(side_effect=HTTPException(
        status_code=503, detail=ApiError.notification(ApiError.TRANSPORT)
    ))
    with patch.object(BookingService, 'get_user_bookings', new=failure):
        response = client.get("/bookings/")

    assert response.status_code == 200
    body = response.json()
    assert body["upcoming"] == [] and body["past"] == []
    assert body["notifications"][0]["title"] == "Failed to Load Bookings"
    assert body["notifications"][0]["variant"] == "destructive"

def test_update_status_confirm(client, as_role, sample_booking):
    as_role(UserRole.PHOTOGRAPHER)
    confirmed = sample_booking.copy(update={"status": BookingStatus.CONFIRMED})
    with patch.object(BookingService, 'update_status', new=AsyncMock(return_value=confirmed)) as mock_update:
        response = client.put("/bookings/booking123/status", json={"status": "confirmed"})

    assert response.status_code == 200
    body = response.json()
    assert body["booking"]["booking"]["status"] == "confirmed"
    assert body["booking"]["allowedStatuses"] == ["completed"]
    assert body["notification"]["title"] == "Booking Confirmed"
    assert mock_update.call_args.args[2:] == ("booking123", BookingStatus.CONFIRMED)

def test_update_status_disallowed(client, as_role):
    as_role(UserRole.PHOTOGRAPHER)
    error = BookingTransitionError(BookingStatus.CONFIRMED, BookingStatus.PENDING, UserRole.PHOTOGRAPHER)
    with patch.object(BookingService, 'update_status', new=AsyncMock(side_effect=error)):
        response = client.put("/bookings/booking123/status", json={"status": "pending"})

    assert response.status_code == 409
    assert response.json()["detail"]["code"] == ApiError.INVALID_TRANSITION

def test_update_status_unknown_value(client, as_role):
    as_role(UserRole.ADMIN)
    response = client.put("/bookings/booking123/status", json={"status": "archived"})

    assert response.status_code == 400

def test_cancel_booking(client, as_role, sample_booking):
    as_role(UserRole.USER)
    cancelled = sample_booking.copy(update={"status": BookingStatus.CANCELLED})
    with patch.object(BookingService, 'cancel_booking', new=AsyncMock(return_value=cancelled)):
        response = client.put("/bookings/booking123/cancel")

    assert response.status_code == 200
    body = response.json()
    assert body["booking"]["badge"]["color"] == "bg-red-500"
    assert body["booking"]["allowedStatuses"] == []
    assert body["booking"]["canReschedule"] is False

def test_reschedule_booking(client, as_role, sample_booking):
    as_role(UserRole.USER)
    new_date = datetime.now(timezone.utc).date() + timedelta(days=9)
    moved = sample_booking.copy(update={"date": new_date, "timeSlot": "2:00 PM"})
    with patch.object(BookingService, 'reschedule_booking', new=AsyncMock(return_value=moved)) as mock_reschedule:
        response = client.put(
            "/bookings/booking123/reschedule",
            json={"date": new_date.isoformat(), "timeSlot": "2:00 PM"}
        )

    assert response.status_code == 200
    assert response.json()["booking"]["booking"]["date"] == new_date.isoformat()
    assert response.json()["notification"]["title"] == "Booking Rescheduled"
    assert mock_reschedule.call_args.args[3].timeSlot == "2:00 PM"

def test_get_booking_photos(client, as_role):
    as_role(UserRole.USER)
    photos = [{"url": "http://localhost:5000/uploads/1.jpg"}]
    with patch.object(BookingService, 'get_booking_photos', new=AsyncMock(return_value=photos)):
        response = client.get("/bookings/booking123/photos")

    assert response.status_code == 200
    assert response.json() == photos

def test_user_bookings_page_with_unknown_status(client, as_role, sample_booking):
    odd = sample_booking.copy(update={"status": "rescheduled"})
    as_role(UserRole.USER)
    with patch.object(BookingService, 'get_user_bookings', new=AsyncMock(return_value=[odd])):
        response = client.get("/bookings/")

    assert response.status_code == 200
    view = response.json()["upcoming"][0]
    assert view["booking"]["status"] == "rescheduled"
    assert view["badge"] == {"label": "Unknown", "color": "bg-gray-500"}
    assert view["allowedStatuses"] == []
