from fastapi import APIRouter, Depends, Query
from datetime import date
from typing import List, Optional
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_photographer
from frontend.models.mod_auth import ClientSession
from frontend.schemas.sch_dashboard import PhotographerDashboard, CalendarDay
from frontend.schemas.sch_notification import Notification
from frontend.services.svc_api import ApiClient, load_section
from frontend.services.svc_booking import BookingService
from frontend.services.svc_dashboard import DashboardService
from frontend.services.svc_package import PackageService
from frontend.services.svc_portfolio import PortfolioService
from frontend.validators.val_booking import BookingValidator

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
)

@router.get('/', response_model=PhotographerDashboard)
async def photographer_dashboard(
    search: Optional[str] = Query(default=None),
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """
    The photographer's dashboard.

    - Stats: total, pending and next-7-days bookings, portfolio and package counts
    - Bookings with the actions available to the photographer
    - Portfolios and packages
    - Each section loads on its own; a failed section is empty plus a notification
    """
    notifications: List[Notification] = []
    bookings = await load_section(
        BookingService.get_photographer_bookings(api, current), [], notifications, "Failed to Load Bookings"
    )
    portfolios = await load_section(
        PortfolioService.get_photographer_portfolios(api, current), [], notifications, "Failed to Load Portfolio"
    )
    packages = await load_section(
        PackageService.get_photographer_packages(api, current), [], notifications, "Failed to Load Packages"
    )
    today = BookingValidator.current_date()
    return PhotographerDashboard(
        stats=DashboardService.photographer_stats(bookings, portfolios, packages, today),
        bookings=[
            BookingService.to_view(b, current.role)
            for b in BookingService.search_bookings(bookings, search)
        ],
        portfolios=portfolios,
        packages=packages,
        notifications=notifications
    )

@router.get('/calendar', response_model=CalendarDay)
async def photographer_calendar(
    day: Optional[date] = Query(default=None, description="yyyy-MM-dd, defaults to today"),
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Bookings on the selected day, plus every date that holds a booking."""
    selected = day or BookingValidator.current_date()
    bookings = await BookingService.get_photographer_bookings(api, current)
    return CalendarDay(
        day=selected,
        bookings=[BookingService.to_view(b, current.role) for b in BookingService.bookings_on(bookings, selected)],
        bookedDates=DashboardService.booked_dates(bookings)
    )
