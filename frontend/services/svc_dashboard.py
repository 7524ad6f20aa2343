from datetime import date, timedelta
from typing import List
from frontend.models.mod_booking import Booking, BookingStatus, TERMINAL_STATUSES, status_value
from frontend.models.mod_package import Package
from frontend.models.mod_portfolio import Portfolio
from frontend.schemas.sch_dashboard import PhotographerStats

# Dashboard "upcoming" card covers the coming week
UPCOMING_WINDOW_DAYS = 7

class DashboardService:
    @staticmethod
    def photographer_stats(
        bookings: List[Booking],
        portfolios: List[Portfolio],
        packages: List[Package],
        today: date
    ) -> PhotographerStats:
        window_end = today + timedelta(days=UPCOMING_WINDOW_DAYS)
        return PhotographerStats(
            totalBookings=len(bookings),
            pendingBookings=sum(1 for b in bookings if b.status == BookingStatus.PENDING),
            upcomingBookings=sum(
                1 for b in bookings
                if status_value(b.status) not in {s.value for s in TERMINAL_STATUSES} and today <= b.date <= window_end
            ),
            portfolios=len(portfolios),
            packages=len(packages)
        )

    @staticmethod
    def booked_dates(bookings: List[Booking]) -> List[date]:
        """Distinct dates holding at least one open booking, in calendar order"""
        return sorted({b.date for b in bookings if b.status != BookingStatus.CANCELLED})
