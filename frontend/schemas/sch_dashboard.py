from pydantic import BaseModel
from typing import List
from datetime import date
from frontend.models.mod_admin import UserAccount, PhotographerAccount
from frontend.models.mod_booking import StatusBadge
from frontend.models.mod_package import Package
from frontend.models.mod_portfolio import Portfolio
from frontend.schemas.sch_booking import BookingView
from frontend.schemas.sch_notification import Notification

class PhotographerStats(BaseModel):
    totalBookings: int = 0
    pendingBookings: int = 0
    upcomingBookings: int = 0
    portfolios: int = 0
    packages: int = 0

class PhotographerDashboard(BaseModel):
    stats: PhotographerStats
    bookings: List[BookingView] = []
    portfolios: List[Portfolio] = []
    packages: List[Package] = []
    notifications: List[Notification] = []

class CalendarDay(BaseModel):
    day: date
    bookings: List[BookingView] = []
    bookedDates: List[date] = []

class AdminStats(BaseModel):
    totalUsers: int = 0
    totalPhotographers: int = 0
    totalBookings: int = 0
    notifications: List[Notification] = []

class UserAccountView(BaseModel):
    account: UserAccount
    badge: StatusBadge

class PhotographerAccountView(BaseModel):
    account: PhotographerAccount
    badge: StatusBadge
