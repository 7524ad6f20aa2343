from pydantic import BaseModel
from typing import Optional, List, Dict, Any
from frontend.models.mod_photographer import Photographer
from frontend.models.mod_portfolio import Portfolio
from frontend.models.mod_package import Package
from frontend.schemas.sch_notification import Notification

# Bookable time-slot labels offered on the photographer detail view
TIME_SLOTS = [
    "9:00 AM", "10:00 AM", "11:00 AM",
    "1:00 PM", "2:00 PM", "3:00 PM", "4:00 PM"
]

class PhotographerFilter(BaseModel):
    search: Optional[str] = None
    categories: List[str] = []
    min_price: float = 0
    max_price: float = 1000

    def as_query_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if self.search:
            params["search"] = self.search
        if self.categories:
            params["categories"] = ",".join(self.categories)
        params["minPrice"] = self.min_price
        params["maxPrice"] = self.max_price
        return params

class PhotographerListPage(BaseModel):
    photographers: List[Photographer] = []
    total: int = 0
    notifications: List[Notification] = []

class PhotographerDetailPage(BaseModel):
    photographer: Photographer
    portfolios: List[Portfolio] = []
    packages: List[Package] = []
    timeSlots: List[str] = TIME_SLOTS
    notifications: List[Notification] = []

class ProfileUpdate(BaseModel):
    fullName: Optional[str] = None
    specialty: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    phone: Optional[str] = None
    categories: Optional[List[str]] = None
    price: Optional[float] = None

class AvailabilityUpdate(BaseModel):
    # Weekday name -> list of time-slot labels, e.g. {"monday": ["9:00 AM"]}
    weekly: Dict[str, List[str]] = {}
    unavailableDates: List[str] = []
