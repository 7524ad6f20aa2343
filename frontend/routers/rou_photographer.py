from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from typing import List, Optional
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_photographer
from frontend.models.mod_auth import ClientSession
from frontend.models.mod_photographer import Photographer
from frontend.schemas.sch_notification import ErrorDetail, Notification
from frontend.schemas.sch_photographer import (
    TIME_SLOTS,
    PhotographerFilter,
    PhotographerListPage,
    PhotographerDetailPage,
    ProfileUpdate,
    AvailabilityUpdate
)
from frontend.services.svc_api import ApiClient, load_section
from frontend.services.svc_package import PackageService
from frontend.services.svc_photographer import PhotographerService
from frontend.services.svc_portfolio import PortfolioService

router = APIRouter(
    prefix="/photographers",
    tags=["Photographers"],
    responses={404: {"model": ErrorDetail}},
)

def _split_list(value: Optional[str]) -> Optional[List[str]]:
    if value is None:
        return None
    return [item.strip() for item in value.split(",") if item.strip()]

@router.get('/', response_model=PhotographerListPage)
async def list_photographers(
    search: Optional[str] = Query(default=None),
    categories: List[str] = Query(default=[]),
    min_price: float = Query(default=0, ge=0),
    max_price: float = Query(default=1000, ge=0),
    api: ApiClient = Depends(get_api_client)
):
    """
    Browse photographers.

    - Free-text search over name, specialty and location
    - Category selection; photographers without categories always show
    - Price range; photographers without a listed price always show
    """
    criteria = PhotographerFilter(
        search=search,
        categories=[c for value in categories for c in _split_list(value)],
        min_price=min_price,
        max_price=max_price
    )
    notifications: List[Notification] = []
    photographers = await load_section(
        PhotographerService.search_photographers(api, criteria), None, notifications, "Search Unavailable"
    )
    if photographers is None:
        notifications.clear()
        photographers = await load_section(
            PhotographerService.get_all_photographers(api), [], notifications, "Failed to Load Photographers"
        )
    photographers = PhotographerService.filter_photographers(photographers, criteria)
    return PhotographerListPage(
        photographers=photographers,
        total=len(photographers),
        notifications=notifications
    )

@router.put('/profile', response_model=Photographer)
async def update_profile(
    fullName: Optional[str] = Form(default=None),
    specialty: Optional[str] = Form(default=None),
    location: Optional[str] = Form(default=None),
    bio: Optional[str] = Form(default=None),
    phone: Optional[str] = Form(default=None),
    categories: Optional[str] = Form(default=None),
    price: Optional[float] = Form(default=None),
    profileImage: Optional[UploadFile] = File(default=None),
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """
    Update the logged-in photographer's profile.

    - Form fields are all optional; `categories` is comma separated
    - An optional `profileImage` replaces the profile picture
    """
    profile = ProfileUpdate(
        fullName=fullName,
        specialty=specialty,
        location=location,
        bio=bio,
        phone=phone,
        categories=_split_list(categories),
        price=price
    )
    image = None
    if profileImage is not None and profileImage.filename:
        image = (profileImage.filename, profileImage.content_type, await profileImage.read())
    return await PhotographerService.update_profile(api, current, profile, image)

@router.put('/availability')
async def update_availability(
    availability: AvailabilityUpdate,
    current: ClientSession = Depends(get_current_photographer),
    api: ApiClient = Depends(get_api_client)
):
    """Replace the logged-in photographer's weekly availability and blocked dates."""
    return await PhotographerService.update_availability(api, current, availability)

@router.get('/{photographer_id}', response_model=PhotographerDetailPage)
async def photographer_detail(
    photographer_id: str,
    api: ApiClient = Depends(get_api_client)
):
    """
    Photographer detail view.

    - Profile with resolved profile image
    - Published portfolios
    - Active packages only, each bookable at its current price
    - The time slots a client can pick from
    """
    photographer = await PhotographerService.get_photographer(api, photographer_id)
    notifications: List[Notification] = []
    portfolios = await load_section(
        PortfolioService.get_public_portfolios(api, photographer_id), [], notifications, "Failed to Load Portfolio"
    )
    packages = await load_section(
        PackageService.get_public_packages(api, photographer_id), [], notifications, "Failed to Load Packages"
    )
    return PhotographerDetailPage(
        photographer=photographer,
        portfolios=[p for p in portfolios if p.isPublished],
        packages=[p for p in packages if p.isActive],
        timeSlots=TIME_SLOTS,
        notifications=notifications
    )
