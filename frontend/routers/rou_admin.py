from fastapi import APIRouter, Depends, Query
from typing import List, Optional
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_admin
from frontend.models.mod_admin import account_badge
from frontend.models.mod_auth import ClientSession
from frontend.schemas.sch_booking import BookingView
from frontend.schemas.sch_dashboard import AdminStats, UserAccountView, PhotographerAccountView
from frontend.schemas.sch_notification import ErrorDetail, Notification
from frontend.services.svc_admin import AdminService
from frontend.services.svc_api import ApiClient, load_section
from frontend.services.svc_booking import BookingService

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    responses={403: {"model": ErrorDetail}},
)

@router.get('/stats', response_model=AdminStats)
async def admin_stats(
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """
    Marketplace totals for the admin dashboard.
    A count that fails to load shows as 0 with a notification.
    """
    notifications: List[Notification] = []
    users = await load_section(AdminService.get_users(api, current), [], notifications, "Failed to Load Users")
    photographers = await load_section(
        AdminService.get_photographers(api, current), [], notifications, "Failed to Load Photographers"
    )
    bookings = await load_section(
        BookingService.get_all_bookings(api, current), [], notifications, "Failed to Load Bookings"
    )
    return AdminStats(
        totalUsers=len(users),
        totalPhotographers=len(photographers),
        totalBookings=len(bookings),
        notifications=notifications
    )

@router.get('/users', response_model=List[UserAccountView])
async def list_users(
    search: Optional[str] = Query(default=None),
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """Client accounts, searchable by name or email, with account status badges."""
    users = AdminService.search_accounts(await AdminService.get_users(api, current), search)
    return [UserAccountView(account=user, badge=account_badge(user.status)) for user in users]

@router.delete('/users/{user_id}', status_code=204)
async def delete_user(
    user_id: str,
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """Delete a client account."""
    await AdminService.delete_user(api, current, user_id)

@router.get('/photographers', response_model=List[PhotographerAccountView])
async def list_photographers(
    search: Optional[str] = Query(default=None),
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """Photographer accounts, searchable by name or email, with account status badges."""
    photographers = AdminService.search_accounts(await AdminService.get_photographers(api, current), search)
    return [
        PhotographerAccountView(account=photographer, badge=account_badge(photographer.status))
        for photographer in photographers
    ]

@router.delete('/photographers/{photographer_id}', status_code=204)
async def delete_photographer(
    photographer_id: str,
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """Delete a photographer account."""
    await AdminService.delete_photographer(api, current, photographer_id)

@router.get('/bookings', response_model=List[BookingView])
async def list_bookings(
    search: Optional[str] = Query(default=None),
    current: ClientSession = Depends(get_current_admin),
    api: ApiClient = Depends(get_api_client)
):
    """
    Every booking in the marketplace, latest date first.
    Each booking carries the status moves an admin can make.
    """
    bookings = BookingService.search_bookings(await BookingService.get_all_bookings(api, current), search)
    bookings = sorted(bookings, key=lambda b: b.date, reverse=True)
    return [BookingService.to_view(b, current.role) for b in bookings]
