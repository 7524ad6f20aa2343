from fastapi import APIRouter, Depends
from frontend.configuration.upstream import get_api_client
from frontend.dependencies.dep_auth import get_current_session
from frontend.models.mod_auth import ClientSession, SessionUser
from frontend.schemas.sch_auth import LoginRequest, RegisterRequest, SessionResponse, LogoutResponse
from frontend.schemas.sch_notification import ErrorDetail
from frontend.services.svc_api import ApiClient
from frontend.services.svc_auth import AuthService

router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/login", response_model=SessionResponse, responses={400: {"model": ErrorDetail}, 401: {"model": ErrorDetail}})
async def login(
    request: LoginRequest,
    api: ApiClient = Depends(get_api_client)
):
    """
    Login with email, password and role.

    - Opens a session for the returned token
    - `redirect` is the landing view for the role
    """
    return await AuthService.login(api, request)

@router.post("/register", response_model=SessionResponse, responses={400: {"model": ErrorDetail}})
async def register(
    request: RegisterRequest,
    api: ApiClient = Depends(get_api_client)
):
    """
    Register a new client or photographer account and log it in.
    """
    return await AuthService.register(api, request)

@router.post("/logout", response_model=LogoutResponse)
async def logout(current: ClientSession = Depends(get_current_session)):
    """End the current session."""
    return AuthService.logout(current.token)

@router.get("/me", response_model=SessionUser, responses={401: {"model": ErrorDetail}})
async def me(
    current: ClientSession = Depends(get_current_session),
    api: ApiClient = Depends(get_api_client)
):
    """
    Verify the session token with the booking service and return the user.
    A rejected token ends the session.
    """
    return await AuthService.verify_session(api, current)
