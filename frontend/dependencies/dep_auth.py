from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional
from frontend.models.mod_auth import ClientSession, UserRole
from frontend.services.svc_api import ApiError
from frontend.services.svc_session import session_store

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def _resolve_session(token: str) -> Optional[ClientSession]:
    session = session_store.get(token)
    if session is not None:
        return session
    # The token may predate this process (restart, another worker)
    try:
        return session_store.restore(token)
    except JWTError:
        return None

async def get_current_session(token: Optional[str] = Depends(oauth2_scheme)) -> ClientSession:
    """
    Get the session of the calling client from its bearer token.
    This is the main dependency to be used in protected views.
    """
    if not token:
        ApiError.raise_http_exception(401, ApiError.NOT_AUTHENTICATED)
    session = _resolve_session(token)
    if session is None:
        ApiError.raise_http_exception(401, ApiError.SESSION_EXPIRED)
    return session

async def get_optional_session(token: Optional[str] = Depends(oauth2_scheme)) -> Optional[ClientSession]:
    """Session for public views that render differently when logged in"""
    if not token:
        return None
    return _resolve_session(token)

def get_current_client(current: ClientSession = Depends(get_current_session)) -> ClientSession:
    """Dependency for views reserved to clients booking sessions"""
    if current.role != UserRole.USER:
        ApiError.raise_http_exception(403, ApiError.FORBIDDEN)
    return current

def get_current_photographer(current: ClientSession = Depends(get_current_session)) -> ClientSession:
    """Dependency for photographer dashboard views"""
    if current.role != UserRole.PHOTOGRAPHER:
        ApiError.raise_http_exception(403, ApiError.FORBIDDEN)
    return current

def get_current_admin(current: ClientSession = Depends(get_current_session)) -> ClientSession:
    """Dependency for views that require admin access"""
    if current.role != UserRole.ADMIN:
        ApiError.raise_http_exception(403, ApiError.FORBIDDEN)
    return current
