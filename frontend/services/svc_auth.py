from fastapi import HTTPException
from typing import Any, Dict, Optional, Tuple
from frontend.configuration.monitor import log_event, log_exception, start_span
from frontend.models.mod_auth import ClientSession, SessionUser, UserRole, home_path
from frontend.schemas.sch_auth import LoginRequest, RegisterRequest, SessionResponse, LogoutResponse
from frontend.schemas.sch_notification import Notification
from frontend.services.svc_api import ApiClient, ApiError
from frontend.services.svc_session import session_store

class AuthService:
    @staticmethod
    def _session_payload(
        data: Any,
        email: str,
        role: UserRole,
        full_name: Optional[str] = None
    ) -> Tuple[str, SessionUser]:
        """
        Build the session user from a login/register response.

        The API answers either ``{token, role, userId}`` or ``{token, user}``.
        """
        if not isinstance(data, dict) or not data.get("token"):
            ApiError.raise_http_exception(502, ApiError.UPSTREAM, "No token received from the booking service")

        user_data: Dict[str, Any] = data.get("user") or {}
        resolved_role = data.get("role") or user_data.get("role") or role
        try:
            resolved_role = UserRole(resolved_role)
        except ValueError:
            ApiError.raise_http_exception(502, ApiError.UPSTREAM, f"Unknown role '{resolved_role}'")

        user = SessionUser(
            id=data.get("userId") or user_data.get("_id") or user_data.get("id"),
            email=user_data.get("email") or email,
            fullName=user_data.get("fullName") or full_name,
            role=resolved_role
        )
        return data["token"], user

    @staticmethod
    def _session_response(session: ClientSession, notification: Notification) -> SessionResponse:
        return SessionResponse(
            token=session.token,
            user=session.user,
            redirect=home_path(session.role),
            expiresAt=session.expires_at,
            notification=notification
        )

    @staticmethod
    async def login(api: ApiClient, request: LoginRequest) -> SessionResponse:
        """Login with email, password and the role the caller signs in as"""
        try:
            with start_span("login", attributes={"role": request.role.value}):
                log_event("Login started", {"email": request.email, "role": request.role.value})

                data = await api.post(
                    "/auth/login",
                    json={"email": request.email, "password": request.password, "role": request.role.value},
                    context="login"
                )
                token, user = AuthService._session_payload(data, request.email, request.role)
                session = session_store.open(token, user)

                log_event("Login successful", {"user_id": user.id, "role": user.role.value})
                return AuthService._session_response(session, Notification(
                    title="Login Successful",
                    description=f"Welcome back! You are logged in as a {user.role.value}."
                ))
        except Exception as e:
            log_exception(e, {"operation": "login", "email": request.email})
            raise

    @staticmethod
    async def register(api: ApiClient, request: RegisterRequest) -> SessionResponse:
        """Create an account and open a session for it"""
        try:
            with start_span("register", attributes={"role": request.role.value}):
                log_event("Registration started", {"email": request.email, "role": request.role.value})

                payload = request.dict(exclude_none=True)
                payload["role"] = request.role.value
                data = await api.post("/auth/register", json=payload, context="register")
                token, user = AuthService._session_payload(data, request.email, request.role, request.fullName)
                session = session_store.open(token, user)

                log_event("Registration successful", {"user_id": user.id, "role": user.role.value})
                return AuthService._session_response(session, Notification(
                    title="Registration Successful",
                    description="Your account has been created successfully!"
                ))
        except Exception as e:
            log_exception(e, {"operation": "register", "email": request.email})
            raise

    @staticmethod
    def logout(token: str) -> LogoutResponse:
        session_store.invalidate(token, reason="logout")
        return LogoutResponse(notification=Notification(
            title="Logged Out",
            description="You have been successfully logged out."
        ))

    @staticmethod
    async def verify_session(api: ApiClient, session: ClientSession) -> SessionUser:
        """
        Confirm the token with the API and refresh the session user.
        Any failure ends the session.
        """
        try:
            data = await api.get("/auth/me", token=session.token, context="verify_session")
        except HTTPException:
            session_store.invalidate(session.token, reason="verification_failed")
            raise

        if isinstance(data, dict):
            user_data = data.get("user") or data
            session.user.fullName = user_data.get("fullName") or session.user.fullName
            session.user.email = user_data.get("email") or session.user.email
            session.user.id = user_data.get("_id") or user_data.get("id") or session.user.id
        return session.user
