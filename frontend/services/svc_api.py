import httpx
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Optional, Dict, Any
from frontend.configuration.monitor import log_event, log_exception
from frontend.schemas.sch_notification import Notification, NotificationVariant
from frontend.services.svc_session import session_store

class ApiError:
    """Helper class turning every failure into a caller-facing notification"""

    # Error categories
    TRANSPORT = "network_error"
    UPSTREAM = "api_error"
    VALIDATION = "validation_error"
    SESSION_EXPIRED = "session_expired"
    NOT_AUTHENTICATED = "not_authenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INVALID_TRANSITION = "invalid_transition"

    TITLES = {
        TRANSPORT: "Connection Problem",
        UPSTREAM: "Request Failed",
        VALIDATION: "Missing Information",
        SESSION_EXPIRED: "Session Expired",
        NOT_AUTHENTICATED: "Authentication Required",
        FORBIDDEN: "Not Allowed",
        NOT_FOUND: "Not Found",
        INVALID_TRANSITION: "Action Not Available",
    }

    DEFAULT_MESSAGES = {
        TRANSPORT: "The booking service could not be reached. Please try again.",
        UPSTREAM: "Something went wrong. Please try again.",
        VALIDATION: "Please check the information you entered.",
        SESSION_EXPIRED: "Your session has expired, please log in again.",
        NOT_AUTHENTICATED: "Please log in to continue.",
        FORBIDDEN: "You don't have permission to perform this action.",
        NOT_FOUND: "The requested item could not be found.",
        INVALID_TRANSITION: "This booking can no longer be changed that way.",
    }

    @staticmethod
    def notification(code: str, message: Optional[str] = None, context: str = "") -> Dict[str, Any]:
        error_obj = {
            "code": code,
            "title": ApiError.TITLES.get(code, "Error"),
            "message": message or ApiError.DEFAULT_MESSAGES.get(code, "Something went wrong."),
            "variant": "destructive",
        }
        if context:
            error_obj["context"] = context
        return error_obj

    @staticmethod
    def raise_http_exception(status_code: int, code: str, message: Optional[str] = None, context: str = "") -> None:
        headers = None
        if status_code == 401:
            headers = {"WWW-Authenticate": "Bearer"}
        raise HTTPException(
            status_code=status_code,
            detail=ApiError.notification(code, message, context),
            headers=headers
        )

    @staticmethod
    def message_from_response(response: httpx.Response) -> Optional[str]:
        """Extract the API's ``{message}`` from an error body, if any"""
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict):
            return body.get("message") or body.get("error")
        return None

    @staticmethod
    def status_for_upstream(status_code: int) -> int:
        if status_code >= 500:
            return 502
        return status_code

class ApiClient:
    """Thin async wrapper over the marketplace REST API"""

    def __init__(self, base_url: str, timeout: float = 15, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    @staticmethod
    def _headers(token: Optional[str]) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def unwrap(response: httpx.Response):
        """Return the ``data`` member of the API envelope, or the bare body"""
        if response.status_code == 204 or not response.content:
            return None
        try:
            body = response.json()
        except ValueError:
            return None
        if isinstance(body, dict) and "data" in body:
            return body["data"]
        return body

    async def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        files: Optional[Any] = None,
        data: Optional[Dict[str, Any]] = None,
        context: str = ""
    ):
        context = context or f"{method} {path}"
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self.transport
            ) as client:
                response = await client.request(
                    method,
                    path,
                    headers=self._headers(token),
                    json=json,
                    params=params,
                    files=files,
                    data=data
                )
        except httpx.HTTPError as e:
            log_exception(e, {"operation": context, "base_url": self.base_url})
            ApiError.raise_http_exception(503, ApiError.TRANSPORT, context=context)

        if response.status_code == 401 and token:
            session_store.invalidate(token, reason="unauthorized")
            log_event("Upstream rejected session token", {"operation": context})
            ApiError.raise_http_exception(401, ApiError.SESSION_EXPIRED, context=context)

        if not response.is_success:
            message = ApiError.message_from_response(response)
            log_event("API request failed", {
                "operation": context,
                "status_code": response.status_code,
                "message": message
            })
            ApiError.raise_http_exception(
                ApiError.status_for_upstream(response.status_code),
                ApiError.UPSTREAM,
                message,
                context
            )

        return self.unwrap(response)

    async def get(self, path: str, token: Optional[str] = None, **kwargs):
        return await self.request("GET", path, token=token, **kwargs)

    async def post(self, path: str, token: Optional[str] = None, **kwargs):
        return await self.request("POST", path, token=token, **kwargs)

    async def put(self, path: str, token: Optional[str] = None, **kwargs):
        return await self.request("PUT", path, token=token, **kwargs)

    async def delete(self, path: str, token: Optional[str] = None, **kwargs):
        return await self.request("DELETE", path, token=token, **kwargs)

async def load_section(awaitable, default, notifications: list, title: str):
    """
    Await one section of a composite view. A failed section renders as
    ``default`` plus a notification; an expired session still fails the view.
    """
    try:
        return await awaitable
    except HTTPException as e:
        if e.status_code == 401:
            raise
        message = e.detail.get("message") if isinstance(e.detail, dict) else str(e.detail)
        notifications.append(Notification(
            title=title,
            description=message or ApiError.DEFAULT_MESSAGES[ApiError.UPSTREAM],
            variant=NotificationVariant.DESTRUCTIVE
        ))
        return default

async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report form validation failures as notifications instead of raw 422 bodies"""
    errors = exc.errors()
    message = None
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", [])[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    log_event("Request validation failed", {"path": request.url.path, "errors": len(errors)})
    return JSONResponse(
        status_code=400,
        content={"detail": ApiError.notification(ApiError.VALIDATION, message, context=request.url.path)}
    )

def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
