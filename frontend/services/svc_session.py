from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Any, Set
from jose import jwt, JWTError
from frontend.configuration.config import Config
from frontend.configuration.monitor import log_event
from frontend.models.mod_auth import ClientSession, SessionUser, UserRole

def read_token_claims(token: str) -> Dict[str, Any]:
    """
    Read the claims of an upstream JWT.

    The signature is only checked when a shared secret is configured. Opaque
    (non-JWT) tokens yield an empty claim set.
    """
    try:
        if Config.JWT_SECRET_KEY:
            return jwt.decode(token, Config.JWT_SECRET_KEY, algorithms=[Config.JWT_ALGORITHM])
        return jwt.get_unverified_claims(token)
    except JWTError:
        if Config.JWT_SECRET_KEY:
            raise
        return {}

def user_from_claims(claims: Dict[str, Any]) -> Optional[SessionUser]:
    user_id = claims.get("id") or claims.get("userId") or claims.get("sub")
    role = claims.get("role")
    if not user_id or not role:
        return None
    try:
        return SessionUser(
            id=str(user_id),
            email=claims.get("email"),
            fullName=claims.get("fullName") or claims.get("name"),
            role=UserRole(role)
        )
    except ValueError:
        return None

class SessionStore:
    """
    In-process registry of caller sessions keyed by bearer token.

    A session ends when it expires (JWT ``exp`` claim, else ``iat`` plus the
    configured TTL), on logout, or when the upstream API answers 401 for its
    token. Ended tokens are remembered and never restored.
    """

    def __init__(self, ttl_minutes: int = Config.SESSION_TTL_MINUTES):
        self.ttl = timedelta(minutes=ttl_minutes)
        self._sessions: Dict[str, ClientSession] = {}
        self._revoked: Set[str] = set()

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    def _expiry_for(self, token: str, issued_at: datetime, claims: Optional[Dict[str, Any]] = None) -> datetime:
        if claims is None:
            try:
                claims = read_token_claims(token)
            except JWTError:
                claims = {}
        exp = claims.get("exp")
        if exp:
            return datetime.fromtimestamp(float(exp), tz=timezone.utc)
        iat = claims.get("iat")
        if iat:
            return datetime.fromtimestamp(float(iat), tz=timezone.utc) + self.ttl
        return issued_at + self.ttl

    def open(self, token: str, user: SessionUser) -> ClientSession:
        issued_at = self._now()
        session = ClientSession(
            token=token,
            user=user,
            issued_at=issued_at,
            expires_at=self._expiry_for(token, issued_at)
        )
        self._revoked.discard(token)
        self._sessions[token] = session
        log_event("Session opened", {"user_id": user.id, "role": user.role.value})
        return session

    def is_revoked(self, token: str) -> bool:
        return token in self._revoked

    def restore(self, token: str) -> Optional[ClientSession]:
        """
        Rebuild a session for a token this process has not seen, from its claims.

        Only tokens whose lifetime can be read from the token itself (``exp``
        or ``iat``) are restored; ended tokens never are.
        """
        if token in self._revoked:
            return None
        claims = read_token_claims(token)
        if not claims.get("exp") and not claims.get("iat"):
            return None
        user = user_from_claims(claims)
        if user is None:
            return None
        now = self._now()
        session = ClientSession(
            token=token,
            user=user,
            issued_at=now,
            expires_at=self._expiry_for(token, now, claims)
        )
        if session.is_expired(now):
            self._revoked.add(token)
            return None
        self._sessions[token] = session
        return session

    def get(self, token: str) -> Optional[ClientSession]:
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self._now()):
            self.invalidate(token, reason="expired")
            return None
        return session

    def invalidate(self, token: Optional[str], reason: str = "logout") -> bool:
        if not token:
            return False
        self._revoked.add(token)
        session = self._sessions.pop(token, None)
        if session is not None:
            log_event("Session cleared", {"user_id": session.user_id, "reason": reason})
        return session is not None

    def clear(self) -> None:
        self._sessions.clear()
        self._revoked.clear()

    def __len__(self) -> int:
        return len(self._sessions)

session_store = SessionStore()
