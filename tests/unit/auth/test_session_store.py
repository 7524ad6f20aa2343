import pytest
from unittest.mock import patch
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError

from frontend.configuration.config import Config
from frontend.models.mod_auth import SessionUser, UserRole
from frontend.services.svc_session import SessionStore, read_token_claims, user_from_claims

SECRET = "test-secret"

def make_token(exp=None, **claims):
    if exp is not None:
        claims["exp"] = int(exp.timestamp())
    return jwt.encode(claims, SECRET, algorithm="HS256")

@pytest.fixture(autouse=True)
def no_shared_secret():
    with patch.object(Config, 'JWT_SECRET_KEY', None):
        yield

@pytest.fixture
def store():
    return SessionStore(ttl_minutes=60)

@pytest.fixture
def user():
    return SessionUser(id="user123", email="jane@example.com", fullName="Jane Doe", role=UserRole.USER)

class TestTokenClaims:
    def test_unverified_claims_without_secret(self):
        token = make_token(id="user123", role="user")
        assert read_token_claims(token)["id"] == "user123"

    def test_opaque_token_has_no_claims(self):
        assert read_token_claims("not-a-jwt") == {}

    def test_verified_with_secret(self):
        token = make_token(id="user123", role="user")
        with patch.object(Config, 'JWT_SECRET_KEY', SECRET):
            assert read_token_claims(token)["role"] == "user"

    def test_wrong_secret_is_rejected(self):
        token = make_token(id="user123", role="user")
        with patch.object(Config, 'JWT_SECRET_KEY', "another-secret"):
            with pytest.raises(JWTError):
                read_token_claims(token)

    def test_user_from_claims(self):
        user = user_from_claims({"userId": "p1", "role": "photographer"})
        assert user.id == "p1"
        assert user.role == UserRole.PHOTOGRAPHER

    @pytest.mark.parametrize("claims", [{}, {"id": "u1"}, {"id": "u1", "role": "superuser"}])
    def test_user_from_incomplete_claims(self, claims):
        assert user_from_claims(claims) is None

class TestSessionStore:
    def test_open_uses_exp_claim(self, store, user):
        exp = datetime.now(timezone.utc) + timedelta(hours=2)
        token = make_token(exp=exp, id="user123", role="user")

        session = store.open(token, user)

        assert session.expires_at == datetime.fromtimestamp(int(exp.timestamp()), tz=timezone.utc)
        assert store.get(token) is session

    def test_open_falls_back_to_ttl(self, store, user):
        session = store.open("opaque-token", user)

        assert session.expires_at - session.issued_at == timedelta(minutes=60)
        assert len(store) == 1

    def test_expired_session_is_cleared(self, store, user):
        session = store.open("opaque-token", user)

        with patch.object(SessionStore, '_now', return_value=session.expires_at + timedelta(seconds=1)):
            assert store.get("opaque-token") is None

        assert len(store) == 0

    def test_invalidate(self, store, user):
        store.open("opaque-token", user)

        assert store.invalidate("opaque-token") is True
        assert store.invalidate("opaque-token") is False
        assert store.get("opaque-token") is None

    def test_restore_from_claims(self, store):
        exp = datetime.now(timezone.utc) + timedelta(hours=1)
        token = make_token(exp=exp, sub="admin1", role="admin", email="root@example.com")

        session = store.restore(token)

        assert session.user_id == "admin1"
        assert session.role == UserRole.ADMIN
        assert store.get(token) is session

    def test_restore_expired_token(self, store):
        token = make_token(exp=datetime.now(timezone.utc) - timedelta(minutes=1), id="user123", role="user")
        assert store.restore(token) is None
        assert len(store) == 0

    def test_restore_opaque_token(self, store):
        assert store.restore("opaque-token") is None

    def test_restore_refuses_logged_out_token(self, store, user):
        token = make_token(exp=datetime.now(timezone.utc) + timedelta(hours=1), id="user123", role="user")
        store.open(token, user)

        store.invalidate(token)

        assert store.is_revoked(token)
        assert store.restore(token) is None
        assert len(store) == 0

    def test_restore_refuses_token_without_lifetime(self, store):
        token = make_token(id="user123", role="user")

        assert store.restore(token) is None
        assert len(store) == 0

    def test_restore_counts_ttl_from_issued_at_claim(self, store):
        issued = datetime.now(timezone.utc) - timedelta(hours=2)
        token = make_token(iat=int(issued.timestamp()), id="user123", role="user")

        assert store.restore(token) is None
        assert store.is_revoked(token)

    def test_restore_within_ttl_from_issued_at_claim(self, store):
        issued = datetime.now(timezone.utc) - timedelta(minutes=10)
        token = make_token(iat=int(issued.timestamp()), id="user123", role="user")

        session = store.restore(token)

        assert session.expires_at == datetime.fromtimestamp(int(issued.timestamp()), tz=timezone.utc) + timedelta(minutes=60)

    def test_expired_ttl_session_stays_ended(self, store, user):
        issued = datetime.now(timezone.utc)
        token = make_token(iat=int(issued.timestamp()), id="user123", role="user")
        session = store.open(token, user)
        later = session.expires_at + timedelta(minutes=5)

        with patch.object(SessionStore, '_now', return_value=later):
            assert store.get(token) is None
            assert store.restore(token) is None

    def test_reopening_after_logout(self, store, user):
        store.open("opaque-token", user)
        store.invalidate("opaque-token")

        store.open("opaque-token", user)

        assert not store.is_revoked("opaque-token")
        assert store.get("opaque-token") is not None
