"""Tests for admin session issuing, validation and expiry."""

from datetime import timedelta

import pytest

from careerhub.config import Config
from careerhub.core.core import Core
from careerhub.core.modules.session.models import SESSION_TTL, AuthToken
from careerhub.errors import InvalidCredentialsError, UnauthorizedError


@pytest.fixture
def sessions(core, clock):
    service = core.services.session
    service.clock = clock
    return service


class TestLogin:
    """Tests for credential checks."""

    def test_default_credentials_succeed(self, sessions):
        """Test that the default admin credentials open a session."""
        token = sessions.login("admin", "admin123")
        assert token
        assert sessions.authorize(token).auth_token == token

    def test_wrong_password_rejected(self, sessions):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            sessions.login("admin", "wrong")
        assert str(exc_info.value) == "Invalid credentials"

    def test_wrong_username_gives_same_error(self, sessions):
        """Test that a wrong username is indistinguishable from a wrong password."""
        with pytest.raises(InvalidCredentialsError) as exc_info:
            sessions.login("root", "admin123")
        assert str(exc_info.value) == "Invalid credentials"

    def test_match_is_exact(self, sessions):
        with pytest.raises(InvalidCredentialsError):
            sessions.login("Admin", "admin123")
        with pytest.raises(InvalidCredentialsError):
            sessions.login("admin", "admin123 ")

    def test_each_login_gets_new_token(self, sessions):
        tokens = {sessions.login("admin", "admin123") for _ in range(5)}
        assert len(tokens) == 5
        assert sessions.active_session_count() == 5

    def test_configured_credentials(self, data_path):
        config = Config(_env_file=None, data_path=str(data_path), admin_username="editor", admin_password="s3cret")
        sessions = Core(config).services.session
        assert sessions.login("editor", "s3cret")
        with pytest.raises(InvalidCredentialsError):
            sessions.login("admin", "admin123")


class TestAuthorize:
    """Tests for token validation."""

    @pytest.mark.parametrize("token", [None, "", "never-issued"])
    def test_missing_or_unknown_token_rejected(self, sessions, token):
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)

    def test_is_auth_token_valid(self, sessions):
        token = sessions.login("admin", "admin123")
        assert sessions.is_auth_token_valid(token) is True
        assert sessions.is_auth_token_valid(AuthToken("bogus")) is False
        assert sessions.is_auth_token_valid(None) is False


class TestLogout:
    """Tests for session revocation."""

    def test_logout_revokes_token(self, sessions):
        token = sessions.login("admin", "admin123")
        sessions.logout(token)
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)

    def test_logout_leaves_other_sessions(self, sessions):
        first = sessions.login("admin", "admin123")
        second = sessions.login("admin", "admin123")
        sessions.logout(first)
        assert sessions.authorize(second).auth_token == second

    def test_logout_is_idempotent(self, sessions):
        """Test that unknown, repeated and empty logouts do not raise."""
        token = sessions.login("admin", "admin123")
        sessions.logout(token)
        sessions.logout(token)
        sessions.logout(AuthToken("never-issued"))
        sessions.logout(None)
        assert sessions.active_session_count() == 0


class TestExpiry:
    """Tests for the 24 hour session lifetime."""

    def test_valid_just_before_ttl(self, sessions, clock):
        token = sessions.login("admin", "admin123")
        clock.advance(SESSION_TTL - timedelta(seconds=1))
        assert sessions.authorize(token).auth_token == token

    def test_invalid_just_after_ttl(self, sessions, clock):
        token = sessions.login("admin", "admin123")
        clock.advance(SESSION_TTL + timedelta(seconds=1))
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)

    def test_invalid_exactly_at_ttl(self, sessions, clock):
        token = sessions.login("admin", "admin123")
        clock.advance(SESSION_TTL)
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)

    def test_expired_token_is_evicted(self, sessions, clock):
        token = sessions.login("admin", "admin123")
        clock.advance(SESSION_TTL + timedelta(minutes=1))
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)
        assert sessions.active_session_count() == 0

    def test_use_does_not_extend_lifetime(self, sessions, clock):
        """Test that there is no sliding refresh."""
        token = sessions.login("admin", "admin123")
        clock.advance(timedelta(hours=23))
        sessions.authorize(token)
        clock.advance(timedelta(hours=2))
        with pytest.raises(UnauthorizedError):
            sessions.authorize(token)

    def test_sweep_expired(self, sessions, clock):
        old = sessions.login("admin", "admin123")
        clock.advance(timedelta(hours=20))
        recent = sessions.login("admin", "admin123")
        clock.advance(timedelta(hours=5))

        assert sessions.sweep_expired() == 1
        assert sessions.active_session_count() == 1
        assert sessions.is_auth_token_valid(recent)
        assert not sessions.is_auth_token_valid(old)

    def test_login_sweeps_expired_sessions(self, sessions, clock):
        sessions.login("admin", "admin123")
        clock.advance(SESSION_TTL)
        sessions.login("admin", "admin123")
        assert sessions.active_session_count() == 1

    def test_configured_ttl(self, data_path, clock):
        config = Config(_env_file=None, data_path=str(data_path), session_ttl_hours=1)
        sessions = Core(config).services.session
        sessions.clock = clock
        token = sessions.login("admin", "admin123")
        clock.advance(timedelta(minutes=59))
        assert sessions.is_auth_token_valid(token)
        clock.advance(timedelta(minutes=2))
        assert not sessions.is_auth_token_valid(token)
