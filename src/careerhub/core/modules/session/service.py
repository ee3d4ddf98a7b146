import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

import structlog

from careerhub.core.core import Service
from careerhub.core.modules.session.models import AuthToken, Session
from careerhub.core.storage import JsonFileStorage
from careerhub.errors import InvalidCredentialsError, UnauthorizedError
from careerhub.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and validates bearer tokens for the single admin identity.

    Active sessions live in memory only, so a restart logs everybody out.
    Expired sessions are dropped lazily when presented and swept on every login.
    """

    def __init__(self, storage: JsonFileStorage, clock: Callable[[], datetime] = now) -> None:
        super().__init__(storage)
        self.clock = clock
        self._sessions: dict[AuthToken, Session] = {}

    @property
    def ttl(self) -> timedelta:
        return timedelta(hours=self.core.config.session_ttl_hours)

    async def on_start(self) -> None:
        if self.core.config.uses_default_credentials:
            logger.warning("default_admin_credentials", username=self.core.config.admin_username)

    async def on_stop(self) -> None:
        self._sessions.clear()

    def login(self, username: str, password: str) -> AuthToken:
        """Check admin credentials and open a new session."""
        config = self.core.config
        # Evaluate both comparisons so timing does not reveal which field was wrong
        username_ok = secrets.compare_digest(username.encode("utf-8"), config.admin_username.encode("utf-8"))
        password_ok = secrets.compare_digest(password.encode("utf-8"), config.admin_password.encode("utf-8"))
        if not (username_ok and password_ok):
            logger.info("login_failed")
            raise InvalidCredentialsError

        self.sweep_expired()
        auth_token = AuthToken(secrets.token_urlsafe(32))
        self._sessions[auth_token] = Session(auth_token=auth_token, created_at=self.clock(), ttl=self.ttl)
        logger.info("session_created", active_sessions=len(self._sessions))
        return auth_token

    def logout(self, auth_token: AuthToken | None) -> None:
        """Revoke a session. Unknown or empty tokens are ignored."""
        if auth_token and self._sessions.pop(auth_token, None) is not None:
            logger.info("session_revoked", active_sessions=len(self._sessions))

    def authorize(self, auth_token: AuthToken | None) -> Session:
        """Return the active session for a token, raise UnauthorizedError otherwise."""
        if not auth_token:
            raise UnauthorizedError
        session = self._sessions.get(auth_token)
        if session is None:
            raise UnauthorizedError
        if session.is_expired(self.clock()):
            del self._sessions[auth_token]
            logger.debug("session_expired", created_at=session.created_at.isoformat())
            raise UnauthorizedError
        return session

    def is_auth_token_valid(self, auth_token: AuthToken | None) -> bool:
        try:
            self.authorize(auth_token)
        except UnauthorizedError:
            return False
        return True

    def sweep_expired(self) -> int:
        """Drop every expired session. Returns how many were removed."""
        current = self.clock()
        expired = [token for token, session in self._sessions.items() if session.is_expired(current)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug("sessions_swept", count=len(expired))
        return len(expired)

    def active_session_count(self) -> int:
        return len(self._sessions)
