from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from careerhub.config import Config
from careerhub.core.core import Core
from careerhub.core.modules.notification.models import ContactMessage, NotificationKind, SubscribeMessage
from careerhub.core.modules.post.models import PostCreate, PostRecord, PostUpdate
from careerhub.core.modules.session.models import AuthToken


class App:
    """Facade for all application operations, validates the admin session before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @property
    def core(self) -> Core:
        return self._core

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    # === Session ===
    async def is_auth_token_valid(self, auth_token: AuthToken | None) -> bool:
        """Check if authentication token is valid."""
        return self._core.services.session.is_auth_token_valid(auth_token)

    async def login(self, username: str, password: str) -> AuthToken:
        """Authenticate the admin and create a session."""
        return self._core.services.session.login(username, password)

    async def logout(self, auth_token: AuthToken | None) -> None:
        """Invalidate a session. Never fails, even for unknown tokens."""
        self._core.services.session.logout(auth_token)

    # === Posts ===
    async def get_posts(self) -> list[PostRecord]:
        """Get all posts, newest first (public)."""
        return await self._core.services.post.list_posts()

    async def get_post(self, post_id: str) -> PostRecord:
        """Get a single post (public)."""
        return await self._core.services.post.get_post(post_id)

    async def create_post(self, auth_token: AuthToken | None, data: PostCreate) -> PostRecord:
        """Create a post (admin only)."""
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.post.create_post(data)

    async def update_post(self, auth_token: AuthToken | None, post_id: str, data: PostUpdate) -> PostRecord:
        """Partially update a post (admin only)."""
        await self._core.services.access.ensure_authenticated(auth_token)
        return await self._core.services.post.update_post(post_id, data)

    async def delete_post(self, auth_token: AuthToken | None, post_id: str) -> None:
        """Delete a post (admin only)."""
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.post.delete_post(post_id)

    # === Contact & newsletter ===
    async def submit_contact(self, message: ContactMessage) -> None:
        """Relay a contact form message to the site owner in the background."""
        self._core.services.notification.send_notification(NotificationKind.CONTACT, message)

    async def subscribe(self, message: SubscribeMessage) -> None:
        """Relay a newsletter subscription to the site owner in the background."""
        self._core.services.notification.send_notification(NotificationKind.SUBSCRIBE, message)

    async def verify_email(self, auth_token: AuthToken | None) -> None:
        """Check SMTP connectivity (admin only)."""
        await self._core.services.access.ensure_authenticated(auth_token)
        await self._core.services.notification.verify_email()
