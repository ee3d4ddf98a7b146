from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, cast

from careerhub.config import Config
from careerhub.core.storage import JsonFileStorage

if TYPE_CHECKING:
    from careerhub.core.modules.access.service import AccessService
    from careerhub.core.modules.notification.service import NotificationService
    from careerhub.core.modules.post.service import PostService
    from careerhub.core.modules.session.service import SessionService


class Service:
    """Base class for services with access to the durable storage."""

    def __init__(self, storage: JsonFileStorage) -> None:
        self.storage = storage
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry that automatically discovers and initializes services."""

    session: SessionService
    access: AccessService
    post: PostService
    notification: NotificationService

    def __init__(self, storage: JsonFileStorage) -> None:
        """Initialize all services automatically using service configuration."""
        self._services: list[Service] = []
        self._storage = storage

        # Service configuration: (attribute_name, module_path, class_name)
        service_configs = [
            ("session", "careerhub.core.modules.session.service", "SessionService"),
            ("access", "careerhub.core.modules.access.service", "AccessService"),
            ("post", "careerhub.core.modules.post.service", "PostService"),
            ("notification", "careerhub.core.modules.notification.service", "NotificationService"),
        ]

        # Dynamically import and instantiate services
        for attr_name, module_path, class_name in service_configs:
            module = importlib.import_module(module_path)
            service_class = cast(type[Service], getattr(module, class_name))
            service_instance = service_class(storage)
            setattr(self, attr_name, service_instance)
            self._services.append(service_instance)

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        """Start all services that have startup logic."""
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        """Stop all services that have cleanup logic."""
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, storage, and all service instances."""

    config: Config
    storage: JsonFileStorage
    services: Services

    def __init__(self, config: Config) -> None:
        """Initialize core with config, the posts file storage, and auto-register services."""
        self.config = config
        self.storage = JsonFileStorage(config.data_path)
        self.services = Services(self.storage)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        """Start all services on application startup."""
        await self.services.start_all()

    async def on_stop(self) -> None:
        """Stop all services on shutdown."""
        await self.services.stop_all()
