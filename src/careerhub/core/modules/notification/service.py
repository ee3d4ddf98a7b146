import asyncio
import smtplib

import structlog

from careerhub.core.core import Service
from careerhub.core.modules.notification.models import NotificationKind, NotificationPayload, RenderedNotification
from careerhub.core.modules.notification.rendering import render_notification
from careerhub.core.modules.notification.sender import send_email, send_telegram_message, verify_smtp
from careerhub.core.storage import JsonFileStorage
from careerhub.errors import NotificationError, ValidationError

logger = structlog.get_logger(__name__)

# Upper bound for draining pending deliveries on shutdown
SHUTDOWN_TIMEOUT = 10.0


class NotificationService(Service):
    """Relays contact form and newsletter submissions to the site owner.

    Delivery is fire-and-forget: callers get control back immediately and a failing
    channel is only logged.
    """

    def __init__(self, storage: JsonFileStorage) -> None:
        super().__init__(storage)
        self._notification_tasks: set[asyncio.Task[None]] = set()

    async def on_start(self) -> None:
        config = self.core.config
        logger.debug("notification_service_started", email=config.email_enabled, telegram=config.telegram_enabled)

    async def on_stop(self) -> None:
        if self._notification_tasks:
            _, pending = await asyncio.wait(set(self._notification_tasks), timeout=SHUTDOWN_TIMEOUT)
            for task in pending:
                task.cancel()
            if pending:
                logger.warning("notifications_cancelled_on_shutdown", count=len(pending))

    def send_notification(self, kind: NotificationKind, payload: NotificationPayload) -> None:
        """Deliver a notification in the background.

        Args:
            kind: Submission type (contact, subscribe)
            payload: Validated submission data
        """
        task = asyncio.create_task(self._send_notification_async(kind, payload))
        self._notification_tasks.add(task)
        task.add_done_callback(self._notification_tasks.discard)

    async def deliver(self, kind: NotificationKind, payload: NotificationPayload) -> bool:
        """Render and push a notification through every configured channel.

        Returns True if at least one channel accepted it. With no channel configured the
        submission is logged for manual follow-up and counts as delivered.
        """
        config = self.core.config
        rendered = render_notification(kind, payload)

        if not config.email_enabled and not config.telegram_enabled:
            logger.info("notification_logged", kind=kind, subject=rendered.subject, payload=payload.model_dump())
            return True

        delivered = False
        if config.email_enabled:
            success, error_msg = await send_email(config, rendered.subject, rendered.html)
            delivered = delivered or success
            if not success:
                self._log_failure(rendered, "email", error_msg)
        if config.telegram_enabled and config.telegram_bot_token and config.telegram_chat_id:
            success, error_msg = await send_telegram_message(
                config.telegram_bot_token, config.telegram_chat_id, rendered.text, parse_mode="HTML"
            )
            delivered = delivered or success
            if not success:
                self._log_failure(rendered, "telegram", error_msg)

        if delivered:
            logger.info("notification_sent", kind=kind, subject=rendered.subject)
        else:
            # Keep the submission in the logs so it can be followed up manually
            logger.warning("notification_undelivered", kind=kind, payload=payload.model_dump())
        return delivered

    async def verify_email(self) -> None:
        """Check that the SMTP server accepts a connection and login."""
        config = self.core.config
        if not config.email_enabled:
            raise ValidationError("Email delivery is not configured")
        try:
            await verify_smtp(config)
        except (smtplib.SMTPException, OSError, TimeoutError) as e:
            logger.warning("smtp_verify_failed", host=config.smtp_host, error=str(e))
            raise NotificationError(f"SMTP verification failed: {e}") from e
        logger.info("smtp_verified", host=config.smtp_host)

    async def _send_notification_async(self, kind: NotificationKind, payload: NotificationPayload) -> None:
        try:
            await self.deliver(kind, payload)
        except Exception as e:
            logger.exception("notification_error", kind=kind, error=str(e))

    @staticmethod
    def _log_failure(rendered: RenderedNotification, channel: str, error_msg: str | None) -> None:
        logger.warning("notification_failed", kind=rendered.kind, channel=channel, error=error_msg)
