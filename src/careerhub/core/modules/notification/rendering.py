"""Notification message rendering."""

import structlog
from liquid import Environment

from careerhub.core.modules.notification.models import (
    TEMPLATES,
    NotificationKind,
    NotificationPayload,
    RenderedNotification,
)

logger = structlog.get_logger(__name__)

_env = Environment()


def render_notification(kind: NotificationKind, payload: NotificationPayload) -> RenderedNotification:
    """Render subject, email HTML and chat text for a submission.

    Raises:
        ValueError: If template rendering fails
    """
    subject_template, html_template, text_template = TEMPLATES[kind]
    context = payload.model_dump(mode="json")
    try:
        return RenderedNotification(
            kind=kind,
            subject=" ".join(_env.from_string(subject_template).render(**context).split()),
            html=_env.from_string(html_template).render(**context),
            text=_env.from_string(text_template).render(**context),
        )
    except Exception as e:
        logger.exception("template_render_failed", kind=kind, error=str(e))
        raise ValueError(f"Failed to render template: {e}") from e
