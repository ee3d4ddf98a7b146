"""Contact form and newsletter notification models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class NotificationKind(StrEnum):
    """Submissions relayed to the site owner.

    - CONTACT: contact form message
    - SUBSCRIBE: newsletter sign-up
    """

    CONTACT = "contact"
    SUBSCRIBE = "subscribe"


class ContactMessage(BaseModel):
    """Contact form submission."""

    name: str = Field(..., min_length=1, description="Sender name")
    email: str = Field(..., min_length=1, description="Sender email address")
    subject: str = Field(..., min_length=1, description="Message subject")
    message: str = Field(..., min_length=1, description="Message body")


class SubscribeMessage(BaseModel):
    """Newsletter subscription request."""

    email: str = Field(..., min_length=1, description="Subscriber email address")


NotificationPayload = ContactMessage | SubscribeMessage


class RenderedNotification(BaseModel):
    """Notification ready to hand over to a delivery channel."""

    kind: NotificationKind
    subject: str
    html: str
    text: str


CONTACT_SUBJECT_TEMPLATE = "Career Hub Contact: {{ subject }}"

CONTACT_HTML_TEMPLATE = (
    "<h3>New Contact Form Submission</h3>\n"
    "<p><strong>Name:</strong> {{ name | escape }}</p>\n"
    "<p><strong>Email:</strong> {{ email | escape }}</p>\n"
    "<p><strong>Subject:</strong> {{ subject | escape }}</p>\n"
    "<p><strong>Message:</strong></p>\n"
    "<p>{{ message | escape | newline_to_br }}</p>\n"
)

CONTACT_TEXT_TEMPLATE = "📨 <b>New contact message</b>\n👤 {{ name | escape }} ({{ email | escape }})\n📝 {{ subject | escape }}\n\n{{ message | escape }}"

SUBSCRIBE_SUBJECT_TEMPLATE = "New Newsletter Subscription"

SUBSCRIBE_HTML_TEMPLATE = (
    "<h3>New Newsletter Subscription</h3>\n"
    "<p><strong>Email:</strong> {{ email | escape }}</p>\n"
    "<p>Someone has subscribed to your newsletter.</p>\n"
)

SUBSCRIBE_TEXT_TEMPLATE = "📬 <b>New newsletter subscription</b>\n✉️ {{ email | escape }}"

TEMPLATES: dict[NotificationKind, tuple[str, str, str]] = {
    NotificationKind.CONTACT: (CONTACT_SUBJECT_TEMPLATE, CONTACT_HTML_TEMPLATE, CONTACT_TEXT_TEMPLATE),
    NotificationKind.SUBSCRIBE: (SUBSCRIBE_SUBJECT_TEMPLATE, SUBSCRIBE_HTML_TEMPLATE, SUBSCRIBE_TEXT_TEMPLATE),
}
