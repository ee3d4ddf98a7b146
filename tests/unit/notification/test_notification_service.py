"""Tests for contact and newsletter notification relay."""

import asyncio
import smtplib

import pytest

from careerhub.config import Config
from careerhub.core.core import Core
from careerhub.core.modules.notification import service as notification_service
from careerhub.core.modules.notification.models import ContactMessage, NotificationKind, SubscribeMessage
from careerhub.core.modules.notification.rendering import render_notification
from careerhub.core.modules.notification.sender import build_email
from careerhub.errors import NotificationError, ValidationError


@pytest.fixture
def contact():
    return ContactMessage(name="Asha", email="asha@example.com", subject="Hiring", message="Hello\nWorld")


@pytest.fixture
def email_config(data_path):
    return Config(
        _env_file=None,
        data_path=str(data_path),
        smtp_host="smtp.example.com",
        email_from="site@example.com",
    )


class TestRenderNotification:
    """Tests for message templates."""

    def test_contact_subject(self, contact):
        rendered = render_notification(NotificationKind.CONTACT, contact)
        assert rendered.subject == "Career Hub Contact: Hiring"

    def test_contact_html_includes_fields(self, contact):
        rendered = render_notification(NotificationKind.CONTACT, contact)
        assert "Asha" in rendered.html
        assert "asha@example.com" in rendered.html
        assert "Hello<br" in rendered.html

    def test_contact_html_escapes_values(self):
        message = ContactMessage(name="<script>", email="x@example.com", subject="s", message="<b>hi</b>")
        rendered = render_notification(NotificationKind.CONTACT, message)
        assert "<script>" not in rendered.html
        assert "&lt;script&gt;" in rendered.html
        assert "&lt;b&gt;hi&lt;/b&gt;" in rendered.html

    def test_subject_is_single_line(self):
        message = ContactMessage(name="n", email="e@example.com", subject="a\nBcc: victim@example.com", message="m")
        rendered = render_notification(NotificationKind.CONTACT, message)
        assert "\n" not in rendered.subject

    def test_subscribe(self):
        rendered = render_notification(NotificationKind.SUBSCRIBE, SubscribeMessage(email="reader@example.com"))
        assert rendered.subject == "New Newsletter Subscription"
        assert "reader@example.com" in rendered.html
        assert "reader@example.com" in rendered.text


class TestBuildEmail:
    def test_recipient_falls_back_to_sender(self, email_config):
        msg = build_email(email_config, "Subject", "<p>hi</p>")
        assert msg["From"] == "site@example.com"
        assert msg["To"] == "site@example.com"
        assert msg["Subject"] == "Subject"

    def test_explicit_recipient(self, data_path):
        config = Config(
            _env_file=None, data_path=str(data_path), smtp_host="h", email_from="site@example.com", email_to="me@example.com"
        )
        assert build_email(config, "s", "<p/>")["To"] == "me@example.com"


class TestDeliver:
    """Tests for channel dispatch."""

    def test_no_channel_logs_and_succeeds(self, core, contact):
        assert asyncio.run(core.services.notification.deliver(NotificationKind.CONTACT, contact)) is True

    def test_email_channel_used(self, email_config, contact, monkeypatch):
        sent = []

        async def fake_send_email(config, subject, html):
            sent.append((subject, html))
            return True, None

        monkeypatch.setattr(notification_service, "send_email", fake_send_email)
        service = Core(email_config).services.notification
        assert asyncio.run(service.deliver(NotificationKind.CONTACT, contact)) is True
        assert sent[0][0] == "Career Hub Contact: Hiring"

    def test_failed_email_reported_not_raised(self, email_config, contact, monkeypatch):
        async def failing_send_email(config, subject, html):
            return False, "Email timeout after 30 seconds"

        monkeypatch.setattr(notification_service, "send_email", failing_send_email)
        service = Core(email_config).services.notification
        assert asyncio.run(service.deliver(NotificationKind.CONTACT, contact)) is False

    def test_telegram_channel_used(self, data_path, contact, monkeypatch):
        sent = []

        async def fake_send_telegram(token, chat_id, text, parse_mode=None):
            sent.append((token, chat_id, parse_mode))
            return True, None

        monkeypatch.setattr(notification_service, "send_telegram_message", fake_send_telegram)
        config = Config(_env_file=None, data_path=str(data_path), telegram_bot_token="tkn", telegram_chat_id="42")
        service = Core(config).services.notification
        assert asyncio.run(service.deliver(NotificationKind.CONTACT, contact)) is True
        assert sent == [("tkn", "42", "HTML")]


class TestSendNotification:
    """Tests for fire-and-forget dispatch."""

    def test_returns_before_delivery_and_never_raises(self, core, contact, monkeypatch):
        service = core.services.notification
        calls = []

        async def exploding_deliver(kind, payload):
            calls.append(kind)
            raise RuntimeError("smtp exploded")

        monkeypatch.setattr(service, "deliver", exploding_deliver)

        async def scenario():
            service.send_notification(NotificationKind.CONTACT, contact)
            assert calls == []
            await service.on_stop()

        asyncio.run(scenario())
        assert calls == [NotificationKind.CONTACT]


class TestVerifyEmail:
    def test_not_configured(self, core):
        with pytest.raises(ValidationError):
            asyncio.run(core.services.notification.verify_email())

    def test_unreachable_server(self, email_config, monkeypatch):
        async def failing_verify(config):
            raise smtplib.SMTPConnectError(421, "unavailable")

        monkeypatch.setattr(notification_service, "verify_smtp", failing_verify)
        service = Core(email_config).services.notification
        with pytest.raises(NotificationError):
            asyncio.run(service.verify_email())

    def test_success(self, email_config, monkeypatch):
        async def ok_verify(config):
            return None

        monkeypatch.setattr(notification_service, "verify_smtp", ok_verify)
        asyncio.run(Core(email_config).services.notification.verify_email())
