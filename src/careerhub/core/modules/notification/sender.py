"""Delivery channels: SMTP email and Telegram Bot API."""

import asyncio
import smtplib
from email.message import EmailMessage

import structlog
from telegram import Bot
from telegram.error import TelegramError

from careerhub.config import Config

logger = structlog.get_logger(__name__)


def build_email(config: Config, subject: str, html: str) -> EmailMessage:
    """Build the outgoing email addressed to the site owner."""
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = config.email_from or ""
    msg["To"] = config.email_recipient or ""
    msg.set_content("This message requires an HTML capable email client.")
    msg.add_alternative(html, subtype="html")
    return msg


def _open_smtp(config: Config) -> smtplib.SMTP:
    if not config.smtp_host:
        raise ValueError("SMTP host is not configured")
    smtp = smtplib.SMTP(config.smtp_host, config.smtp_port, timeout=config.smtp_timeout)
    try:
        if config.smtp_use_tls:
            smtp.starttls()
        if config.smtp_username and config.smtp_password:
            smtp.login(config.smtp_username, config.smtp_password)
    except Exception:
        smtp.close()
        raise
    return smtp


def _send_email_sync(config: Config, msg: EmailMessage) -> None:
    with _open_smtp(config) as smtp:
        smtp.send_message(msg)


def _verify_smtp_sync(config: Config) -> None:
    with _open_smtp(config) as smtp:
        smtp.noop()


async def send_email(config: Config, subject: str, html: str) -> tuple[bool, str | None]:
    """Send an HTML email to the configured recipient.

    Returns:
        Tuple of (success: bool, error_message: str | None)
    """
    msg = build_email(config, subject, html)
    try:
        await asyncio.wait_for(asyncio.to_thread(_send_email_sync, config, msg), timeout=config.smtp_timeout)
    except TimeoutError:
        error_msg = f"Email timeout after {config.smtp_timeout:g} seconds"
        logger.warning("email_send_timeout", to=msg["To"], error=error_msg)
        return False, error_msg
    except (smtplib.SMTPException, OSError, ValueError) as e:
        error_msg = str(e)
        logger.exception("email_send_failed", to=msg["To"], error=error_msg)
        return False, error_msg
    else:
        logger.debug("email_sent", to=msg["To"], subject=subject)
        return True, None


async def verify_smtp(config: Config) -> None:
    """Connect and authenticate against the SMTP server.

    Raises:
        smtplib.SMTPException, OSError: If the server cannot be reached or rejects the login
    """
    await asyncio.wait_for(asyncio.to_thread(_verify_smtp_sync, config), timeout=config.smtp_timeout)


async def send_telegram_message(token: str, chat_id: str, text: str, parse_mode: str | None = None) -> tuple[bool, str | None]:
    """Send a text message to Telegram.

    Args:
        token: Telegram Bot API token
        chat_id: Target chat ID (numeric or @username)
        text: Message text to send
        parse_mode: Optional parse mode (HTML, Markdown, etc.)

    Returns:
        Tuple of (success: bool, error_message: str | None)
    """
    try:
        bot = Bot(token=token)
        await bot.send_message(chat_id=chat_id, text=text, parse_mode=parse_mode)
    except TelegramError as e:
        error_msg = str(e)
        logger.exception("telegram_send_failed", chat_id=chat_id, error=error_msg)
        return False, error_msg
    except Exception as e:
        error_msg = str(e)
        logger.exception("telegram_send_error", chat_id=chat_id, error=error_msg)
        return False, error_msg
    else:
        logger.debug("telegram_message_sent", chat_id=chat_id, parse_mode=parse_mode)
        return True, None
