"""Outbound email over SMTP."""
import html
import logging
import re
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from app.config import Settings

logger = logging.getLogger(__name__)


def html_to_text(html_content: str) -> str:
    """Rough plain-text fallback for an HTML body."""
    plain_text = html_content.replace("<br>", "\n").replace("</p>", "\n\n")
    return re.sub(r"<[^>]+>", "", plain_text)


def send_email(
    settings: Settings,
    to: str,
    from_: str,
    subject: str,
    html_content: str,
    text: str | None = None,
) -> bool:
    """Send an email, returning whether it was handed to the SMTP server.

    Uses the SMTP_* fields of ``settings``, the same object the app was built
    with. Never raises: an unconfigured or failing server is logged and
    reported as ``False``.
    """
    if not settings.smtp_host:
        logger.warning("SMTP not configured, skipping email")
        return False

    msg = MIMEMultipart("alternative")
    msg["Subject"] = subject
    msg["From"] = from_
    msg["To"] = to
    msg.attach(MIMEText(text if text is not None else html_to_text(html_content), "plain"))
    msg.attach(MIMEText(html_content, "html"))

    try:
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port) as server:
            server.starttls()
            if settings.smtp_user and settings.smtp_password:
                server.login(settings.smtp_user, settings.smtp_password)
            server.send_message(msg)
        return True
    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email: {e}")
        return False


def render_help_message(name: str, email: str, subject: str, message: str) -> tuple[str, str]:
    """Build the (html, text) bodies for a help center message."""
    safe = {key: html.escape(value) for key, value in {"name": name, "email": email, "subject": subject}.items()}
    body_html = html.escape(message).replace("\n", "<br>")
    html_content = f"""
    <h2>New Message from Wedding Dream Help Center</h2>
    <p><strong>From:</strong> {safe['name']} ({safe['email']})</p>
    <p><strong>Subject:</strong> {safe['subject']}</p>
    <p><strong>Message:</strong></p>
    <p>{body_html}</p>
    """
    text = (
        "New Message from Wedding Dream Help Center\n\n"
        f"From: {name} ({email})\n"
        f"Subject: {subject}\n\n"
        f"Message:\n{message}\n"
    )
    return html_content, text
