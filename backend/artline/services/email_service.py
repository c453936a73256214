"""Best-effort email notifications for new contact submissions."""

import logging
import smtplib
from email.message import EmailMessage
from html import escape
from typing import Dict, List

from artline.config import settings

logger = logging.getLogger(__name__)


def _submission_lines(submission: Dict) -> List[str]:
    lines = [
        f"<p><strong>Name:</strong> {escape(submission['name'])}</p>",
        f"<p><strong>Phone:</strong> {escape(submission['phone'])}</p>",
    ]
    for label, key in (("Email", "email"), ("Service", "service"), ("Message", "message")):
        if submission.get(key):
            lines.append(f"<p><strong>{label}:</strong> {escape(str(submission[key]))}</p>")
    return lines


def format_admin_notification(submission: Dict) -> str:
    lines = ["<h2>New request from the website</h2>"] + _submission_lines(submission)
    if submission.get("created_at"):
        lines.append(f"<p><strong>Date:</strong> {submission['created_at']}</p>")
    return "\n".join(lines)


def format_user_confirmation(submission: Dict) -> str:
    lines = [
        "<h2>Thank you for contacting Art Line!</h2>",
        "<p>We have received your request and will contact you shortly.</p>",
    ] + _submission_lines(submission) + ["<hr>", "<p>Best regards,<br>Art Line team</p>"]
    return "\n".join(lines)


def _send(to_email: str, subject: str, html_body: str) -> bool:
    if not settings.smtp_enabled():
        logger.info("[email] SMTP not configured, skipped '%s' to %s", subject, to_email)
        return False
    msg = EmailMessage()
    msg["Subject"] = subject
    msg["From"] = f"Art Line <{settings.MAIL_FROM}>"
    msg["To"] = to_email
    msg.set_content("This message requires an HTML capable mail client.")
    msg.add_alternative(html_body, subtype="html")
    try:
        with smtplib.SMTP(settings.SMTP_HOST, settings.SMTP_PORT, timeout=15) as server:
            if settings.SMTP_USE_TLS:
                server.starttls()
            if settings.SMTP_USERNAME and settings.SMTP_PASSWORD:
                server.login(settings.SMTP_USERNAME, settings.SMTP_PASSWORD)
            server.send_message(msg)
        return True
    except (smtplib.SMTPException, OSError) as exc:
        logger.warning("[email] sending '%s' to %s failed: %s", subject, to_email, exc)
        return False


def send_admin_notification(submission: Dict) -> bool:
    if not settings.ADMIN_EMAIL:
        logger.info("[email] ADMIN_EMAIL not set, admin notification skipped")
        return False
    sent = _send(settings.ADMIN_EMAIL, "New request from the Art Line website", format_admin_notification(submission))
    if sent:
        logger.info("[email] admin notified about submission %s", submission.get("submission_id"))
    return sent


def send_user_confirmation(submission: Dict) -> bool:
    if not submission.get("email"):
        return False
    return _send(submission["email"], "Your request to Art Line has been received", format_user_confirmation(submission))


def notify_new_submission(submission: Dict) -> None:
    """Background task entry point; never raises."""
    try:
        send_admin_notification(submission)
        send_user_confirmation(submission)
    except Exception as exc:
        logger.exception("[email] notification for submission %s failed: %s", submission.get("submission_id"), exc)
