"""
Activation code delivery.

Sends the 4-digit activation code over SMTP. When SMTP is not configured
(local development) the message is logged instead of sent.
"""

import asyncio
import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Protocol, runtime_checkable

from shared.config import Settings
from shared.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


@runtime_checkable
class IActivationMailer(Protocol):
    async def send_activation_code(self, email: str, name: str, code: str) -> None:
        ...


def redact_email(email: str) -> str:
    """Redact an email address for logging."""
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"


class ActivationMailer:
    """SMTP-backed IActivationMailer."""

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.smtp_host and self._from_address)

    @property
    def _from_address(self) -> str:
        return self._settings.smtp_from or self._settings.smtp_user

    async def send_activation_code(self, email: str, name: str, code: str) -> None:
        subject = "Activate your account"
        body = (
            f"Hello {name},\n\n"
            f"Your activation code is: {code}\n\n"
            "The code expires in 5 minutes.\n"
        )

        if not self.is_configured:
            logger.warning(
                f"SMTP not configured, activation mail for {redact_email(email)} "
                f"not sent (code {code})"
            )
            return

        message = EmailMessage()
        message["Subject"] = subject
        message["From"] = self._from_address
        message["To"] = email
        message.set_content(body)

        try:
            await asyncio.to_thread(self._send, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(f"Failed to send activation mail to {redact_email(email)}: {e}")
            raise ExternalServiceError(
                "Failed to send activation email",
                service="smtp",
                code="EMAIL_DELIVERY_FAILED",
            )

        logger.info(f"Activation mail sent to {redact_email(email)}")

    def _send(self, message: EmailMessage) -> None:
        settings = self._settings
        with smtplib.SMTP(settings.smtp_host, settings.smtp_port, timeout=10) as smtp:
            if settings.smtp_use_tls:
                smtp.starttls(context=ssl.create_default_context())
            if settings.smtp_user:
                smtp.login(settings.smtp_user, settings.smtp_password)
            smtp.send_message(message)
