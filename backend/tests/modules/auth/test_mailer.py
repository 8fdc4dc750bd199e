import logging
import smtplib
from unittest.mock import MagicMock, patch

import pytest

from shared.exceptions import ExternalServiceError
from modules.auth.mailer import ActivationMailer, IActivationMailer, redact_email


@pytest.fixture
def smtp_settings(settings):
    return settings.model_copy(
        update={
            "smtp_host": "smtp.example.com",
            "smtp_port": 2525,
            "smtp_user": "mailer@example.com",
            "smtp_password": "pw",
            "smtp_from": "noreply@example.com",
        }
    )


class TestRedactEmail:
    def test_keeps_domain(self):
        assert redact_email("ada.lovelace@example.com") == "ad***@example.com"

    def test_not_an_email(self):
        assert redact_email("nope") == "redacted"


class TestActivationMailer:
    def test_implements_protocol(self, settings):
        assert isinstance(ActivationMailer(settings), IActivationMailer)

    @pytest.mark.asyncio
    async def test_logs_code_when_smtp_not_configured(self, settings, caplog):
        mailer = ActivationMailer(settings)
        assert mailer.is_configured is False

        with caplog.at_level(logging.WARNING, logger="modules.auth.mailer"):
            await mailer.send_activation_code("ada@example.com", "Ada", "4321")

        assert "4321" in caplog.text
        assert "ada@example.com" not in caplog.text

    @pytest.mark.asyncio
    async def test_sends_over_smtp(self, smtp_settings):
        smtp = MagicMock()
        with patch("modules.auth.mailer.smtplib.SMTP") as smtp_class:
            smtp_class.return_value.__enter__.return_value = smtp
            await ActivationMailer(smtp_settings).send_activation_code(
                "ada@example.com", "Ada", "4321"
            )

        smtp_class.assert_called_once_with("smtp.example.com", 2525, timeout=10)
        smtp.starttls.assert_called_once()
        smtp.login.assert_called_once_with("mailer@example.com", "pw")
        message = smtp.send_message.call_args.args[0]
        assert message["To"] == "ada@example.com"
        assert message["From"] == "noreply@example.com"
        assert "4321" in message.get_content()

    @pytest.mark.asyncio
    async def test_delivery_failure(self, smtp_settings):
        with patch("modules.auth.mailer.smtplib.SMTP") as smtp_class:
            smtp_class.side_effect = smtplib.SMTPConnectError(421, "unavailable")
            with pytest.raises(ExternalServiceError) as exc_info:
                await ActivationMailer(smtp_settings).send_activation_code(
                    "ada@example.com", "Ada", "4321"
                )

        assert exc_info.value.code == "EMAIL_DELIVERY_FAILED"
        assert exc_info.value.service == "smtp"
