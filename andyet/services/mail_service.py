"""
Outgoing e-mail over SMTP.

Messages are built with the stdlib ``email`` package and delivered with one
SMTP connection per message. When mail is disabled in the settings the
message is only logged, which is the default for local development.
"""

import smtplib
from email.header import Header
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from typing import Union

import structlog

from ..config import Settings
from ..exceptions import MailDeliveryError

logger = structlog.get_logger(__name__)


class MailService:

    def __init__(self, settings: Settings):
        self.settings = settings

    def send_email(self, to: str, subject: str, content: str, is_multipart: bool = False, is_html: bool = False) -> None:
        """
        Send a single e-mail.

        Args:
            to: Recipient address
            subject: Subject line, may contain non-ASCII characters
            content: Message body
            is_multipart: Wrap the body in a multipart/mixed container
            is_html: Send the body as text/html instead of text/plain

        Raises:
            MailDeliveryError: if the SMTP exchange fails
        """
        logger.debug(
            "Send e-mail",
            to=to,
            subject=subject,
            is_multipart=is_multipart,
            is_html=is_html
        )

        if not self.settings.mail_enabled:
            logger.info("Mail disabled, e-mail not sent", to=to, subject=subject)
            return

        msg = self._create_message(to, subject, content, is_multipart, is_html)
        self._send_message(msg, to)

    def _create_message(self, to: str, subject: str, content: str,
                        is_multipart: bool, is_html: bool) -> Union[MIMEText, MIMEMultipart]:
        body = MIMEText(content, "html" if is_html else "plain", "utf-8")

        if is_multipart:
            msg = MIMEMultipart("mixed")
            msg.attach(body)
        else:
            msg = body

        msg["Subject"] = Header(subject, "utf-8")
        msg["From"] = self.settings.mail_from
        msg["To"] = to
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid(domain=self.settings.mail_from.split("@")[-1])
        msg["X-Mailer"] = self.settings.application_name
        return msg

    def _send_message(self, msg: Union[MIMEText, MIMEMultipart], to: str) -> None:
        settings = self.settings
        try:
            with smtplib.SMTP(settings.mail_host, settings.mail_port, timeout=settings.mail_timeout_seconds) as smtp:
                if settings.debug:
                    smtp.set_debuglevel(1)

                if settings.mail_use_tls:
                    smtp.starttls()

                if settings.mail_username and settings.mail_password:
                    smtp.login(settings.mail_username, settings.mail_password)

                smtp.sendmail(settings.mail_from, [to], msg.as_string())

            logger.info("Sent e-mail", to=to)

        except (smtplib.SMTPException, OSError) as e:
            logger.error("E-mail could not be sent", to=to, error=str(e))
            raise MailDeliveryError(to, str(e)) from e
