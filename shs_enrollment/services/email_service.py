from fastapi_mail import FastMail, MessageSchema, ConnectionConfig, MessageType
from shs_enrollment.config import settings
import logging

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Delivers a rendered email. Returns True when the message was accepted."""

    async def send(self, to_address: str, subject: str, body_markup: str) -> bool:
        raise NotImplementedError


class MailDispatcher(NotificationDispatcher):
    """SMTP delivery through fastapi-mail: STARTTLS on EMAIL_PORT (587), then SSL on 465."""

    def __init__(self):
        self._configs = None

    def _build_configs(self):
        # Built lazily so an unconfigured mailer never blocks application start-up
        common = dict(
            MAIL_USERNAME=settings.EMAIL_HOST_USER,
            MAIL_PASSWORD=settings.EMAIL_HOST_PASSWORD,
            MAIL_FROM=settings.EMAIL_FROM,
            MAIL_FROM_NAME=f"{settings.SCHOOL_CODE} Enrollment",
            MAIL_SERVER=settings.EMAIL_HOST,
            USE_CREDENTIALS=True,
            VALIDATE_CERTS=True,
        )
        conf_tls = ConnectionConfig(MAIL_PORT=settings.EMAIL_PORT, MAIL_STARTTLS=True, MAIL_SSL_TLS=False, **common)
        conf_ssl = ConnectionConfig(MAIL_PORT=465, MAIL_STARTTLS=False, MAIL_SSL_TLS=True, **common)
        return conf_tls, conf_ssl

    async def send(self, to_address: str, subject: str, body_markup: str) -> bool:
        if not settings.EMAIL_HOST:
            logger.warning(f"EMAIL_HOST not configured; '{subject}' to {to_address} not sent")
            return False

        if self._configs is None:
            self._configs = self._build_configs()
        conf_tls, conf_ssl = self._configs

        message = MessageSchema(
            subject=subject,
            recipients=[to_address],
            body=body_markup,
            subtype=MessageType.html,
        )

        try:
            await FastMail(conf_tls).send_message(message)
            logger.info(f"{subject} email sent to {to_address} via port {settings.EMAIL_PORT}")
            return True
        except Exception as e:
            logger.warning(f"Failed to send {subject} via port {settings.EMAIL_PORT}: {str(e)}")
            try:
                await FastMail(conf_ssl).send_message(message)
                logger.info(f"{subject} email sent to {to_address} via port 465")
                return True
            except Exception as e2:
                logger.error(f"Failed to send {subject} email via both ports: {str(e2)}")
                return False


_dispatcher = MailDispatcher()


def get_dispatcher() -> NotificationDispatcher:
    """FastAPI dependency for the outbound mail collaborator."""
    return _dispatcher
