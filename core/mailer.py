"""
Envoi des demandes client par SMTP
"""
import logging
import smtplib
from email.message import EmailMessage

from core.errors import MailDeliveryError
from core.lead_document import ATTACHMENT_FILENAME


logger = logging.getLogger(__name__)

LEAD_SUBJECT = "New Client Requirement (PDF)"


def build_lead_email(
    sender: str,
    recipient: str,
    name: str,
    email: str,
    message: str,
    pdf_content: bytes,
) -> EmailMessage:
    """Construit le message avec le résumé texte et le PDF en pièce jointe"""
    msg = EmailMessage()
    msg["From"] = sender
    msg["To"] = recipient
    msg["Subject"] = LEAD_SUBJECT
    msg.set_content(
        "A new client has submitted their requirements.\n\n"
        f"Name: {name}\n"
        f"Email: {email}\n"
        f"Message: {message}"
    )
    msg.add_attachment(
        pdf_content,
        maintype="application",
        subtype="pdf",
        filename=ATTACHMENT_FILENAME,
    )
    return msg


class LeadMailer:
    """Relais SMTP authentifié vers un destinataire fixe"""

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        recipient: str,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.recipient = recipient
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings) -> "LeadMailer":
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            recipient=settings.get_lead_recipient(),
            timeout=settings.smtp_timeout_seconds,
        )

    def send_lead(self, name: str, email: str, message: str, pdf_content: bytes) -> None:
        """
        Envoie la demande ; ne retourne qu'une fois le message accepté par le relais.

        Raises:
            MailDeliveryError: Échec d'authentification, de connexion ou refus
        """
        msg = build_lead_email(
            sender=self.username,
            recipient=self.recipient,
            name=name,
            email=email,
            message=message,
            pdf_content=pdf_content,
        )

        try:
            with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as server:
                server.starttls()
                server.login(self.username, self.password)
                server.send_message(msg)
        except smtplib.SMTPAuthenticationError as e:
            raise MailDeliveryError(f"SMTP authentication failed: {e}") from e
        except (smtplib.SMTPException, OSError) as e:
            raise MailDeliveryError(f"SMTP delivery failed: {e}") from e

        logger.info("Lead email sent to %s", self.recipient)
