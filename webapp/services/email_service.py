"""
Email Service

Delivers contact form messages to the site's inbox.
"""

import smtplib
import logging
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart

from config import settings

logger = logging.getLogger(__name__)


def is_configured():
    """Check that SMTP credentials and a recipient are set."""
    return bool(settings.SENDER_EMAIL and settings.SENDER_PASSWORD and settings.CONTACT_RECIPIENT)


def send_contact_message(name, email, subject, message):
    """
    Send a contact form submission to the site's inbox.

    Args:
        name (str): Sender's name
        email (str): Sender's email address (used as Reply-To)
        subject (str): Subject chosen on the form
        message (str): Message body

    Returns:
        bool: True if email sent successfully, False otherwise
    """
    if not is_configured():
        logger.error("Email credentials not configured. Set SENDER_EMAIL, SENDER_PASSWORD and CONTACT_RECIPIENT.")
        return False

    body = f"""New message from the Explore the Mournes contact form.

Name: {name}
Email: {email}
Subject: {subject}

{message}
"""

    mime_message = MIMEMultipart()
    mime_message["From"] = settings.SENDER_EMAIL
    mime_message["To"] = settings.CONTACT_RECIPIENT
    mime_message["Reply-To"] = email
    mime_message["Subject"] = f"[Explore the Mournes] {subject}"

    mime_message.attach(MIMEText(body, "plain"))

    try:
        with smtplib.SMTP(settings.SMTP_SERVER, settings.SMTP_PORT) as server:
            server.starttls()
            server.login(settings.SENDER_EMAIL, settings.SENDER_PASSWORD)
            server.send_message(mime_message)

        logger.info(f"Contact message from {email} delivered")
        return True

    except smtplib.SMTPException as e:
        logger.error(f"SMTP error sending contact message from {email}: {e}")
        return False
    except OSError as e:
        logger.error(f"Error sending contact message from {email}: {e}")
        return False
