"""SMTP mail transport via standard library."""

import logging
import smtplib
from email.header import Header
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from email.utils import formataddr
from typing import Optional

from application.interfaces import IMailSender
from infrastructure.config import Settings

logger = logging.getLogger(__name__)


class SMTPMailSender(IMailSender):
    """Sends notification mail through an authenticated STARTTLS SMTP server."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> bool:
        """
        Send one notification via SMTP.
        
        Args:
            to: Recipient address
            subject: The subject of the email
            text: Plain text body
            html: Optional HTML alternative
            
        Returns:
            bool: True if sent successfully, False otherwise.
        """
        settings = self.settings
        
        # Validation
        if not settings.smtp_configured:
            logger.warning("SMTP configuration missing. Skipping email.")
            return False
        
        if not to:
            logger.warning("No recipient email. Skipping email.")
            return False
            
        try:
            # Create message
            msg = MIMEMultipart("alternative")
            msg['From'] = formataddr((str(Header(settings.smtp_sender_name, 'utf-8')), settings.smtp_email))
            msg['To'] = to
            msg['Subject'] = str(Header(subject, 'utf-8'))
            
            msg.attach(MIMEText(text, 'plain', 'utf-8'))
            if html:
                msg.attach(MIMEText(html, 'html', 'utf-8'))
            
            # Connect to server
            logger.info(f"Connecting to SMTP server: {settings.smtp_server}:{settings.smtp_port}...")
            
            with smtplib.SMTP(settings.smtp_server, settings.smtp_port, timeout=30) as server:
                server.ehlo()
                server.starttls()
                server.ehlo()
                
                # Login
                server.login(settings.smtp_email, settings.smtp_password)
                
                server.send_message(msg, to_addrs=[to])
            
            logger.info(f"Email sent successfully to {to}")
            return True
            
        except Exception as e:
            logger.error(f"Failed to send email to {to}: {str(e)}", exc_info=False) # Log error but don't crash
            return False
