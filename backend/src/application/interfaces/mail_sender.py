"""Mail transport interface for dependency inversion."""

from abc import ABC, abstractmethod
from typing import Optional


class IMailSender(ABC):
    """
    Abstract interface for outbound mail.

    Sending is best effort: implementations log failures and report them
    through the return value instead of raising.
    """

    @abstractmethod
    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> bool:
        """
        Send one message.

        Args:
            to: Recipient address
            subject: Subject line
            text: Plain text body
            html: Optional HTML alternative

        Returns:
            True if handed to the transport, False otherwise
        """
        pass
