"""Document rendering, archiving and mail transport."""

from .pdf_generator import ThankLetterPDFGenerator
from .smtp_client import SMTPMailSender
from .zip_archiver import ZipArchiver

__all__ = ["ThankLetterPDFGenerator", "SMTPMailSender", "ZipArchiver"]
