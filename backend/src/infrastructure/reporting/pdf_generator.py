from io import BytesIO
from pathlib import Path
from typing import Optional, Union
from xml.sax.saxutils import escape
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.pdfbase.ttfonts import TTFont
import logging

from application.interfaces import ILetterRenderer
from domain.value_objects import ThankLetter

# Built-in Adobe CID font for simplified Chinese, no font file needed
CJK_FALLBACK_FONT = "STSong-Light"
CUSTOM_FONT_NAME = "LetterFont"


class ThankLetterPDFGenerator(ILetterRenderer):
    """Renders thank-you letters as A4 PDF documents.

    Font configuration is fixed at construction; each letter pipeline owns
    its generator instance.
    """

    file_extension = "pdf"
    media_type = "application/pdf"

    def __init__(self, font_path: Optional[str] = None):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.font_path = font_path
        self._register_fonts()
        self.styles = self._create_styles()

    def _register_fonts(self):
        """Register a font that supports Chinese characters."""
        try:
            if self.font_path and Path(self.font_path).exists():
                pdfmetrics.registerFont(TTFont(CUSTOM_FONT_NAME, self.font_path))
                self.font_name = CUSTOM_FONT_NAME
                self.logger.info(f"Registered letter font {self.font_path}.")
            else:
                if self.font_path:
                    self.logger.warning(f"Font {self.font_path} not found. Falling back to {CJK_FALLBACK_FONT}.")
                pdfmetrics.registerFont(UnicodeCIDFont(CJK_FALLBACK_FONT))
                self.font_name = CJK_FALLBACK_FONT

        except Exception as e:
            self.logger.error(f"Font registration failed: {e}")
            self.font_name = 'Helvetica'

    def _create_styles(self):
        """Create the letter styles."""
        styles = getSampleStyleSheet()

        # Heading
        styles.add(ParagraphStyle(
            name='LetterTitle',
            parent=styles['Heading1'],
            fontName=self.font_name,
            fontSize=22,
            leading=30,
            textColor=colors.black,
            spaceAfter=24,
            alignment=TA_CENTER
        ))

        # Salutation line
        styles.add(ParagraphStyle(
            name='Salutation',
            parent=styles['Normal'],
            fontName=self.font_name,
            fontSize=13,
            leading=22,
            spaceAfter=10,
            wordWrap='CJK',
            alignment=TA_LEFT
        ))

        # Body paragraphs, two-character first line indent
        styles.add(ParagraphStyle(
            name='LetterBody',
            parent=styles['Normal'],
            fontName=self.font_name,
            fontSize=13,
            leading=22,
            firstLineIndent=26,
            spaceAfter=6,
            wordWrap='CJK',
            alignment=TA_LEFT
        ))

        # Signature block
        styles.add(ParagraphStyle(
            name='Signature',
            parent=styles['Normal'],
            fontName=self.font_name,
            fontSize=13,
            leading=22,
            alignment=TA_RIGHT
        ))

        return styles

    def render(self, letter: ThankLetter) -> bytes:
        """Render the letter in memory."""
        buffer = BytesIO()
        self._build(letter, buffer)
        return buffer.getvalue()

    def generate(self, letter: ThankLetter, output_path: Path) -> str:
        """Render the letter to a file."""
        self._build(letter, str(output_path))
        self.logger.info(f"Letter generated: {output_path}")
        return str(output_path)

    def _build(self, letter: ThankLetter, target: Union[str, BytesIO]) -> None:
        try:
            doc = SimpleDocTemplate(
                target,
                pagesize=A4,
                rightMargin=72, leftMargin=72,
                topMargin=72, bottomMargin=72,
                title=letter.title,
            )

            story = [Paragraph(escape(letter.title), self.styles["LetterTitle"])]

            if letter.salutation:
                story.append(Paragraph(escape(letter.salutation), self.styles["Salutation"]))

            for paragraph in letter.paragraphs:
                story.append(Paragraph(escape(paragraph), self.styles["LetterBody"]))

            story.append(Spacer(1, 40))
            if letter.department:
                story.append(Paragraph(escape(letter.department), self.styles["Signature"]))
            if letter.class_name:
                story.append(Paragraph(escape(letter.class_name), self.styles["Signature"]))
            story.append(Paragraph(letter.formatted_date, self.styles["Signature"]))

            doc.build(story)

        except Exception as e:
            self.logger.error(f"Failed to generate letter {letter.title!r}: {e}", exc_info=True)
            raise e
