"""Letter renderer interface for the letter generation pipeline."""

from abc import ABC, abstractmethod
from pathlib import Path

from domain.value_objects import ThankLetter


class ILetterRenderer(ABC):
    """Turns letter layout data into a formatted document."""

    file_extension: str = "pdf"
    media_type: str = "application/pdf"

    @abstractmethod
    def render(self, letter: ThankLetter) -> bytes:
        """
        Render a letter in memory.

        Args:
            letter: Letter layout data

        Returns:
            Document bytes
        """
        pass

    @abstractmethod
    def generate(self, letter: ThankLetter, output_path: Path) -> str:
        """
        Render a letter to a file.

        Args:
            letter: Letter layout data
            output_path: Destination file

        Returns:
            Path of the written file
        """
        pass
