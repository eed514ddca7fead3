"""Archiver interface: many named files into one downloadable binary."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping


class IArchiver(ABC):
    """Bundles files into a single archive."""

    media_type: str = "application/zip"
    file_extension: str = "zip"

    @abstractmethod
    def archive(self, entries: Mapping[str, bytes]) -> bytes:
        """
        Archive in-memory entries.

        Args:
            entries: Archive member name to content

        Returns:
            Archive bytes
        """
        pass

    @abstractmethod
    def archive_directory(self, directory: Path) -> bytes:
        """
        Archive every regular file of a directory, named by file name.

        Args:
            directory: Directory to bundle

        Returns:
            Archive bytes
        """
        pass
