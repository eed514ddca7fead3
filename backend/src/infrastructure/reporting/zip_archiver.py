"""ZIP archiver bundling generated letters and collected attachments."""

import io
import logging
import zipfile
from pathlib import Path
from typing import Mapping

from application.interfaces import IArchiver

logger = logging.getLogger(__name__)


class ZipArchiver(IArchiver):
    """Builds deflate-compressed ZIP archives in memory."""

    media_type = "application/zip"
    file_extension = "zip"

    def archive(self, entries: Mapping[str, bytes]) -> bytes:
        """Archive in-memory entries under their names."""
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in entries.items():
                archive.writestr(name, content)
        logger.info(f"Archived {len(entries)} files")
        return buffer.getvalue()

    def archive_directory(self, directory: Path) -> bytes:
        """Archive the regular files of a directory, sorted by name."""
        entries = {
            path.name: path.read_bytes()
            for path in sorted(Path(directory).iterdir())
            if path.is_file()
        }
        return self.archive(entries)
