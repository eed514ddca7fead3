"""Attachment store backed by the private upload directory."""

from pathlib import Path

from application.interfaces import IAttachmentStore


class LocalAttachmentStore(IAttachmentStore):
    """Reads uploaded files by stored name from one directory."""

    def __init__(self, base_dir: str):
        self.base_dir = Path(base_dir).resolve()

    def read(self, filename: str) -> bytes:
        """Read an uploaded file; names may not escape the base directory."""
        path = (self.base_dir / filename).resolve()
        if self.base_dir not in path.parents:
            raise FileNotFoundError(filename)
        return path.read_bytes()
