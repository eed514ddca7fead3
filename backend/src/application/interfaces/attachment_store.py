"""Read access to previously uploaded attachment files."""

from abc import ABC, abstractmethod


class IAttachmentStore(ABC):
    """Resolves stored attachment filenames to their bytes."""

    @abstractmethod
    def read(self, filename: str) -> bytes:
        """
        Read an uploaded file.

        Args:
            filename: Stored filename as referenced by an application

        Returns:
            File content

        Raises:
            FileNotFoundError: The file is not in the store
        """
        pass
