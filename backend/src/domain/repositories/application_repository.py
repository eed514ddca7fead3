"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from domain.entities import Application


class IApplicationRepository(ABC):
    """
    Abstract repository interface for the Application aggregate.

    Implementations act as an opaque document store: they persist whole
    records and never merge on their own.
    """

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Create a new application.

        Args:
            application: Application entity to create

        Returns:
            Created Application with its identifier assigned
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: int) -> Optional[Application]:
        """
        Retrieve an application by ID.

        Args:
            application_id: Application identifier

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_applicant_and_year(self, applicant_id: int, year: int) -> Optional[Application]:
        """
        Retrieve the application of an applicant for a year.

        Args:
            applicant_id: Student external id
            year: Application year

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def find(
        self,
        filters: Optional[dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> list[Application]:
        """
        List applications matching equality filters.

        Args:
            filters: Field name (``applicantId``, ``applicantName``, ``year``) to value
            skip: Number of records to skip
            limit: Maximum number of records, None for no limit

        Returns:
            Applications ordered by identifier
        """
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """
        Persist the full state of an existing application.

        Args:
            application: Application entity with updated data

        Returns:
            Updated Application
        """
        pass

    @abstractmethod
    async def delete(self, application_id: int) -> bool:
        """
        Delete an application.

        Args:
            application_id: Application identifier

        Returns:
            True if deleted, False if not found
        """
        pass
