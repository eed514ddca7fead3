"""Repository interfaces for identity records owned by other services."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Reviewer, Student, Teacher


class IStudentRepository(ABC):
    """Read access to student records."""

    @abstractmethod
    async def get_by_id(self, student_id: int) -> Optional[Student]:
        """
        Retrieve a student by external id.

        Args:
            student_id: Student number

        Returns:
            Student if found, None otherwise
        """
        pass


class ITeacherRepository(ABC):
    """Access to teacher records, including the mentor application counter."""

    @abstractmethod
    async def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Teacher]:
        """
        Retrieve a teacher by display name (mentor status maps are keyed by name).

        Args:
            name: Teacher name

        Returns:
            Teacher if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(self, teacher: Teacher) -> Teacher:
        """Persist teacher changes."""
        pass


class IReviewerRepository(ABC):
    """Read access to reviewer records."""

    @abstractmethod
    async def get_by_id(self, reviewer_id: int) -> Optional[Reviewer]:
        pass
