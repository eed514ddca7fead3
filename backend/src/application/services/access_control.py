"""Decides whether a caller may perform an operation."""

from typing import Iterable, Optional

from application.dto import Caller
from domain.enums import Capability
from domain.exceptions import UnauthorizedError
from domain.repositories import IReviewerRepository, ITeacherRepository
from infrastructure.config import get_logger


class AccessControl:
    """
    Self-access or capability check for an authenticated caller.

    A caller reading or writing their own records names themselves in the
    access id and is let through. Everyone else must be a reviewer or a
    teacher holding every required capability.
    """

    def __init__(
        self,
        teacher_repository: ITeacherRepository,
        reviewer_repository: IReviewerRepository,
    ):
        self.teacher_repo = teacher_repository
        self.reviewer_repo = reviewer_repository
        self.logger = get_logger(self.__class__.__name__)

    async def authorize(
        self,
        caller_id: str,
        required: Iterable[Capability],
        access_id: Optional[str] = None,
        allow_self: bool = True,
    ) -> Caller:
        """
        Raise UnauthorizedError unless the caller may proceed.

        Self-access only proves who the caller is; the use cases then restrict
        such callers to the records of that applicant.

        Args:
            caller_id: Authenticated identity
            required: Capabilities the operation needs
            access_id: Identity the caller claims to act as for self-access
            allow_self: Whether the operation accepts self-access at all

        Returns:
            The authorized Caller
        """
        if access_id is not None and allow_self:
            if access_id == caller_id:
                return Caller(caller_id=caller_id, self_access=True)
            raise UnauthorizedError("Provide valid x-access-id or re-request with authorized identity.")

        authorizations = await self._authorizations_of(caller_id)
        if authorizations is None:
            raise UnauthorizedError("Please re-request with authorized identity.")

        missing = [str(capability) for capability in required if str(capability) not in authorizations]
        if missing:
            self.logger.info(f"Caller {caller_id} lacks {', '.join(missing)}")
            raise UnauthorizedError("Insufficient permissions.")

        return Caller(caller_id=caller_id)

    async def _authorizations_of(self, caller_id: str) -> Optional[set[str]]:
        try:
            staff_id = int(caller_id)
        except (TypeError, ValueError):
            return None

        teacher = await self.teacher_repo.get_by_id(staff_id)
        if teacher is not None:
            return set(teacher.authorizations)
        reviewer = await self.reviewer_repo.get_by_id(staff_id)
        if reviewer is not None:
            return set(reviewer.authorizations)
        return None
