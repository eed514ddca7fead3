"""Data transfer objects returned by use cases."""

from dataclasses import dataclass
from typing import Optional

from domain.entities import Application


@dataclass(frozen=True)
class GeneratedFile:
    """A downloadable binary produced by the letter or e-form pipelines."""

    filename: str
    content: bytes
    media_type: str


@dataclass(frozen=True)
class AmendmentResult:
    """Outcome of an amend request: the stored record and whether it was created."""

    application: Application
    created: bool = False


@dataclass(frozen=True)
class Caller:
    """
    Authorized identity of a request.

    A self-access caller is an applicant acting on their own records only;
    ``owner_id`` is then their id, otherwise None.
    """

    caller_id: str
    self_access: bool = False

    @property
    def owner_id(self) -> Optional[str]:
        return self.caller_id if self.self_access else None
