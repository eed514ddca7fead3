"""Capabilities granted to reviewers and teachers."""

from enum import Enum


class Capability(str, Enum):
    """Authorization tokens checked before an operation runs."""

    READ = "read"
    WRITE = "write"

    def __str__(self) -> str:
        return self.value
