"""Domain Enums - Constant values used across the domain."""

from .application_category import ApplicationCategory
from .capability import Capability

__all__ = ["ApplicationCategory", "Capability"]
