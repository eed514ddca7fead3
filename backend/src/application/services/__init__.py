"""Application services shared by several use cases."""

from .access_control import AccessControl
from .notification_dispatcher import NotificationDispatcher, patched_categories

__all__ = ["AccessControl", "NotificationDispatcher", "patched_categories"]
