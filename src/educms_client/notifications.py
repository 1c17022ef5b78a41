"""
Hooks from the sync layer to the user interface.

A Notifier shows transient notifications, toggles the loading indicator and
closes the editing surface of an entity after a successful save.
"""

from abc import ABC, abstractmethod
from enum import Enum
import logging

from educms_types.tables import LogicalTable

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class Notifier(ABC):

    @abstractmethod
    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        ...

    def set_loading(self, loading: bool) -> None:
        pass

    def close_editor(self, table: LogicalTable) -> None:
        pass


class LoggingNotifier(Notifier):
    """Default notifier for headless use: notifications go to the log."""

    LEVELS = {
        NotificationLevel.INFO: logging.INFO,
        NotificationLevel.SUCCESS: logging.INFO,
        NotificationLevel.WARNING: logging.WARNING,
        NotificationLevel.DANGER: logging.ERROR,
    }

    def notify(self, message: str, level: NotificationLevel = NotificationLevel.INFO) -> None:
        logger.log(self.LEVELS.get(level, logging.INFO), message)
