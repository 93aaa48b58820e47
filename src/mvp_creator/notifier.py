"""User notifications for generation outcomes."""

import logging
import threading
from abc import ABC, abstractmethod

import click

from mvp_creator.components.types import Notification, NotificationLevel

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Delivers info, warning and error messages to the user."""

    @abstractmethod
    def notify(self, level: NotificationLevel, title: str, message: str) -> None:
        pass

    def info(self, message: str, title: str = "Success") -> None:
        self.notify(NotificationLevel.INFO, title, message)

    def warning(self, message: str, title: str = "Warning") -> None:
        self.notify(NotificationLevel.WARNING, title, message)

    def error(self, message: str, title: str = "Error") -> None:
        self.notify(NotificationLevel.ERROR, title, message)


class LoggingNotifier(Notifier):
    """Routes notifications to the application log."""

    _LEVELS = {
        NotificationLevel.INFO: logging.INFO,
        NotificationLevel.WARNING: logging.WARNING,
        NotificationLevel.ERROR: logging.ERROR,
    }

    def notify(self, level: NotificationLevel, title: str, message: str) -> None:
        logger.log(self._LEVELS[level], "%s: %s", title, message)


class ConsoleNotifier(Notifier):
    """Prints notifications to the terminal, warnings and errors to stderr."""

    _COLORS = {
        NotificationLevel.INFO: "green",
        NotificationLevel.WARNING: "yellow",
        NotificationLevel.ERROR: "red",
    }

    def notify(self, level: NotificationLevel, title: str, message: str) -> None:
        click.secho(f"{title}: {message}", fg=self._COLORS[level], err=level != NotificationLevel.INFO)


class RecordingNotifier(Notifier):
    """Keeps notifications in memory."""

    def __init__(self):
        self.notifications: list[Notification] = []
        self._lock = threading.Lock()

    def notify(self, level: NotificationLevel, title: str, message: str) -> None:
        with self._lock:
            self.notifications.append(Notification(level=level, title=title, message=message))

    def messages(self, level: NotificationLevel) -> list[str]:
        return [n.message for n in self.notifications if n.level == level]
