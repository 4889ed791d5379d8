"""Notification entity - user-facing outcome reported by coordinators."""

from dataclasses import dataclass
from enum import Enum


class NotificationLevel(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """Outcome message; the UI decides how to present it."""

    level: NotificationLevel
    title: str
    message: str

    @property
    def is_error(self) -> bool:
        return self.level is NotificationLevel.ERROR

    @classmethod
    def info(cls, title: str, message: str) -> "Notification":
        return cls(NotificationLevel.INFO, title, message)

    @classmethod
    def success(cls, title: str, message: str) -> "Notification":
        return cls(NotificationLevel.SUCCESS, title, message)

    @classmethod
    def error(cls, title: str, message: str) -> "Notification":
        return cls(NotificationLevel.ERROR, title, message)
