"""
Notification service - user-facing messages
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from core.constants import EVENTS, NOTIFICATION_TYPES
from .event_bus import EventBus

log = logging.getLogger(__name__)

_LOG_LEVELS = {
    NOTIFICATION_TYPES["SUCCESS"]: logging.INFO,
    NOTIFICATION_TYPES["INFO"]: logging.INFO,
    NOTIFICATION_TYPES["WARNING"]: logging.WARNING,
    NOTIFICATION_TYPES["ERROR"]: logging.WARNING,
}


@dataclass
class Notification:
    """A message for the display layer"""
    type: str
    message: str


class NotificationService:
    # Records messages for the display layer and broadcasts them on the bus

    def __init__(self, event_bus: Optional[EventBus] = None):
        self.event_bus = event_bus
        self.messages: List[Notification] = []

    def notify(self, message: str, notification_type: str = NOTIFICATION_TYPES["INFO"]) -> Notification:
        notification = Notification(type=notification_type, message=message)
        self.messages.append(notification)
        log.log(_LOG_LEVELS.get(notification_type, logging.INFO), "[%s] %s", notification_type, message)
        if self.event_bus:
            self.event_bus.emit(EVENTS["NOTIFICATION"], {"type": notification_type, "message": message})
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(message, NOTIFICATION_TYPES["SUCCESS"])

    def error(self, message: str) -> Notification:
        return self.notify(message, NOTIFICATION_TYPES["ERROR"])

    def warning(self, message: str) -> Notification:
        return self.notify(message, NOTIFICATION_TYPES["WARNING"])

    def info(self, message: str) -> Notification:
        return self.notify(message, NOTIFICATION_TYPES["INFO"])

    def drain(self) -> List[Notification]:
        # Hand pending messages to the display layer and forget them
        pending, self.messages = self.messages, []
        return pending

    def last(self) -> Optional[Notification]:
        return self.messages[-1] if self.messages else None
