"""
Status Listener - observer interface for security status updates
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from ..domain.enums import AlarmStatus


class StatusListener(ABC):
    """Receives alarm status changes and camera cat-detection results."""

    @abstractmethod
    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def on_cat_detected(self, detected: bool) -> None:
        pass


class CallbackStatusListener(StatusListener):
    """StatusListener backed by plain callables.

    Either callback may be omitted.
    """

    def __init__(
        self,
        on_alarm_status_changed: Optional[Callable[[AlarmStatus], None]] = None,
        on_cat_detected: Optional[Callable[[bool], None]] = None,
    ):
        self._on_alarm_status_changed = on_alarm_status_changed
        self._on_cat_detected = on_cat_detected

    def on_alarm_status_changed(self, alarm_status: AlarmStatus) -> None:
        if self._on_alarm_status_changed:
            self._on_alarm_status_changed(alarm_status)

    def on_cat_detected(self, detected: bool) -> None:
        if self._on_cat_detected:
            self._on_cat_detected(detected)
