"""
Security Service - alarm decision core

Receives sensor changes, arming changes and camera frames, decides the
alarm status and tells registered listeners about it.

Key rules:
1. Arming (home or away) forces ALARM; disarming forces NO_ALARM
2. Arming HOME resets every sensor to inactive
3. While armed, each sensor activation escalates one step:
   NO_ALARM -> PENDING_ALARM -> ALARM
4. A pending alarm clears once its last active sensor goes inactive
5. A cat seen while ARMED_HOME raises ALARM; no cat and no active sensor
   clears to NO_ALARM

All durable state lives in the SecurityRepository. The service is
synchronous and not thread-safe; callers serialize access.
"""

import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, List, Optional, Set

import numpy as np

from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import Sensor
from ..domain.repository import InMemorySecurityRepository, SecurityRepository
from ..vision.image_service import ImageService
from .status_listener import StatusListener
from .transitions import TransitionResult, TransitionTrigger, evaluate

if TYPE_CHECKING:
    from ..config import SecurityConfig

logger = logging.getLogger(__name__)

# Minimum classifier confidence (percent) for a cat sighting
CAT_CONFIDENCE_THRESHOLD = 50.0

DEFAULT_HISTORY_SIZE = 100


class SecurityService:
    """Alarm coordinator.

    Reads state from the repository, applies the transition table, writes
    the outcome back and notifies listeners.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        image_service: ImageService,
        history_size: int = DEFAULT_HISTORY_SIZE,
    ):
        self._repository = repository
        self._image_service = image_service
        self._listeners: List[StatusListener] = []

        # Applied transitions, oldest first
        self._history: Deque[TransitionResult] = deque(maxlen=history_size)

    @classmethod
    def from_config(
        cls,
        config: "SecurityConfig",
        image_service: ImageService,
    ) -> "SecurityService":
        """Build a service over an in-memory repository seeded from config."""
        return cls(
            InMemorySecurityRepository.from_config(config),
            image_service,
            history_size=config.history_size,
        )

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_status_listener(self, listener: StatusListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)
            logger.debug("Status listener added: %r", listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
            logger.debug("Status listener removed: %r", listener)

    # =========================================================================
    # Alarm & Arming Status
    # =========================================================================

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        """Store the alarm status and notify every listener."""
        self._repository.set_alarm_status(alarm_status)
        for listener in tuple(self._listeners):
            listener.on_alarm_status_changed(alarm_status)

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """Change the arming mode.

        Arming raises ALARM and disarming clears to NO_ALARM. ARMED_HOME
        also resets every sensor to inactive. The new arming status is
        stored last.
        """
        arming_status = ArmingStatus(arming_status)
        logger.info("Arming status -> %s", arming_status.value)

        self._apply(evaluate(
            self._repository.get_alarm_status(),
            TransitionTrigger.ARMING_CHANGED,
            arming_status,
        ))

        if arming_status == ArmingStatus.ARMED_HOME:
            # Iterate a snapshot; the live set changes underneath
            for sensor in tuple(sorted(self.get_sensors())):
                sensor.active = True
                self.change_sensor_activation_status(sensor, False)

        self._repository.set_arming_status(arming_status)

    # =========================================================================
    # Sensors
    # =========================================================================

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> None:
        """Set a sensor's active flag, updating the alarm status if needed.

        The sensor is always written back to the repository, even when the
        flag does not change.
        """
        if not sensor.active and active:
            self._handle_sensor_activated()
        elif sensor.active and not active:
            self._handle_sensor_deactivated(sensor)

        sensor.active = active
        self._repository.update_sensor(sensor)

    def _handle_sensor_activated(self) -> None:
        self._apply(evaluate(
            self._repository.get_alarm_status(),
            TransitionTrigger.SENSOR_ACTIVATED,
            self._repository.get_arming_status(),
        ))

    def _handle_sensor_deactivated(self, sensor: Sensor) -> None:
        result = evaluate(
            self._repository.get_alarm_status(),
            TransitionTrigger.SENSORS_CLEARED,
            self._repository.get_arming_status(),
        )
        if not result.applies:
            logger.debug(
                "Sensor %s deactivated: no transition from %s",
                sensor.name,
                result.from_status.value,
            )
            return

        # Drop the sensor so it no longer counts as active
        self._repository.remove_sensor(sensor)
        if not self._any_sensor_active():
            self._apply(result)

    def _any_sensor_active(self) -> bool:
        return any(sensor.active for sensor in self.get_sensors())

    def add_sensor(self, sensor: Sensor) -> None:
        self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self._repository.remove_sensor(sensor)

    # =========================================================================
    # Camera
    # =========================================================================

    def process_image(self, image: np.ndarray) -> None:
        """Classify a camera frame and update the alarm status."""
        detected = bool(
            self._image_service.image_contains_cat(image, CAT_CONFIDENCE_THRESHOLD)
        )
        self._cat_detected(detected)

    def _cat_detected(self, detected: bool) -> None:
        trigger: Optional[TransitionTrigger] = None
        if detected:
            trigger = TransitionTrigger.CAT_DETECTED
        elif not self._any_sensor_active():
            trigger = TransitionTrigger.CAT_ABSENT_SENSORS_IDLE

        if trigger is None:
            logger.debug("No cat, sensors still active: no transition")
        else:
            self._apply(evaluate(
                self._repository.get_alarm_status(),
                trigger,
                self._repository.get_arming_status(),
            ))

        for listener in tuple(self._listeners):
            listener.on_cat_detected(detected)

    # =========================================================================
    # Transitions
    # =========================================================================

    def _apply(self, result: TransitionResult) -> None:
        if not result.applies:
            logger.debug(
                "%s: no transition from %s (%s)",
                result.trigger.value,
                result.from_status.value,
                result.arming_status.value,
            )
            return

        logger.info(
            "Alarm status %s -> %s (%s, %s)",
            result.from_status.value,
            result.to_status.value,
            result.trigger.value,
            result.arming_status.value,
        )
        self._history.append(result)
        self.set_alarm_status(result.to_status)

    def get_transition_history(self) -> List[TransitionResult]:
        return list(self._history)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_alarm_status(self) -> AlarmStatus:
        return self._repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self._repository.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self._repository.get_sensors()
