"""
Security Repository - state store for the security service

Holds the durable state the service reads and writes:
- current alarm status
- current arming status
- the sensor set

SecurityRepository is the abstract store; InMemorySecurityRepository is the
reference implementation used by tests and demos.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, Optional, Set

from .enums import AlarmStatus, ArmingStatus
from .models import Sensor

if TYPE_CHECKING:
    from ..config import SecurityConfig

logger = logging.getLogger(__name__)


# =============================================================================
# Repository abstract base class
# =============================================================================

class SecurityRepository(ABC):
    """Abstract state store.

    All calls are synchronous and authoritative; callers never cache.
    """

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        pass

    @abstractmethod
    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        pass

    @abstractmethod
    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        """Return the live sensor set."""
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor. Removing an unknown sensor is a no-op."""
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Replace the stored sensor with the same identity, adding it if absent."""
        pass


# =============================================================================
# In-memory repository
# =============================================================================

class InMemorySecurityRepository(SecurityRepository):
    """Process-local store. Starts DISARMED / NO_ALARM with no sensors."""

    def __init__(
        self,
        sensors: Optional[Iterable[Sensor]] = None,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
    ):
        self._sensors: Set[Sensor] = set(sensors or ())
        self._alarm_status = AlarmStatus(alarm_status)
        self._arming_status = ArmingStatus(arming_status)

    @classmethod
    def from_config(cls, config: "SecurityConfig") -> "InMemorySecurityRepository":
        """Seed a repository from configuration.

        Sensors are copied so the config object is never mutated.
        """
        return cls(
            sensors=[sensor.model_copy() for sensor in config.sensors],
            alarm_status=config.alarm_status,
            arming_status=config.arming_status,
        )

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, alarm_status: AlarmStatus) -> None:
        self._alarm_status = AlarmStatus(alarm_status)

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        self._arming_status = ArmingStatus(arming_status)

    def get_sensors(self) -> Set[Sensor]:
        return self._sensors

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors.add(sensor)
        logger.debug("Sensor added: %r", sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        self._sensors.discard(sensor)
        logger.debug("Sensor removed: %r", sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        # set.add keeps the old element on a hash match, so drop it first
        self._sensors.discard(sensor)
        self._sensors.add(sensor)
