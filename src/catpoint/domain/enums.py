"""
CatPoint Core Enums

Alarm status, arming status and sensor type enumerations shared by the
repository, the security service and status listeners.
"""

from enum import Enum


# =============================================================================
# Alarm Status (State Machine States)
# =============================================================================

class AlarmStatus(str, Enum):
    """Current assessed threat level.

    Only the security service changes it.
    """
    NO_ALARM = "no_alarm"            # Premises safe
    PENDING_ALARM = "pending_alarm"  # One sensor tripped while armed
    ALARM = "alarm"                  # Full alarm


# =============================================================================
# Arming Status
# =============================================================================

class ArmingStatus(str, Enum):
    """Operator-selected monitoring mode."""
    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def is_armed(self) -> bool:
        return self != ArmingStatus.DISARMED


# =============================================================================
# Sensor Type
# =============================================================================

class SensorType(str, Enum):
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"
