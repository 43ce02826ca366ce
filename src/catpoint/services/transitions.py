"""
Alarm Status Transition Table

Every alarm status change is looked up by
(current AlarmStatus, TransitionTrigger, ArmingStatus) -> next AlarmStatus.

The table is complete: each combination has an entry, and ``None`` marks a
deliberate "no transition".

  NO_ALARM      --sensor activated (armed)-->        PENDING_ALARM
  PENDING_ALARM --sensor activated (armed)-->        ALARM
  PENDING_ALARM --last active sensor off (armed)-->  NO_ALARM
  any           --cat detected, ARMED_HOME-->        ALARM
  any           --cat detected, DISARMED-->          NO_ALARM
  any           --no cat, no sensor active-->        NO_ALARM
  any           --armed (home or away)-->            ALARM
  any           --disarmed-->                        NO_ALARM
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional, Tuple

from ..domain.enums import AlarmStatus, ArmingStatus


class TransitionTrigger(str, Enum):
    """What triggered the transition lookup."""
    # Sensor triggers
    SENSOR_ACTIVATED = "sensor_activated"
    SENSORS_CLEARED = "sensors_cleared"  # Active sensor deactivated

    # Camera triggers
    CAT_DETECTED = "cat_detected"
    CAT_ABSENT_SENSORS_IDLE = "cat_absent_sensors_idle"

    # Operator actions
    ARMING_CHANGED = "arming_changed"  # Keyed by the new arming status


@dataclass
class TransitionResult:
    """Result of a transition lookup."""
    from_status: AlarmStatus
    to_status: Optional[AlarmStatus]
    trigger: TransitionTrigger
    arming_status: ArmingStatus
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def applies(self) -> bool:
        """True when the table defines a status to write."""
        return self.to_status is not None

    @property
    def changed(self) -> bool:
        """True when the written status differs from the previous one."""
        return self.to_status is not None and self.to_status != self.from_status


TransitionKey = Tuple[AlarmStatus, TransitionTrigger, ArmingStatus]


def _build_table() -> Dict[TransitionKey, Optional[AlarmStatus]]:
    table: Dict[TransitionKey, Optional[AlarmStatus]] = {}

    for current in AlarmStatus:
        for arming in ArmingStatus:
            armed = arming.is_armed

            # Sensor activated: escalate one step while armed
            if not armed:
                activated = None
            elif current == AlarmStatus.NO_ALARM:
                activated = AlarmStatus.PENDING_ALARM
            elif current == AlarmStatus.PENDING_ALARM:
                activated = AlarmStatus.ALARM
            else:
                activated = None
            table[(current, TransitionTrigger.SENSOR_ACTIVATED, arming)] = activated

            # Sensor deactivated: only a pending alarm can clear
            if armed and current == AlarmStatus.PENDING_ALARM:
                cleared = AlarmStatus.NO_ALARM
            else:
                cleared = None
            table[(current, TransitionTrigger.SENSORS_CLEARED, arming)] = cleared

            # Cat detected
            if arming == ArmingStatus.ARMED_HOME:
                cat = AlarmStatus.ALARM
            elif arming == ArmingStatus.DISARMED:
                cat = AlarmStatus.NO_ALARM
            else:
                cat = None
            table[(current, TransitionTrigger.CAT_DETECTED, arming)] = cat

            # No cat and nothing tripped
            table[(current, TransitionTrigger.CAT_ABSENT_SENSORS_IDLE, arming)] = (
                AlarmStatus.NO_ALARM
            )

            # Arming change, keyed by the new arming status
            table[(current, TransitionTrigger.ARMING_CHANGED, arming)] = (
                AlarmStatus.ALARM if armed else AlarmStatus.NO_ALARM
            )

    return table


TRANSITIONS: Dict[TransitionKey, Optional[AlarmStatus]] = _build_table()


def next_alarm_status(
    current: AlarmStatus,
    trigger: TransitionTrigger,
    arming_status: ArmingStatus,
) -> Optional[AlarmStatus]:
    """Look up the alarm status a trigger leads to, or None for no transition."""
    return TRANSITIONS[(AlarmStatus(current), TransitionTrigger(trigger), ArmingStatus(arming_status))]


def evaluate(
    current: AlarmStatus,
    trigger: TransitionTrigger,
    arming_status: ArmingStatus,
    now: Optional[datetime] = None,
) -> TransitionResult:
    """Look up a transition and wrap it in a TransitionResult."""
    current = AlarmStatus(current)
    trigger = TransitionTrigger(trigger)
    arming_status = ArmingStatus(arming_status)
    return TransitionResult(
        from_status=current,
        to_status=next_alarm_status(current, trigger, arming_status),
        trigger=trigger,
        arming_status=arming_status,
        timestamp=now or datetime.now(timezone.utc),
    )
