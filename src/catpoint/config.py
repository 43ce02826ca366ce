"""
Security Configuration

Seed state for a security system: initial arming/alarm status, the sensor
layout and the transition history size. Loaded from JSON and validated with
Pydantic.
"""

import logging
from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field

from .domain.enums import AlarmStatus, ArmingStatus
from .domain.models import Sensor

logger = logging.getLogger(__name__)


class SecurityConfig(BaseModel):
    """Configuration snapshot used to seed a repository and service."""
    arming_status: ArmingStatus = ArmingStatus.DISARMED
    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM
    sensors: list[Sensor] = Field(default_factory=list)

    # Transition history bound
    history_size: int = Field(default=100, ge=1)


def load_config(path: Union[str, Path]) -> SecurityConfig:
    """Load a SecurityConfig from a JSON file.

    Raises:
        FileNotFoundError: if the file does not exist
        pydantic.ValidationError: if the content is malformed
    """
    path = Path(path)
    config = SecurityConfig.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(
        "Loaded security config from %s: %d sensors, %s/%s",
        path,
        len(config.sensors),
        config.arming_status.value,
        config.alarm_status.value,
    )
    return config
