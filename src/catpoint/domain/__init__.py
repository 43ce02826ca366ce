"""CatPoint Domain Models"""

from .enums import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
)

from .models import Sensor

from .repository import (
    SecurityRepository,
    InMemorySecurityRepository,
)

__all__ = [
    # Enums
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',

    # Models
    'Sensor',

    # Repository
    'SecurityRepository',
    'InMemorySecurityRepository',
]
