"""
CatPoint - home security alarm core

Decides whether the premises are safe, pending or alarmed from sensor
activity and camera cat detection, and notifies status listeners.
"""

from .domain import (
    AlarmStatus,
    ArmingStatus,
    SensorType,
    Sensor,
    SecurityRepository,
    InMemorySecurityRepository,
)
from .config import SecurityConfig, load_config
from .services import (
    SecurityService,
    StatusListener,
    CallbackStatusListener,
    CAT_CONFIDENCE_THRESHOLD,
)
from .vision import ImageService, FakeImageService

__version__ = "1.0.0"

__all__ = [
    'AlarmStatus',
    'ArmingStatus',
    'SensorType',
    'Sensor',
    'SecurityRepository',
    'InMemorySecurityRepository',
    'SecurityConfig',
    'load_config',
    'SecurityService',
    'StatusListener',
    'CallbackStatusListener',
    'CAT_CONFIDENCE_THRESHOLD',
    'ImageService',
    'FakeImageService',
]
