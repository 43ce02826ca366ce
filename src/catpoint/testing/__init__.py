"""Test fixtures and standard configurations"""

from .standard_config import (
    create_standard_test_sensors,
    create_standard_test_config,
)

__all__ = [
    'create_standard_test_sensors',
    'create_standard_test_config',
]
