"""CatPoint Services"""

from .transitions import (
    TRANSITIONS,
    TransitionResult,
    TransitionTrigger,
    evaluate,
    next_alarm_status,
)
from .status_listener import (
    StatusListener,
    CallbackStatusListener,
)
from .security_service import (
    SecurityService,
    CAT_CONFIDENCE_THRESHOLD,
)

__all__ = [
    # Transition table
    'TRANSITIONS',
    'TransitionResult',
    'TransitionTrigger',
    'evaluate',
    'next_alarm_status',
    # Listeners
    'StatusListener',
    'CallbackStatusListener',
    # Security Service
    'SecurityService',
    'CAT_CONFIDENCE_THRESHOLD',
]
