from .segment import Segment, new_segment_id
from .spin_config import Easing, SpinConfig, SpinConfigError
from .results import SpinResult
from .wheel import Wheel, WheelDefinitionError, default_wheel, load_wheel
from .history import SegmentTally, SpinHistory
from .constants import (
    DEFAULT_COLORS,
    PRESENTER_KEY_DOWN,
    PRESENTER_KEY_UP,
    default_color,
)

__all__ = [
    "Segment",
    "new_segment_id",
    "Easing",
    "SpinConfig",
    "SpinConfigError",
    "SpinResult",
    "Wheel",
    "WheelDefinitionError",
    "default_wheel",
    "load_wheel",
    "SegmentTally",
    "SpinHistory",
    "DEFAULT_COLORS",
    "PRESENTER_KEY_DOWN",
    "PRESENTER_KEY_UP",
    "default_color",
]
