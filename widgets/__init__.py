from .scheduler import QtFrameScheduler
from .wheel import WheelWidget
from .sounds import SoundsManager
from .window import SpinWindow

__all__ = ["QtFrameScheduler", "SoundsManager", "SpinWindow", "WheelWidget"]
