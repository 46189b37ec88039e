# temporizador de desligamento do windows
from .model import OutOfRangeError, TimerInputModel

__all__ = ["OutOfRangeError", "TimerInputModel"]
__version__ = "0.2.0"
