from .UI import UI as StopwatchUI
from .config import StopwatchConfig
from .lap_log import LapLog
from .time_format import formatTime
from .timer_state import TimerState

__version__ = '0.1.0'

__all__ = ["StopwatchUI", "StopwatchConfig", "LapLog", "formatTime", "TimerState"]
