import logging
import time
import typing as tp

from .shared import TimerStatus, Milliseconds
from .lap_log import LapLog

log = logging.getLogger(__name__)

Clock = tp.Callable[[], Milliseconds]

def perfCounterMs() -> Milliseconds:
    return time.perf_counter() * 1000

class TimerState:
    '''
    Owns the accumulated duration, the run status and the lap log.  
    Every command is total: calling it in the "wrong" status is a no-op.  
    The clock is assumed monotonic. A backward jump shows up as a 
    transient decrease of `elapsed()` and is not corrected.  
    '''

    def __init__(
        self, clock: Clock = perfCounterMs, lap_log: LapLog | None = None, 
    ) -> None:
        self.clock = clock
        self.lap_log = LapLog() if lap_log is None else lap_log
        self.status: TimerStatus.Base = TimerStatus.Stopped()
        self.accumulated_ms: Milliseconds = 0.0
    
    @property
    def is_running(self) -> bool:
        return self.status.is_running
    
    @property
    def can_reset(self) -> bool:
        return not self.is_running and (
            self.accumulated_ms > 0.0 or len(self.lap_log) > 0
        )

    def start(self) -> None:
        if self.is_running:
            return
        self.status = TimerStatus.Running(
            anchor=self.clock() - self.accumulated_ms,
        )
        log.debug('started at %.1f ms', self.accumulated_ms)
    
    def stop(self) -> None:
        match self.status:
            case TimerStatus.Running(anchor=anchor):
                self.accumulated_ms = self.clock() - anchor
            case _:
                return
        self.status = TimerStatus.Stopped()
        log.debug('stopped at %.1f ms', self.accumulated_ms)
    
    def reset(self) -> None:
        self.stop()
        self.accumulated_ms = 0.0
        self.lap_log.clear()
        log.debug('reset')
    
    def elapsed(self) -> Milliseconds:
        match self.status:
            case TimerStatus.Running(anchor=anchor):
                return self.clock() - anchor
            case _:
                return self.accumulated_ms
    
    def recordLap(self) -> None:
        if not self.is_running:
            return
        self.lap_log.record(self.elapsed())
        log.debug('lap %d recorded', len(self.lap_log))
    
    def lapEntries(self) -> tuple[Milliseconds, ...]:
        return self.lap_log.entries
