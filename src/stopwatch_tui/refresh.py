import logging
import typing as tp

log = logging.getLogger(__name__)

class CancelToken(tp.Protocol):
    def stop(self) -> None:
        ...

Schedule = tp.Callable[[float, tp.Callable[[], None]], CancelToken]

class RefreshTicker:
    def __init__(
        self, schedule: Schedule, interval: float, 
        callback: tp.Callable[[], None], 
    ) -> None:
        '''
        `schedule(interval, callback)` must arm a recurring call and 
        return a token whose `stop()` cancels it, e.g. Textual's 
        `App.set_interval`.  
        '''
        self.schedule = schedule
        self.interval = interval
        self.callback = callback
        self.token: CancelToken | None = None
    
    @property
    def is_armed(self) -> bool:
        return self.token is not None
    
    def arm(self) -> None:
        if self.token is not None:
            return
        self.token = self.schedule(self.interval, self.callback)
        log.debug('refresh armed every %.3f s', self.interval)
    
    def disarm(self) -> None:
        token = self.token
        if token is None:
            return
        self.token = None
        token.stop()
        log.debug('refresh disarmed')
