import logging
import typing as tp

from .shared import LapRow, Milliseconds

log = logging.getLogger(__name__)

class LapLog:
    '''
    Cumulative elapsed-time snapshots, one per recorded lap.  
    Per-lap durations are derived from consecutive entries on every 
    call and never stored.  
    '''

    def __init__(self) -> None:
        self.__entries: list[Milliseconds] = []
    
    def record(self, current_elapsed: Milliseconds) -> None:
        # Only reachable with a clock that jumped backwards.
        if self.__entries and current_elapsed < self.__entries[-1]:
            log.debug(
                'dropped out-of-order lap at %.1f ms', current_elapsed, 
            )
            return
        self.__entries.append(current_elapsed)
    
    def clear(self) -> None:
        self.__entries.clear()
    
    @property
    def entries(self) -> tuple[Milliseconds, ...]:
        return tuple(self.__entries)
    
    def __len__(self) -> int:
        return len(self.__entries)
    
    def lapDurations(self) -> tp.Iterator[Milliseconds]:
        previous = 0.0
        for cumulative in self.__entries:
            yield cumulative - previous
            previous = cumulative
    
    def rows(self) -> tp.Iterator[LapRow]:
        for i, (duration, cumulative) in enumerate(zip(
            self.lapDurations(), self.__entries, 
        )):
            yield LapRow(
                ordinal=i + 1,
                duration_ms=duration,
                cumulative_ms=cumulative,
            )
