from __future__ import annotations

from dataclasses import dataclass
from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict
from textual.widget import Widget

Milliseconds = float

class LapRow(BaseModel):
    ordinal: int    # 1-based
    duration_ms: Milliseconds
    cumulative_ms: Milliseconds

    model_config = ConfigDict(
        frozen=True,
    )

def framed(w: Widget, /, title: str, color: str = '#999') -> Widget:
    '''
    Rounded frame with `title` on the top edge. The bottom edge stays 
    free for a `border_subtitle` set later.  
    '''
    w.styles.border = ('round', color)
    w.styles.padding = (0, 1)
    w.border_title = title
    return w

class TimerStatus:
    class Base(ABC):
        @abstractmethod
        def getLabel(self) -> str:
            raise NotImplementedError()
        
        @property
        @abstractmethod
        def is_running(self) -> bool:
            raise NotImplementedError()
    
    @dataclass(frozen=True)
    class Stopped(Base):
        def getLabel(self) -> str:
            return 'Stopped'
        
        @property
        def is_running(self) -> bool:
            return False
    
    @dataclass(frozen=True)
    class Running(Base):
        anchor: Milliseconds
        '''
        Clock reading, shifted back by whatever had accumulated before 
        the run began, so that `now - anchor` is the total elapsed.  
        '''

        def getLabel(self) -> str:
            return 'Running'
        
        @property
        def is_running(self) -> bool:
            return True
