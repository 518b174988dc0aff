import typing as tp

from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static
from textual.containers import Horizontal, VerticalScroll

from .shared import LapRow
from .time_format import formatTime

EMPTY_TEXT = 'No laps recorded'

class LapHistory(VerticalScroll):
    data: reactive[tuple[LapRow, ...]] = reactive(tuple)

    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.emptyLabel = Static(EMPTY_TEXT, classes='empty-laps')
    
    def compose(self) -> tp.Iterable[Widget]:
        yield self.emptyLabel
    
    def watch_data(
        self, old_data: tuple[LapRow, ...], new_data: tuple[LapRow, ...], 
    ) -> None:
        if not self.is_mounted:
            return
        self.emptyLabel.display = not new_data
        if new_data[:len(old_data)] != old_data:
            self.query('.lap-item').remove()
            old_data = ()
        rows = [
            self.renderRow(row) for row in new_data[len(old_data):]
        ]
        if rows:
            self.mount_all(rows)
            self.call_after_refresh(self.scroll_end, animate=False)
    
    @staticmethod
    def renderRow(row: LapRow) -> Horizontal:
        return Horizontal(
            Static(f'Lap {row.ordinal}', classes='lap-number'),
            Static(formatTime(row.duration_ms), classes='lap-diff'),
            Static(formatTime(row.cumulative_ms), classes='lap-time'),
            classes='lap-item',
        )
    
    def on_mount(self) -> None:
        self.watch_data((), self.data)
