import typing as tp

from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Horizontal
from textual.widgets import Button, Footer, Header, Static

from .shared import framed
from .config import StopwatchConfig
from .lap_history import LapHistory
from .refresh import RefreshTicker
from .time_format import formatTime
from .timer_state import TimerState

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "toggle", "Start/Stop", priority=True),
        Binding("l", "lap", "Lap", priority=True),
        Binding("r", "reset", "Reset", priority=True),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self, 
        timer: TimerState, 
        config: StopwatchConfig | None = None, 
    ) -> None:
        super().__init__()

        self.timer = timer
        self.config = StopwatchConfig() if config is None else config
        self.ticker = RefreshTicker(
            self.set_interval, self.config.refresh_interval, 
            self.updateDisplay, 
        )

        self.title = self.config.title
    
    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield framed(Static(formatTime(0), id="display"), 'Elapsed')
        with Horizontal(id="controls"):
            yield Button("Start", id="start-btn", variant="success")
            yield Button("Stop",  id="stop-btn",  variant="error")
            yield Button("Lap",   id="lap-btn",   variant="primary")
            yield Button("Reset", id="reset-btn")
        yield framed(LapHistory(id="lap-history"), 'Laps')
        yield Footer(compact=True)
    
    def check_action(
        self, action: str, parameters: tuple[object, ...], 
    ) -> bool | None:
        match action:
            case 'lap':
                return self.timer.is_running
            case 'reset':
                return self.timer.can_reset
            case _:
                return True
    
    def action_toggle(self) -> None:
        if self.timer.is_running:
            self.action_stop()
        else:
            self.action_start()
    
    @on(Button.Pressed, '#start-btn')
    def action_start(self) -> None:
        self.timer.start()
        self.ticker.arm()
        self.myUpdate()
    
    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        self.ticker.disarm()
        self.timer.stop()
        self.myUpdate()
    
    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        if not self.timer.can_reset:
            return
        self.ticker.disarm()
        self.timer.reset()
        self.myUpdate()
    
    @on(Button.Pressed, '#lap-btn')
    def action_lap(self) -> None:
        self.timer.recordLap()
        self.myUpdate()
    
    def on_mount(self) -> None:
        self.myUpdate()
    
    def updateDisplay(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        display: Static = self.query_one('#display', Static)
        display.update(formatTime(self.timer.elapsed()))
    
    def myUpdate(self) -> None:
        self.updateDisplay()
        display: Static = self.query_one('#display', Static)
        display.border_subtitle = self.timer.status.getLabel()
        running = self.timer.is_running
        self.query_one('#start-btn', Button).disabled = running
        self.query_one('#stop-btn',  Button).disabled = not running
        self.query_one('#lap-btn',   Button).disabled = not running
        self.query_one('#reset-btn', Button).disabled = not self.timer.can_reset
        lapHistory: LapHistory = self.query_one('#lap-history', LapHistory)
        lapHistory.data = tuple(self.timer.lap_log.rows())
        self.refresh_bindings()
    
    def exit(
        self, result: tp.Any = None, return_code: int = 0, 
        message: tp.Any = None, 
    ) -> None:
        self.ticker.disarm()
        return super().exit(result, return_code, message)
