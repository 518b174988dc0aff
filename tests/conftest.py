"""Shared fixtures: a manually advanced clock and an isolated environment."""

import os

import pytest

from stopwatch_tui.timer_state import TimerState

ENV_NAMES = ("STOPWATCH_REFRESH_INTERVAL", "STOPWATCH_TITLE", "STOPWATCH_LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Run from an empty directory so no stray .env is picked up."""
    monkeypatch.chdir(tmp_path)
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_NAMES:
        os.environ.pop(name, None)


class FakeClock:
    def __init__(self, now: float = 50_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def timer(clock):
    return TimerState(clock=clock)
