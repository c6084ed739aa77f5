from __future__ import annotations

from typing import Any, Callable

import pytest

from loog import config as loog_config
from loog import runtime
from loog.application.ports.sink import LineSink
from loog.logger import Loog


class RecordingSink(LineSink):
    """In-memory sink keeping lines and control sequences in write order."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.controls: list[str] = []
        self.writes: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)
        self.writes.append(line)

    def write_control(self, sequence: str) -> None:
        self.controls.append(sequence)
        self.writes.append(sequence)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Give every test environment-free defaults and no default logger."""

    for name in (loog_config.LOG_LEVEL_ENV_VAR, loog_config.LEGACY_LOG_LEVEL_ENV_VAR, loog_config.NO_COLOR_ENV_VAR):
        monkeypatch.delenv(name, raising=False)
    loog_config._reset_defaults_for_testing()
    runtime.reset()
    yield
    runtime.reset()
    loog_config._reset_defaults_for_testing()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_logger(recording_sink: RecordingSink) -> Callable[..., Loog]:
    """Build loggers writing to the shared ``recording_sink``."""

    def factory(**options: Any) -> Loog:
        options.setdefault("sink", recording_sink)
        return runtime.create(**options)

    return factory
