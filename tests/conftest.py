from __future__ import annotations

import pytest

from skirmish.game.roster import default_roster
from skirmish.ui.logsink import LogSink

_ENV_VARS = (
    "SKIRMISH_FALLBACK",
    "SKIRMISH_HEADINGS",
    "SKIRMISH_TRANSCRIPT",
    "SKIRMISH_LOGGING",
    "SKIRMISH_DEBUG",
    "SKIRMISH_LOG_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sink() -> LogSink:
    return LogSink(capacity=1000)


@pytest.fixture
def roster(sink: LogSink):
    return default_roster(sink)
