from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Callable, Dict, List, Protocol, TextIO

LOG = logging.getLogger(__name__)


class LineSink(Protocol):
    """Append-only text output. Entities and the dispatcher write through this."""

    def write(self, line: str) -> None: ...


class ConsoleSink:
    """Print each line to a stream (``sys.stdout`` unless told otherwise)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def write(self, line: str) -> None:
        # Resolve stdout lazily so redirect_stdout/capsys see the output.
        print(line, file=self._stream or sys.stdout)

    def handle(self, ev: Dict[str, str]) -> None:
        """Subscriber hook for :class:`FeedbackBus`."""
        self.write(ev.get("text", ""))


class FeedbackBus:
    """Simple feedback event bus."""

    def __init__(self) -> None:
        self._queue: List[Dict[str, str]] = []
        self._subs: List[Callable[[Dict[str, str]], None]] = []

    def push(self, kind: str, text: str, **meta) -> None:
        event: Dict[str, str] = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "kind": kind,
            "text": text,
        }
        if meta:
            event.update(meta)
        self._queue.append(event)
        for fn in self._subs:
            try:
                fn(event)
            except Exception:
                LOG.exception("Feedback subscriber %r failed on %s event", fn, kind)

    def write(self, line: str) -> None:
        self.push("ACTION", line)

    def drain(self) -> List[Dict[str, str]]:
        events = list(self._queue)
        self._queue.clear()
        return events

    def subscribe(self, listener: Callable[[Dict[str, str]], None]) -> None:
        self._subs.append(listener)
