from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List


class LogSink:
    """Ring buffer sink that can also append to a transcript file."""

    def __init__(self, capacity: int = 200, file_path: str | Path | None = None) -> None:
        self.capacity = capacity
        self.file_path = Path(file_path) if file_path else None
        self.buffer: List[str] = []
        if self.file_path:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)

    def write(self, line: str) -> None:
        """Record a bare output line."""
        self._append(line)

    def add(self, kind: str, text: str, ts: str) -> None:
        """Record an event with explicit fields."""
        self._append(f"{ts} {kind} - {text}")

    def handle(self, ev: Dict[str, str]) -> None:
        """Subscriber hook for :class:`~skirmish.ui.feedback.FeedbackBus`.

        Only the event text is kept so a transcript reads like the console.
        """
        self.write(ev.get("text", ""))

    def _append(self, line: str) -> None:
        self.buffer.append(line)
        if len(self.buffer) > self.capacity:
            self.buffer = self.buffer[-self.capacity :]
        if self.file_path:
            with open(self.file_path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
                f.flush()
                os.fsync(f.fileno())

    def tail(self, n: int = 100) -> List[str]:
        if n <= 0:
            return []
        return self.buffer[-n:]

    def lines(self) -> List[str]:
        return list(self.buffer)

    def clear(self) -> None:
        self.buffer.clear()
