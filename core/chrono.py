# core/chrono.py
from __future__ import annotations
from typing import Any, Callable, Protocol

from PySide6.QtCore import QObject, QTimer


class Scheduler(Protocol):
    def schedule_every_second(self, callback: Callable[[], None]) -> Any: ...

    def cancel(self, handle: Any) -> None: ...


class QtScheduler(QObject):
    """One-second ticks on the Qt event loop. Each handle is its own QTimer."""

    def __init__(self, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._interval_ms = interval_ms

    def schedule_every_second(self, callback: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return timer

    def cancel(self, handle: QTimer) -> None:
        if handle is None:
            return
        handle.stop()
        handle.timeout.disconnect()
        handle.deleteLater()
