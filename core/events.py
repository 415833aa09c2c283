# core/events.py
from __future__ import annotations
import logging
from typing import Callable, List

log = logging.getLogger(__name__)


class ObserverRegistry:
    """
    Ordered list of callbacks. emit() calls them in subscription order;
    a callback that raises is logged and the rest still run.
    """

    def __init__(self, name: str = "observer"):
        self.name = name
        self._callbacks: List[Callable] = []

    def subscribe(self, cb: Callable) -> Callable[[], None]:
        self._callbacks.append(cb)
        done = False

        def unsubscribe():
            nonlocal done
            if done:
                return
            done = True
            for i, c in enumerate(self._callbacks):
                if c is cb:
                    del self._callbacks[i]
                    return

        return unsubscribe

    def emit(self, *args) -> None:
        for cb in list(self._callbacks):
            try:
                cb(*args)
            except Exception:
                log.exception("%s callback %r failed", self.name, cb)

    def __len__(self) -> int:
        return len(self._callbacks)
