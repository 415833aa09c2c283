import pytest

from services.typing_engine import TypingEngine


class FakeScheduler:
    """Collects scheduled callbacks; tests fire them by hand."""

    def __init__(self):
        self.active = {}
        self.cancelled = []
        self._next = 0

    def schedule_every_second(self, callback):
        self._next += 1
        self.active[self._next] = callback
        return self._next

    def cancel(self, handle):
        self.active.pop(handle, None)
        self.cancelled.append(handle)

    def fire(self, times=1):
        for _ in range(times):
            for cb in list(self.active.values()):
                cb()


class FixedText:
    def __init__(self, text="cat dog"):
        self.text = text
        self.requested = []

    def __call__(self, size):
        self.requested.append(size)
        return self.text


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def text_source():
    return FixedText("cat dog")


@pytest.fixture
def engine(text_source, scheduler):
    eng = TypingEngine(text_source, scheduler)
    eng.create_new_game(2)
    return eng


@pytest.fixture
def other_scheduler():
    return FakeScheduler()
