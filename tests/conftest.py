import pytest

from logics.computation import CalculatorEngine


class RecordingDisplay:
    """Display sink that keeps the latest text of both lines."""

    def __init__(self):
        self.previous = None
        self.current = None
        self.writes = []

    def show_previous(self, text):
        self.previous = text
        self.writes.append(('previous', text))

    def show_current(self, text):
        self.current = text
        self.writes.append(('current', text))


class ManualScheduler:
    """Collects scheduled callbacks; tests fire them explicitly."""

    def __init__(self):
        self.pending = {}
        self.delays = {}
        self.cancelled = []
        self._next = 0

    def schedule(self, delay_ms, callback):
        self._next += 1
        self.pending[self._next] = callback
        self.delays[self._next] = delay_ms
        return self._next

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire_all(self):
        callbacks = list(self.pending.values())
        self.pending.clear()
        for cb in callbacks:
            cb()


@pytest.fixture
def display():
    return RecordingDisplay()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def engine(display, scheduler):
    return CalculatorEngine(display, scheduler)


def enter(engine, *tokens):
    """
    Feed a sequence of inputs to the engine.

    Numbers are typed digit by digit, operators go to choose_operation,
    '=' computes, 'DEL' deletes, 'AC' clears.
    """
    for token in tokens:
        if token == '=':
            engine.compute()
        elif token == 'DEL':
            engine.delete_last()
        elif token == 'AC':
            engine.clear()
        elif token in ('+', '-', '×', '÷'):
            engine.choose_operation(token)
        else:
            for ch in token:
                engine.append_digit(ch)


@pytest.fixture
def press(engine):
    def _press(*tokens):
        enter(engine, *tokens)
        return engine
    return _press
