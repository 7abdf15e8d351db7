import numpy as np


class Operand:
    """
    Tagged operand value.

    An operand is either an *entry* (the raw text typed so far, which may end
    in a bare decimal point like "12.") or *committed* (a parsed float, e.g. a
    computed result). Both kinds expose the same `text` / `number` pair so the
    engine never has to care which one it holds.
    """

    __slots__ = ('_text', '_value')

    def __init__(self, text, value=None):
        self._text = text
        self._value = value

    @classmethod
    def entry(cls, text):
        return cls(text)

    @classmethod
    def committed(cls, value):
        return cls(_number_to_text(value), float(value))

    @property
    def is_committed(self) -> bool:
        return self._value is not None

    @property
    def text(self) -> str:
        return self._text

    @property
    def number(self):
        """Float value, or None if the text is not a number."""
        if self._value is not None:
            return self._value
        try:
            return float(self._text)
        except ValueError:
            return None

    def __eq__(self, other):
        if isinstance(other, Operand):
            return self._text == other._text
        return NotImplemented

    def __hash__(self):
        return hash(self._text)

    def __repr__(self):
        kind = 'committed' if self.is_committed else 'entry'
        return f"Operand.{kind}({self._text!r})"


ZERO = Operand.entry('0')
EMPTY = Operand.entry('')


def _number_to_text(value):
    """Print a float like a calculator does: 8.0 -> '8', 1e-05 -> '0.00001'."""
    return np.format_float_positional(float(value), trim='-')


class CalculatorState:
    """Shared state container for the calculator."""

    def __init__(self):
        self.current = ZERO                 # Operand being entered / last result
        self.previous = EMPTY               # Left-hand operand of the pending operation
        self.operation = None               # One of config.OPERATIONS, or None
        self.result_shown = False           # True right after a successful compute

    @property
    def current_operand(self) -> str:
        return self.current.text

    @property
    def previous_operand(self) -> str:
        return self.previous.text

    def reset(self):
        self.current = ZERO
        self.previous = EMPTY
        self.operation = None
        self.result_shown = False

    def snapshot(self):
        """Plain tuple of the observable state, handy for comparisons."""
        return (self.current.text, self.previous.text, self.operation, self.result_shown)
