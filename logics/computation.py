import math
import numpy as np

from logics import config
from logics.data_model import CalculatorState, Operand, EMPTY, ZERO


class CalculationError(Exception):
    """Raised by the arithmetic helper when an operation has no finite result."""
    pass


class DivisionByZero(CalculationError):
    """Raised by the arithmetic helper when the divisor is exactly zero."""
    pass


def apply_operation(operation, left, right):
    """
    Apply a binary operation to two floats and round the result.

    Rounding is to config.ROUND_DECIMALS places, half away from zero, which
    hides binary floating point noise such as 0.1 + 0.2 = 0.30000000000000004.

    Raises:
        DivisionByZero: operation is ÷ and right is 0.
        CalculationError: the result is not finite (overflow).
    """
    if operation == config.OP_ADD:
        value = left + right
    elif operation == config.OP_SUB:
        value = left - right
    elif operation == config.OP_MUL:
        value = left * right
    elif operation == config.OP_DIV:
        if right == 0:
            raise DivisionByZero(f"{left} {operation} {right}")
        value = left / right
    else:
        raise ValueError(f"Unknown operation: {operation!r}")

    if not math.isfinite(value):
        raise CalculationError(f"{left} {operation} {right} is not finite")
    return round_half_away(value)


def round_half_away(value, decimals=config.ROUND_DECIMALS):
    """round(value * 10**decimals) / 10**decimals, ties away from zero."""
    if abs(value) >= 2 ** 52:
        # Already integral, and scaling could overflow
        return float(value)
    scale = 10 ** decimals
    rounded = np.sign(value) * np.floor(np.abs(value) * scale + 0.5) / scale
    # Keep -0.0 out of the display
    return float(rounded) + 0.0


def format_for_display(value, separator=config.THOUSANDS_SEP):
    """
    Group the integer part of a numeric string with thousands separators.

    The fractional part, if present, is reattached untouched, so an operand
    still being typed ("12.", "0.50") keeps its trailing characters.
    A non-numeric integer part (e.g. the empty operand) formats as ''.

    Examples:
        format_for_display('1234.5')  -> '1,234.5'
        format_for_display('1000000') -> '1,000,000'
        format_for_display('-0.25')   -> '-0.25'
        format_for_display('')        -> ''
    """
    text = str(value)
    integer_part, dot, decimal_part = text.partition('.')

    # int() of the digit string is exact, so long operands keep every digit
    sign = '-' if integer_part.startswith('-') else ''
    try:
        grouped = f"{int(integer_part.lstrip('-')):,}".replace(',', separator)
        integer_display = sign + grouped
    except ValueError:
        integer_display = ''

    if dot:
        return f"{integer_display}.{decimal_part}"
    return integer_display


class CalculatorEngine:
    """
    Single-operation calculator state machine.

    The engine owns a CalculatorState and writes to a display sink:
        display.show_previous(text)   - pending operation / equation line
        display.show_current(text)    - operand being entered / result

    Deferred work (the automatic reset after a division by zero) goes through
    a scheduler:
        handle = scheduler.schedule(delay_ms, callback)
        scheduler.cancel(handle)

    In the GUI both are backed by Tk (StringVars and root.after), tests use
    plain recording objects.
    """

    def __init__(self, display, scheduler, error_reset_ms=config.ERROR_RESET_MS):
        self.display = display
        self.scheduler = scheduler
        self.error_reset_ms = error_reset_ms
        self.state = CalculatorState()
        self._pending_reset = None

        self.clear()

    # ── State shortcuts ─────────────────────────────────────

    @property
    def current_operand(self) -> str:
        return self.state.current_operand

    @property
    def previous_operand(self) -> str:
        return self.state.previous_operand

    @property
    def operation(self):
        return self.state.operation

    @property
    def result_shown(self) -> bool:
        return self.state.result_shown

    @property
    def in_error(self) -> bool:
        """True while the error indicator is up and its reset is pending."""
        return self._pending_reset is not None

    # ── Operations ──────────────────────────────────────────

    def clear(self):
        self._cancel_pending_reset()
        self.state.reset()
        self.refresh_display()

    def delete_last(self):
        self._recover_from_error()
        if self.state.result_shown:
            return
        text = self.state.current.text[:-1]
        self.state.current = Operand.entry(text) if text else ZERO
        self.refresh_display()

    def append_digit(self, token):
        self._recover_from_error()
        token = str(token)
        if len(token) != 1 or token not in '0123456789.':
            return

        state = self.state
        if state.result_shown:
            state.current = Operand.entry('0.' if token == '.' else token)
            state.result_shown = False
        else:
            text = state.current.text
            if token == '.' and '.' in text:
                return
            if text == '0' and token != '.':
                state.current = Operand.entry(token)
            else:
                state.current = Operand.entry(text + token)
        self.refresh_display()

    def choose_operation(self, operation):
        self._recover_from_error()
        operation = config.OPERATOR_ALIASES.get(operation, operation)
        if operation not in config.OPERATIONS:
            return

        state = self.state
        if state.current.text == '0' and state.previous.text == '':
            return

        # Chain: 5 + 3 + ... evaluates 5 + 3 first
        if state.previous.text != '' and not state.result_shown:
            self.compute()
            if self.in_error:
                return

        state.operation = operation
        state.previous = state.current
        state.current = ZERO
        state.result_shown = False
        self.refresh_display()

    def compute(self):
        """
        Apply the pending operation and write the equation and result.

        Does nothing without a pending operation or with an operand that does
        not parse. A division by zero (or an overflowing result) puts the
        error indicator up and schedules a full clear instead.
        """
        self._recover_from_error()
        state = self.state
        left = state.previous.number
        right = state.current.number
        if state.operation is None or left is None or right is None:
            return

        try:
            result = apply_operation(state.operation, left, right)
        except CalculationError as e:
            print(f"[ENGINE] {type(e).__name__}: {e} -> {config.ERROR_TEXT}")
            self._show_error()
            return

        self.display.show_previous(
            f"{format_for_display(state.previous.text)} {state.operation} "
            f"{format_for_display(state.current.text)} ="
        )
        committed = Operand.committed(result)
        self.display.show_current(format_for_display(committed.text))

        state.current = committed
        state.previous = EMPTY
        state.operation = None
        state.result_shown = True

    def refresh_display(self):
        state = self.state
        if state.result_shown:
            return

        self.display.show_current(format_for_display(state.current.text))
        if state.operation is not None:
            self.display.show_previous(f"{format_for_display(state.previous.text)} {state.operation}")
        else:
            self.display.show_previous('')

    # ── Error window ────────────────────────────────────────

    def _show_error(self):
        self.display.show_current(config.ERROR_TEXT)
        self._cancel_pending_reset()
        self._pending_reset = self.scheduler.schedule(self.error_reset_ms, self._auto_clear)

    def _auto_clear(self):
        self._pending_reset = None
        self.clear()

    def _recover_from_error(self):
        """New input during the error window resets right away instead of waiting for the timer."""
        if self._pending_reset is None:
            return
        self._cancel_pending_reset()
        self.state.reset()
        self.refresh_display()

    def _cancel_pending_reset(self):
        if self._pending_reset is not None:
            self.scheduler.cancel(self._pending_reset)
            self._pending_reset = None
