from collections import namedtuple

from logics import config


Action = namedtuple('Action', ['category', 'argument'])

DIGIT_TOKENS = '0123456789.'

CLEAR_LABEL = 'AC'
DELETE_LABEL = 'DEL'
EQUALS_LABEL = '='

# Tk keysyms that do not come with a usable event.char
_KEYSYM_ACTIONS = {
    'Return': Action('equals', None),
    'KP_Enter': Action('equals', None),
    'BackSpace': Action('delete', None),
    'Escape': Action('clear', None),
    'KP_Add': Action('operator', config.OP_ADD),
    'KP_Subtract': Action('operator', config.OP_SUB),
    'KP_Multiply': Action('operator', config.OP_MUL),
    'KP_Divide': Action('operator', config.OP_DIV),
    'KP_Decimal': Action('digit', '.'),
}


def _resolve_char(char):
    if not char or len(char) != 1:
        return None
    if char in DIGIT_TOKENS:
        return Action('digit', char)
    if char in ('=', '\r', '\n'):
        return Action('equals', None)
    if char in ('+', '-', '*', '/'):
        return Action('operator', config.OPERATOR_ALIASES.get(char, char))
    return None


def resolve_key(char, keysym=None):
    """
    Map a key press to an Action, or None if the key does nothing.

    Args:
        char: Typed character (Tk event.char), may be '' for special keys.
        keysym: Key name (Tk event.keysym), e.g. 'Return', 'BackSpace', 'KP_5'.
    """
    if keysym in _KEYSYM_ACTIONS:
        return _KEYSYM_ACTIONS[keysym]
    if keysym and keysym.startswith('KP_') and keysym[3:].isdigit():
        return Action('digit', keysym[3:])
    # Browser-style key names
    if char in ('Enter',):
        return Action('equals', None)
    if char in ('Backspace',):
        return Action('delete', None)
    if char in ('Escape',):
        return Action('clear', None)
    return _resolve_char(char)


def resolve_button(label):
    """Map a keypad button label to an Action."""
    if label == CLEAR_LABEL:
        return Action('clear', None)
    if label == DELETE_LABEL:
        return Action('delete', None)
    if label == EQUALS_LABEL:
        return Action('equals', None)
    if label in config.OPERATIONS:
        return Action('operator', label)
    if label in DIGIT_TOKENS:
        return Action('digit', label)
    raise ValueError(f"Unknown button label: {label!r}")


class InputAdapter:
    """Routes resolved actions to the engine, with a tone per action category."""

    def __init__(self, engine, synth=None):
        self.engine = engine
        self.synth = synth

    def press_button(self, label):
        self.dispatch(resolve_button(label))

    def press_key(self, char, keysym=None) -> bool:
        """Handle a key press. Returns True if the key was used."""
        action = resolve_key(char, keysym)
        if action is None:
            return False
        self.dispatch(action)
        return True

    def dispatch(self, action):
        if self.synth is not None:
            self.synth.play_category(action.category)

        if action.category == 'digit':
            self.engine.append_digit(action.argument)
        elif action.category == 'operator':
            self.engine.choose_operation(action.argument)
        elif action.category == 'equals':
            self.engine.compute()
        elif action.category == 'clear':
            self.engine.clear()
        elif action.category == 'delete':
            self.engine.delete_last()
        else:
            raise ValueError(f"Unknown action category: {action.category!r}")
