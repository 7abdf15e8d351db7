import tkinter as tk
from tkinter import ttk

from logics import config
from logics.input_adapter import CLEAR_LABEL, DELETE_LABEL, EQUALS_LABEL


KEYPAD_LAYOUT = [
    [CLEAR_LABEL, DELETE_LABEL, config.OP_DIV],
    ['7', '8', '9', config.OP_MUL],
    ['4', '5', '6', config.OP_SUB],
    ['1', '2', '3', config.OP_ADD],
    ['.', '0', EQUALS_LABEL],
]

# Buttons spanning two grid columns
_WIDE_BUTTONS = {CLEAR_LABEL, EQUALS_LABEL}


class DisplayPanel(tk.Frame):
    """
    Two-line calculator display.

    The upper line shows the pending operation or the finished equation,
    the lower line the operand being entered or the result. Implements the
    display sink used by CalculatorEngine.

    Example:
        panel = DisplayPanel(root)
        panel.pack(fill='x')
        panel.show_previous('1,234 +')
        panel.show_current('56')
    """

    def __init__(self, parent):
        super().__init__(parent, bg=config.DISPLAY_BG, padx=12, pady=10)
        self._previous_var = tk.StringVar()
        self._current_var = tk.StringVar(value='0')

        tk.Label(
            self, textvariable=self._previous_var, font=config.PREVIOUS_FONT,
            fg=config.PREVIOUS_FG, bg=config.DISPLAY_BG, anchor='e',
        ).pack(fill='x')
        tk.Label(
            self, textvariable=self._current_var, font=config.CURRENT_FONT,
            fg=config.CURRENT_FG, bg=config.DISPLAY_BG, anchor='e',
        ).pack(fill='x')

    # ── Display sink ──────────────────────────────────────────

    def show_previous(self, text):
        self._previous_var.set(text)

    def show_current(self, text):
        self._current_var.set(text)

    @property
    def previous_text(self) -> str:
        return self._previous_var.get()

    @property
    def current_text(self) -> str:
        return self._current_var.get()


class Keypad(tk.Frame):
    """
    Grid of calculator buttons.

    Args:
        parent: Parent widget.
        on_press: callable(label) invoked with the button label on click.
    """

    def __init__(self, parent, *, on_press):
        super().__init__(parent, bg=config.BG_COLOR, padx=6, pady=6)
        self._on_press = on_press
        self.buttons = {}

        for row, labels in enumerate(KEYPAD_LAYOUT):
            col = 0
            for label in labels:
                span = 2 if label in _WIDE_BUTTONS else 1
                btn = tk.Button(
                    self, text=label, font=config.BUTTON_FONT,
                    bg=self._color_for(label), fg=config.CURRENT_FG,
                    activebackground=config.SPECIAL_BG, relief='flat',
                    command=lambda lbl=label: self._on_press(lbl),
                )
                btn.grid(row=row, column=col, columnspan=span, sticky='nsew', padx=3, pady=3)
                self.buttons[label] = btn
                col += span

        for col in range(4):
            self.columnconfigure(col, weight=1, uniform='keys')
        for row in range(len(KEYPAD_LAYOUT)):
            self.rowconfigure(row, weight=1, uniform='keys')

    @staticmethod
    def _color_for(label):
        if label in config.OPERATIONS or label == EQUALS_LABEL:
            return config.OPERATOR_BG
        if label in (CLEAR_LABEL, DELETE_LABEL):
            return config.SPECIAL_BG
        return config.BUTTON_BG


class MuteToggle(ttk.Checkbutton):
    """Checkbox bound to Synthesizer.muted."""

    def __init__(self, parent, synth):
        self._synth = synth
        self._var = tk.BooleanVar(value=synth.muted)
        super().__init__(parent, text="Mute", variable=self._var, command=self._toggle)

    def _toggle(self):
        self._synth.muted = self._var.get()
