import tkinter as tk
from tkinter import ttk

from logics import config
from logics.computation import CalculatorEngine
from logics.input_adapter import InputAdapter
from logics.synth import Synthesizer

from UIs.widgets import DisplayPanel, Keypad, MuteToggle


class TkScheduler:
    """Runs deferred engine callbacks on the Tk event loop."""

    def __init__(self, root):
        self.root = root

    def schedule(self, delay_ms, callback):
        return self.root.after(delay_ms, callback)

    def cancel(self, handle):
        self.root.after_cancel(handle)


class CalculatorApp:
    """Main window: display, keypad and keyboard bindings around one engine."""

    def __init__(self, root, synth=None):
        self.root = root
        self.root.title(config.WINDOW_TITLE)
        self.root.geometry(config.WINDOW_GEOMETRY)
        self.root.configure(bg=config.BG_COLOR)
        self.root.minsize(280, 420)

        self.synth = synth if synth is not None else Synthesizer()

        self._build_ui()

        self.engine = CalculatorEngine(self.display, TkScheduler(self.root))
        self.adapter = InputAdapter(self.engine, self.synth)

        self.root.bind('<Key>', self._on_key)

    # ── Layout ──────────────────────────────────────────────

    def _build_ui(self):
        self.display = DisplayPanel(self.root)
        self.display.pack(fill='x', padx=8, pady=(8, 4))

        self.keypad = Keypad(self.root, on_press=self._on_button)
        self.keypad.pack(fill='both', expand=True, padx=8)

        footer = tk.Frame(self.root, bg=config.BG_COLOR)
        footer.pack(fill='x', padx=8, pady=(0, 8))
        MuteToggle(footer, self.synth).pack(side='right')
        ttk.Label(footer, text="Esc: clear   Backspace: delete   Enter: =").pack(side='left')

    # ── Input callbacks ─────────────────────────────────────

    def _on_button(self, label):
        self.adapter.press_button(label)

    def _on_key(self, event):
        if self.adapter.press_key(event.char, event.keysym):
            # Keep Enter/Backspace from also activating a focused button
            return 'break'
        return None
