# -*- coding: utf-8 -*-
"""
Scrambled keypad demo - entry point

A PIN entry screen on top of ScrambledKeypad: PIN dots, the keypad, toggles
for haptics / variable key sizes / smudge markers, and Scramble / Clear.
"""

import sys
import logging
import tkinter as tk
from tkinter import messagebox

from scrambled_keypad.core.config_loader import ConfigLoader
from scrambled_keypad.core.feedback import SoundHaptics
from scrambled_keypad.core.keypad import ScrambledKeypad
from scrambled_keypad.core.keypad_config import KeypadConfig
from scrambled_keypad.core.pin_entry import PinEntry
from scrambled_keypad.ui.keypad_view import KeypadView
from scrambled_keypad.ui.styles import Colors, Fonts, Layout
from scrambled_keypad.ui.tk_scheduler import TkScheduler


class KeypadDemoController:
    """
    Owns the demo window: host PIN state, the keypad component and its view.
    """

    def __init__(self, root):
        self.root = root
        ui_conf = ConfigLoader().ui

        self.pin = PinEntry(
            correct_pin=ui_conf.get("correct_pin", "7329"),
            max_digits=ui_conf.get("max_digits", 4),
        )
        self.scramble_seed = 0

        self.haptics_var = tk.BooleanVar(value=True)
        self.size_variation_var = tk.BooleanVar(value=True)
        self.smudges_var = tk.BooleanVar(value=True)

        self._setup_window(ui_conf)
        self._init_keypad()
        self._build_widgets()
        self.keypad.mount()
        self._refresh()

    def _setup_window(self, ui_conf):
        self.root.title(ui_conf.get("title", "Scrambled Keypad"))
        w = ui_conf.get("window_width", 420)
        h = ui_conf.get("window_height", 720)
        self.root.geometry(f"{w}x{h}")
        self.root.configure(bg=Colors.BACKGROUND)
        self.root.bind("<Escape>", lambda e: self.on_close())

    def _init_keypad(self):
        haptics = SoundHaptics()
        self.keypad = ScrambledKeypad(
            on_key_press=self._on_digit,
            on_delete=self._on_delete,
            on_enter=None,
            include_delete=True,
            include_enter=True,
            enable_haptics=self.haptics_var.get(),
            enable_size_variation=self.size_variation_var.get(),
            config=KeypadConfig.load(),
            scheduler=TkScheduler(self.root),
            haptics=haptics,
        )
        self.haptics = haptics

    def _build_widgets(self):
        pad = Layout.PADDING
        bg = Colors.BACKGROUND

        tk.Label(self.root, text="Enter PIN", font=Fonts.title(), bg=bg).pack(pady=(pad, 4))
        tk.Label(self.root, text=f"Demo password is {''.join(map(str, self.pin.correct_pin))}",
                 font=Fonts.small(), fg=Colors.HINT, bg=bg).pack()

        dots_w = self.pin.max_digits * (Layout.DOT_SIZE + Layout.DOT_GAP)
        self.dots = tk.Canvas(self.root, width=dots_w, height=Layout.DOT_SIZE + 4,
                              bg=bg, highlightthickness=0)
        self.dots.pack(pady=pad)

        self.view = KeypadView(self.root, self.keypad)
        self.view.pack(pady=(0, 12))

        self.result_label = tk.Label(self.root, text="", font=Fonts.body(), bg=bg)
        self.result_label.pack(pady=4)

        toggles = tk.Frame(self.root, bg=bg)
        toggles.pack(pady=8)
        tk.Checkbutton(toggles, text="Haptics", variable=self.haptics_var,
                       command=self._on_haptics_toggle, bg=bg).pack(anchor="w")
        tk.Checkbutton(toggles, text="Variable key sizes", variable=self.size_variation_var,
                       command=self._on_size_variation_toggle, bg=bg).pack(anchor="w")
        tk.Checkbutton(toggles, text="Show smudges", variable=self.smudges_var,
                       command=self._on_smudges_toggle, bg=bg).pack(anchor="w")

        buttons = tk.Frame(self.root, bg=bg)
        buttons.pack(pady=8)
        tk.Button(buttons, text="Scramble", command=self.scramble).pack(side=tk.LEFT, padx=6)
        tk.Button(buttons, text="Clear", command=self.clear).pack(side=tk.LEFT, padx=6)

    # ------------- keypad callbacks -------------
    def _on_digit(self, digit):
        self.pin.add_digit(digit)
        self._refresh()

    def _on_delete(self):
        self.pin.backspace()
        self._refresh()

    def _submit(self):
        self.pin.submit()
        self._refresh()

    # ------------- controls -------------
    def scramble(self):
        self.scramble_seed += 1
        self.keypad.set_scramble_trigger(self.scramble_seed)
        self.pin.clear()
        self._refresh()

    def clear(self):
        self.pin.clear()
        self.view.clear_markers()
        self._refresh()

    def _on_haptics_toggle(self):
        self.keypad.set_haptics(self.haptics_var.get())

    def _on_size_variation_toggle(self):
        self.keypad.set_size_variation(self.size_variation_var.get())

    def _on_smudges_toggle(self):
        self.view.show_markers = self.smudges_var.get()
        self.view.render()

    def _refresh(self):
        """Sync PIN dots, result text and the enter key with the PIN state"""
        enter = self._submit if self.pin.can_submit else None
        if (enter is None) != (self.keypad.on_enter is None):
            self.keypad.set_enter_handler(enter)

        self.dots.delete("all")
        step = Layout.DOT_SIZE + Layout.DOT_GAP
        for i in range(self.pin.max_digits):
            x = Layout.DOT_GAP // 2 + i * step
            fill = Colors.DOT_FILLED if i < len(self.pin.entered) else Colors.DOT_EMPTY
            self.dots.create_oval(x, 2, x + Layout.DOT_SIZE, 2 + Layout.DOT_SIZE,
                                  fill=fill, outline=Colors.DOT_OUTLINE)

        if self.pin.is_correct is None:
            self.result_label.config(text="")
        elif self.pin.is_correct:
            self.result_label.config(text="Correct", fg=Colors.SUCCESS)
        else:
            self.result_label.config(text="Incorrect", fg=Colors.ERROR)

    def on_close(self):
        print("Exiting application...")
        self.view.destroy()
        self.haptics.quit()
        self.root.destroy()


def main():
    """
    Application Entry Point
    """
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        root = tk.Tk()
        app = KeypadDemoController(root)
        root.protocol("WM_DELETE_WINDOW", app.on_close)
        root.mainloop()
        return True

    except Exception as e:
        logging.getLogger(__name__).exception("Keypad demo crashed")
        error_window = tk.Tk()
        error_window.withdraw()
        messagebox.showerror("Error", f"The application stopped because of an error:\n{e}")
        error_window.destroy()
        return False


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
