from scrambled_keypad.core.interfaces import IScheduler


class TkScheduler(IScheduler):
    """Scramble timers on the tkinter event loop (root.after)."""

    def __init__(self, root):
        self.root = root

    def call_later(self, delay_ms, callback):
        return self.root.after(int(delay_ms), callback)

    def cancel(self, handle):
        self.root.after_cancel(handle)
