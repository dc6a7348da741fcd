class PinEntry:
    """
    Host-side PIN buffer for the demo: collects digits from the keypad
    callbacks and checks them against the expected PIN.
    """

    def __init__(self, correct_pin="7329", max_digits=4):
        self.correct_pin = [int(c) for c in str(correct_pin)]
        self.max_digits = max_digits
        self.entered = []
        self.is_correct = None  # None until submitted

    def add_digit(self, digit):
        """Append a digit; ignored once the buffer is full."""
        if len(self.entered) >= self.max_digits:
            return False
        self.entered.append(digit)
        self.is_correct = None
        return True

    def backspace(self):
        """Remove the last digit. Returns False when already empty."""
        self.is_correct = None
        if not self.entered:
            return False
        self.entered.pop()
        return True

    def clear(self):
        self.entered = []
        self.is_correct = None

    @property
    def can_submit(self):
        return len(self.entered) == self.max_digits

    def submit(self):
        self.is_correct = self.entered == self.correct_pin
        return self.is_correct

    def get_display_value(self):
        """Masked value for the PIN dots"""
        return "*" * len(self.entered)
