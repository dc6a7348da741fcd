"""
ScrambledKeypad - the keypad component instance.

Owns the shown digit order, the layout rows and the scramble offsets, and
routes key presses to the host callbacks. Rendering is left to a view that
subscribes with add_listener().

Responsibilities:
  - Shuffle digits on mount (optional) and after every completed scramble
  - Recompute rows on mount, on the size-variation toggle, after a scramble
  - Start one scramble cycle per change of the scramble trigger value
  - Gate delete/enter on the presence of their callbacks
"""
import logging
from dataclasses import replace
from typing import Callable, List, Optional

from scrambled_keypad.core.digit_source import DEFAULT_DIGITS, shuffled_digits
from scrambled_keypad.core.interfaces import IHapticsEngine, IScheduler, NullHaptics
from scrambled_keypad.core.keypad_config import KeypadConfig
from scrambled_keypad.core.keys import Key, KeyKind, Offset, Row, build_keys
from scrambled_keypad.core.layout_engine import LayoutEngine
from scrambled_keypad.core.scheduler import ManualScheduler
from scrambled_keypad.core.scramble_sequencer import ScrambleSequencer

# Listener transition for changes that only affect key styling (enabled state)
RESTYLE = "restyle"


class ScrambledKeypad:

    def __init__(self, on_key_press: Callable[[int], None],
                 on_delete: Optional[Callable[[], None]] = None,
                 on_enter: Optional[Callable[[], None]] = None,
                 column_count: Optional[int] = None,
                 spacing: Optional[float] = None,
                 include_delete: bool = True,
                 include_enter: bool = False,
                 enable_haptics: bool = False,
                 enable_size_variation: bool = False,
                 shuffle_on_appear: bool = True,
                 scramble_trigger: int = 0,
                 config: Optional[KeypadConfig] = None,
                 scheduler: Optional[IScheduler] = None,
                 rng=None,
                 haptics: Optional[IHapticsEngine] = None,
                 digit_set=DEFAULT_DIGITS):
        """
        Args:
            on_key_press: called with the digit value of a pressed digit key.
            on_delete: delete handler; None disables the delete key.
            on_enter: enter handler; None disables the enter key.
            column_count, spacing: override the matching config values.
            scheduler: timer source for the scramble cycle. Defaults to a
                ManualScheduler, which only fires when advanced.
            rng: random.Random shared by the digit, span and offset draws.
            haptics: vibrate() collaborator; silent by default.
        """
        self.logger = logging.getLogger(__name__)

        config = config or KeypadConfig()
        overrides = {}
        if column_count is not None:
            overrides["column_count"] = max(1, column_count)
        if spacing is not None:
            overrides["spacing"] = spacing
        self.config = replace(config, **overrides) if overrides else config

        self.on_key_press = on_key_press
        self.on_delete = on_delete
        self.on_enter = on_enter
        self.include_delete = include_delete
        self.include_enter = include_enter
        self.enable_haptics = enable_haptics
        self.enable_size_variation = enable_size_variation
        self.shuffle_on_appear = shuffle_on_appear
        self.scramble_trigger = scramble_trigger

        self.rng = rng
        self.digit_set = tuple(digit_set)
        self.scheduler = scheduler or ManualScheduler()
        self.haptics = haptics or NullHaptics()
        self.layout = LayoutEngine(rng=rng)
        self.sequencer = ScrambleSequencer(
            self.scheduler, self.config, rng=rng,
            on_change=self._on_sequencer_change,
        )

        self.digits: List[int] = shuffled_digits(self.digit_set, rng)
        self.rows: List[Row] = []
        self.is_mounted = False
        self._listeners = []

    # ------------- read-only views -------------
    @property
    def keys(self) -> List[Key]:
        return build_keys(self.digits, self.include_delete, self.include_enter)

    @property
    def offsets(self):
        return self.sequencer.offsets

    @property
    def phase(self):
        return self.sequencer.phase

    @property
    def row_units(self) -> int:
        return self.layout.last_row_units

    def offset_for(self, key: Key) -> Offset:
        return self.sequencer.offset_for(key.id)

    def is_enabled(self, key: Key) -> bool:
        if key.kind is KeyKind.DELETE:
            return self.on_delete is not None
        if key.kind is KeyKind.ENTER:
            return self.on_enter is not None
        return True

    # ------------- lifecycle -------------
    def add_listener(self, callback):
        """
        callback(keypad, transition) after every visible change. transition
        is "ease-out"/"ease-in" for scramble phases, RESTYLE when only the
        enabled state of keys changed, None for a new arrangement.
        """
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def mount(self):
        if self.is_mounted:
            return
        self.is_mounted = True
        if self.shuffle_on_appear:
            self.digits = shuffled_digits(self.digit_set, self.rng)
        self.update_layout()

    def unmount(self):
        """Tear down: pending scramble timers become no-ops."""
        if not self.is_mounted:
            return
        self.sequencer.cancel()
        self.is_mounted = False
        self.logger.debug("Keypad unmounted")

    def update_layout(self):
        self.rows = self.layout.compute_layout(
            self.keys, self.config, self.enable_size_variation
        )
        self._notify(None)

    # ------------- inputs from the host -------------
    def set_size_variation(self, enabled: bool):
        if enabled == self.enable_size_variation:
            return
        self.enable_size_variation = enabled
        if self.is_mounted:
            self.update_layout()

    def set_haptics(self, enabled: bool):
        self.enable_haptics = enabled

    def set_delete_handler(self, callback: Optional[Callable[[], None]]):
        self.on_delete = callback
        self._notify(RESTYLE)

    def set_enter_handler(self, callback: Optional[Callable[[], None]]):
        self.on_enter = callback
        self._notify(RESTYLE)

    def set_scramble_trigger(self, value: int) -> bool:
        """
        Report the host's scramble counter. Each change of value starts one
        scramble cycle; re-reporting the same value does nothing.

        Returns:
            bool: True when a cycle was started.
        """
        if value == self.scramble_trigger:
            return False
        self.scramble_trigger = value
        if not self.is_mounted:
            return False
        self.logger.info(f"Scramble triggered ({value})")
        ids = [key.id for key in self.keys]
        return self.sequencer.trigger(ids, self._complete_scramble)

    def scramble(self) -> bool:
        """Convenience: bump the trigger by one."""
        return self.set_scramble_trigger(self.scramble_trigger + 1)

    def _complete_scramble(self):
        self.digits = shuffled_digits(self.digit_set, self.rng)
        self.update_layout()

    # ------------- key presses -------------
    def press(self, key: Key) -> bool:
        """
        Handle a press of ``key``.

        Returns:
            bool: True when a host callback was invoked. Presses while
            unmounted, on keys not currently shown or on disabled keys are dropped.
        """
        if not self.is_mounted:
            self.logger.debug(f"Press of {key.id} dropped: keypad not mounted")
            return False
        if key not in self.keys:
            self.logger.debug(f"Press of {key.id} dropped: key not on the keypad")
            return False
        if not self.is_enabled(key):
            return False

        self.haptics.vibrate(self.enable_haptics)
        if key.kind is KeyKind.DIGIT:
            self.on_key_press(key.value)
        elif key.kind is KeyKind.DELETE:
            self.on_delete()
        else:
            self.on_enter()
        return True

    def press_digit(self, value: int) -> bool:
        if value not in self.digits:
            return False
        return self.press(Key.digit(value))

    def press_delete(self) -> bool:
        if not self.include_delete:
            return False
        return self.press(Key.delete())

    def press_enter(self) -> bool:
        if not self.include_enter:
            return False
        return self.press(Key.enter())

    def key_at(self, row_index: int, cell_index: int) -> Optional[Key]:
        try:
            return self.rows[row_index].cells[cell_index].key
        except IndexError:
            return None

    # ------------- notifications -------------
    def _on_sequencer_change(self, phase, offsets, transition):
        self._notify(transition)

    def _notify(self, transition):
        for callback in list(self._listeners):
            callback(self, transition)
