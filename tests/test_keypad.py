import unittest
from unittest.mock import MagicMock
import random
import sys
import os

# Project root on the import path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from scrambled_keypad.core.keypad import RESTYLE, ScrambledKeypad
from scrambled_keypad.core.keys import Key, KeyKind, flatten_keys
from scrambled_keypad.core.scheduler import ManualScheduler
from scrambled_keypad.core.scramble_sequencer import ScramblePhase


class TestScrambledKeypad(unittest.TestCase):
    def setUp(self):
        self.pressed = []
        self.deleted = []
        self.entered = []
        self.sched = ManualScheduler()
        self.haptics = MagicMock()

    def _make(self, **kwargs):
        params = dict(
            on_key_press=self.pressed.append,
            on_delete=lambda: self.deleted.append(True),
            scheduler=self.sched,
            rng=random.Random(11),
            haptics=self.haptics,
        )
        params.update(kwargs)
        return ScrambledKeypad(**params)

    def test_fixed_grid_scenario(self):
        kp = self._make(include_delete=True, include_enter=True,
                        enable_size_variation=False, column_count=3)
        kp.mount()

        self.assertEqual(len(kp.keys), 12)
        self.assertEqual(len(kp.rows), 4)
        for row in kp.rows:
            self.assertEqual(len(row.cells), 3)
            self.assertFalse(any(cell.is_spacer for cell in row.cells))

    def test_variable_layout_scenario(self):
        kp = self._make(enable_size_variation=True)
        kp.mount()

        self.assertEqual(len(kp.keys), 11)
        self.assertTrue(1 <= len(kp.rows) <= 3)
        ids = [key.id for key in flatten_keys(kp.rows)]
        self.assertEqual(sorted(ids), sorted(key.id for key in kp.keys))
        self.assertEqual(len(ids), len(set(ids)))
        self.assertEqual(kp.row_units, 6)

    def test_disabled_delete_is_noop(self):
        kp = self._make(on_delete=None)
        kp.mount()

        self.assertFalse(kp.is_enabled(Key.delete()))
        self.assertFalse(kp.press_delete())
        self.assertFalse(kp.press(Key.delete()))
        self.haptics.vibrate.assert_not_called()

    def test_disabled_enter_is_noop(self):
        kp = self._make(include_enter=True)
        kp.mount()
        self.assertFalse(kp.press_enter())

        kp.set_enter_handler(lambda: self.entered.append(True))
        self.assertTrue(kp.press_enter())
        self.assertEqual(self.entered, [True])

    def test_press_dispatch_and_haptics(self):
        kp = self._make(enable_haptics=True)
        kp.mount()

        self.assertTrue(kp.press(Key.digit(7)))
        self.assertTrue(kp.press_delete())
        self.assertEqual(self.pressed, [7])
        self.assertEqual(self.deleted, [True])
        self.haptics.vibrate.assert_called_with(True)
        self.assertEqual(self.haptics.vibrate.call_count, 2)

        kp.set_haptics(False)
        kp.press_digit(3)
        self.haptics.vibrate.assert_called_with(False)

    def test_press_before_mount_and_after_unmount_is_dropped(self):
        kp = self._make()
        self.assertFalse(kp.press_digit(1))
        kp.mount()
        self.assertTrue(kp.press_digit(1))
        kp.unmount()
        self.assertFalse(kp.press_digit(2))
        self.assertEqual(self.pressed, [1])

    def test_shuffle_on_appear(self):
        kp = self._make(shuffle_on_appear=False)
        initial = kp.digits
        kp.mount()
        self.assertIs(kp.digits, initial)

        kp = self._make(shuffle_on_appear=True)
        initial = kp.digits
        kp.mount()
        self.assertIsNot(kp.digits, initial)
        self.assertEqual(sorted(kp.digits), list(range(10)))

    def test_scramble_reshuffles_only_after_both_phases(self):
        kp = self._make(enable_size_variation=True)
        kp.mount()
        digits = kp.digits
        rows = kp.rows

        self.assertTrue(kp.set_scramble_trigger(1))
        self.assertIs(kp.phase, ScramblePhase.DISPLACING)
        self.assertEqual(set(kp.offsets), {key.id for key in kp.keys})

        self.sched.advance(80)
        self.assertIs(kp.phase, ScramblePhase.RETURNING)
        self.assertEqual(kp.offsets, {})
        self.sched.advance(79)
        self.assertIs(kp.digits, digits)
        self.assertIs(kp.rows, rows)

        self.sched.advance(1)
        self.assertIsNot(kp.digits, digits)
        self.assertIsNot(kp.rows, rows)
        self.assertIs(kp.phase, ScramblePhase.IDLE)
        self.assertEqual(sorted(kp.digits), list(range(10)))

    def test_same_trigger_value_does_nothing(self):
        kp = self._make(scramble_trigger=5)
        kp.mount()
        self.assertFalse(kp.set_scramble_trigger(5))
        self.assertIs(kp.phase, ScramblePhase.IDLE)
        self.assertTrue(kp.scramble())
        self.assertEqual(kp.scramble_trigger, 6)

    def test_overlapping_trigger_is_debounced(self):
        kp = self._make()
        kp.mount()
        kp.set_scramble_trigger(1)
        self.sched.advance(50)
        self.assertFalse(kp.set_scramble_trigger(2))
        self.assertEqual(kp.scramble_trigger, 2)

    def test_unmount_mid_scramble_cancels(self):
        kp = self._make()
        kp.mount()
        digits = kp.digits
        kp.set_scramble_trigger(1)
        self.sched.advance(100)
        kp.unmount()

        self.sched.run_all()
        self.assertIs(kp.digits, digits)
        self.assertIs(kp.phase, ScramblePhase.IDLE)
        self.assertEqual(kp.offsets, {})

    def test_press_during_scramble_uses_current_digits(self):
        kp = self._make()
        kp.mount()
        kp.set_scramble_trigger(1)
        self.sched.advance(20)
        self.assertTrue(kp.press_digit(4))
        self.assertEqual(self.pressed, [4])

    def test_size_variation_toggle_relayouts_synchronously(self):
        kp = self._make()
        kp.mount()
        self.assertEqual(kp.row_units, 3)
        listener = MagicMock()
        kp.add_listener(listener)

        kp.set_size_variation(True)
        self.assertEqual(kp.row_units, 6)
        self.assertLessEqual(len(kp.rows), 3)
        listener.assert_called_with(kp, None)

        kp.set_size_variation(False)
        self.assertEqual(len(kp.rows), 4)

    def test_listener_sees_transitions(self):
        kp = self._make()
        kp.mount()
        transitions = []
        kp.add_listener(lambda keypad, transition: transitions.append(transition))
        kp.set_scramble_trigger(1)
        self.sched.run_all()
        self.assertEqual(transitions[:2], ["ease-out", "ease-in"])
        self.assertEqual(transitions[-1], None)

    def test_auxiliary_keys_follow_digits(self):
        kp = self._make(include_delete=True, include_enter=True)
        kinds = [key.kind for key in kp.keys]
        self.assertEqual(kinds[:10], [KeyKind.DIGIT] * 10)
        self.assertEqual(kinds[10:], [KeyKind.DELETE, KeyKind.ENTER])
        self.assertEqual(kp.keys[10].id, "delete")
        self.assertEqual(kp.keys[11].id, "enter")

    def test_key_at(self):
        kp = self._make()
        kp.mount()
        self.assertEqual(kp.key_at(0, 0), Key.digit(kp.digits[0]))
        self.assertIsNone(kp.key_at(9, 0))

    def test_press_of_key_not_on_screen_is_dropped(self):
        kp = self._make(include_delete=False)
        kp.mount()
        self.assertFalse(kp.press(Key.digit(42)))
        self.assertFalse(kp.press(Key.delete()))
        self.assertFalse(kp.press(Key.enter()))
        self.assertEqual(self.pressed, [])
        self.assertEqual(self.deleted, [])
        self.haptics.vibrate.assert_not_called()

    def test_handler_change_notifies_restyle(self):
        kp = self._make(include_enter=True)
        kp.mount()
        transitions = []
        kp.add_listener(lambda keypad, transition: transitions.append(transition))
        self.assertFalse(kp.is_enabled(Key.enter()))

        kp.set_enter_handler(lambda: self.entered.append(True))
        self.assertEqual(transitions, [RESTYLE])
        self.assertTrue(kp.is_enabled(Key.enter()))

        kp.set_delete_handler(None)
        self.assertEqual(transitions, [RESTYLE, RESTYLE])
        self.assertFalse(kp.press(Key.delete()))

    def test_host_callback_errors_propagate(self):
        def boom(value):
            raise RuntimeError("host failure")

        kp = self._make(on_key_press=boom)
        kp.mount()
        with self.assertRaises(RuntimeError):
            kp.press_digit(1)


if __name__ == '__main__':
    unittest.main()
