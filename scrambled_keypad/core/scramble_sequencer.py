"""
ScrambleSequencer - timed displace/return/reshuffle cycle.

Phases:
  IDLE        no pending timers, no offsets
  DISPLACING  every on-screen key pushed outward (ease-out, out_duration)
  RETURNING   offsets cleared, keys slide back (ease-in, in_duration)
  IDLE        after out+in: completion callback swaps in the new arrangement

Design invariants:
  - The completion callback runs exactly once per started sequence, strictly
    after both delays, unless the sequence is cancelled or restarted.
  - Timers are owned by this object and advanced by the injected scheduler.
  - A stale timer (from a cancelled/restarted sequence) is a no-op.
"""
import logging
import math
import random
from enum import Enum
from typing import Callable, Dict, Iterable, Optional

from scrambled_keypad.core.interfaces import IScheduler
from scrambled_keypad.core.keypad_config import KeypadConfig, OverlapPolicy
from scrambled_keypad.core.keys import Offset

EASE_OUT = "ease-out"
EASE_IN = "ease-in"


class ScramblePhase(Enum):
    IDLE = "idle"
    DISPLACING = "displacing"
    RETURNING = "returning"


def scramble_offsets(ids: Iterable[str], rng=None, min_distance: float = 6.0,
                     max_distance: float = 14.0) -> Dict[str, Offset]:
    """Random radial push per id: angle in [0, 2pi), distance in [min, max]."""
    rng = rng or random
    result = {}
    for key_id in ids:
        angle = rng.uniform(0.0, 2.0 * math.pi) % (2.0 * math.pi)
        distance = rng.uniform(min_distance, max_distance)
        result[key_id] = Offset(math.cos(angle) * distance, math.sin(angle) * distance)
    return result


class ScrambleSequencer:

    def __init__(self, scheduler: IScheduler, config: Optional[KeypadConfig] = None,
                 rng=None, on_change: Optional[Callable] = None):
        """
        Args:
            scheduler: timer source (ManualScheduler in tests, Tk in the app).
            config: durations, offset range and overlap policy.
            rng: random.Random for offset draws.
            on_change: called as on_change(phase, offsets, transition) after
                every visible update. transition is EASE_OUT, EASE_IN or None.
        """
        self.logger = logging.getLogger(__name__)
        self.scheduler = scheduler
        self.config = config or KeypadConfig()
        self.rng = rng
        self.on_change = on_change

        self.phase = ScramblePhase.IDLE
        self.offsets: Dict[str, Offset] = {}
        self._timers = []
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self.phase is not ScramblePhase.IDLE

    def offset_for(self, key_id: str) -> Offset:
        return self.offsets.get(key_id, Offset.ZERO)

    def trigger(self, ids: Iterable[str], on_complete: Callable[[], None]) -> bool:
        """
        Start one scramble sequence for the given on-screen key ids.

        Returns:
            bool: False when the trigger was ignored (debounced).
        """
        if self.is_running:
            if self.config.overlap_policy is OverlapPolicy.DEBOUNCE:
                self.logger.info("Scramble trigger ignored: sequence in flight")
                return False
            self.logger.info("Scramble restarted mid-flight")
            self._cancel_timers()

        self._generation += 1
        generation = self._generation

        offsets = scramble_offsets(ids, self.rng,
                                   self.config.min_offset, self.config.max_offset)
        self._enter(ScramblePhase.DISPLACING, offsets, EASE_OUT)

        out_ms = self.config.out_duration_ms
        total_ms = self.config.total_duration_ms
        self._timers = [
            self.scheduler.call_later(out_ms, lambda: self._begin_return(generation)),
            self.scheduler.call_later(total_ms, lambda: self._finish(generation, on_complete)),
        ]
        return True

    def cancel(self):
        """Drop pending timers and return to IDLE without completing."""
        self._generation += 1
        self._cancel_timers()
        if self.is_running or self.offsets:
            self._enter(ScramblePhase.IDLE, {}, None)

    def _begin_return(self, generation):
        if generation != self._generation:
            return
        self._enter(ScramblePhase.RETURNING, {}, EASE_IN)

    def _finish(self, generation, on_complete):
        if generation != self._generation:
            return
        self._timers = []
        self._set_phase(ScramblePhase.IDLE)
        self.offsets = {}
        on_complete()
        self._notify(None)

    def _cancel_timers(self):
        for handle in self._timers:
            self.scheduler.cancel(handle)
        self._timers = []

    def _enter(self, phase, offsets, transition):
        self._set_phase(phase)
        self.offsets = offsets
        self._notify(transition)

    def _set_phase(self, phase):
        if phase is not self.phase:
            self.logger.debug(f"Scramble phase: {self.phase.name} -> {phase.name}")
        self.phase = phase

    def _notify(self, transition):
        if self.on_change is not None:
            self.on_change(self.phase, dict(self.offsets), transition)
