"""
stepper.py — Trace Playback
============================
Plays one recorded OperationTrace frame by frame.  The renderer never
reads a trace directly; it asks the Stepper for the current step and
drives it with next / prev / play / pause / tick.

Lifecycle:
    IDLE      start(trace)         → PAUSED on step 0
    PAUSED    play()               → PLAYING
    PLAYING   pause()              → PAUSED
    PLAYING   tick() reaches DONE  → FINISHED
    FINISHED  prev / goto / rewind → PAUSED
    *         reset()              → IDLE

Reveal rule:
  Frames are uncovered strictly in order.  `revealed` counts how many
  the user has reached so far; `goto_step` may only land inside that
  prefix.  `jump_to_end` uncovers everything at once.
"""

import time
from enum import Enum
from typing import Callable, List, Optional

from config import SPEED_PRESETS
from engine.recorder import OperationTrace
from operations.step import Step

MIN_STEP_SECONDS = 0.02


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


class Stepper:
    """
    Attributes:
        trace       : OperationTrace being played, None while idle.
        state       : StepperState.
        current_idx : Position of the displayed frame (-1 while idle).
        revealed    : Number of frames uncovered so far.
        speed       : Seconds per frame while playing.
        on_step     : Optional callback(Step), fired whenever the displayed frame changes.
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None, speed: str = "medium"):
        self.trace:       Optional[OperationTrace] = None
        self.state:       StepperState             = StepperState.IDLE
        self.current_idx: int                      = -1
        self.revealed:    int                      = 0
        self.speed:       float                    = SPEED_PRESETS.get(speed, SPEED_PRESETS["medium"])
        self.on_step = on_step
        self._played_at:  float                    = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, trace: OperationTrace) -> None:
        if not trace.steps:
            raise RuntimeError("Cannot play an empty trace.")
        self.trace    = trace
        self.revealed = 1
        self.state    = StepperState.PAUSED
        self._show(0)

    def reset(self) -> None:
        """Drop the current trace.  The structure itself is untouched."""
        self.trace       = None
        self.state       = StepperState.IDLE
        self.current_idx = -1
        self.revealed    = 0

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        if self.trace is None:
            return False
        target = self.current_idx + 1
        if target >= self.total_steps:
            self.state = StepperState.FINISHED
            return False
        self.revealed = max(self.revealed, target + 1)
        self._show(target)
        if self.trace.steps[target].is_final:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        if self.current_idx < 1:
            return False
        self._show(self.current_idx - 1)
        self._unfinish()
        return True

    def goto_step(self, idx: int) -> bool:
        if not 0 <= idx < self.revealed:
            return False
        self._show(idx)
        if self.trace.steps[idx].is_final:
            self.state = StepperState.FINISHED
        else:
            self._unfinish()
        return True

    def rewind(self) -> None:
        self.goto_step(0)

    def jump_to_end(self) -> None:
        if self.trace is None:
            return
        self.revealed = self.total_steps
        self._show(self.total_steps - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Auto-play
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.state is not StepperState.PAUSED:
            return
        self.state      = StepperState.PLAYING
        self._played_at = time.monotonic()

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """Advance one frame if playing and `speed` seconds have passed since the last one."""
        if not self.is_playing:
            return False
        now = time.monotonic() if now is None else now
        if now - self._played_at < self.speed:
            return False
        self._played_at = now
        return self.next_step()

    def set_speed(self, preset: str) -> None:
        self.speed = SPEED_PRESETS.get(preset, SPEED_PRESETS["medium"])

    def set_speed_value(self, seconds: float) -> None:
        self.speed = max(MIN_STEP_SECONDS, seconds)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def steps(self) -> List[Step]:
        """Frames uncovered so far."""
        return list(self.trace.steps[:self.revealed]) if self.trace else []

    @property
    def current_step(self) -> Optional[Step]:
        if self.trace is None or self.current_idx < 0:
            return None
        return self.trace.steps[self.current_idx]

    @property
    def total_steps(self) -> int:
        return len(self.trace) if self.trace else 0

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def to_dict(self) -> dict:
        step = self.current_step
        return {
            "state":        self.state.value,
            "operation":    self.trace.key if self.trace else None,
            "current_step": self.current_idx,
            "total_steps":  self.total_steps,
            "revealed":     self.revealed,
            "speed":        self.speed,
            "step":         step.to_dict() if step else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _show(self, idx: int) -> None:
        self.current_idx = idx
        if self.on_step is not None:
            self.on_step(self.trace.steps[idx])

    def _unfinish(self) -> None:
        if self.state is StepperState.FINISHED:
            self.state = StepperState.PAUSED
