"""
recorder.py — Operation Recorder
=================================
Runs one traced operation to completion and freezes everything it
produced into an OperationTrace.

Usage:
    rec = Recorder()
    trace = rec.record(info, tree, value=42)   # drains the generator
    trace.steps[-1].kind                       # StepKind.DONE
    trace.export()                             # JSON-ready dict

Why record eagerly:
  The generator applies the structural change somewhere in the middle
  of its steps.  Draining it before playback starts means the structure
  is already in its final state when the first frame is shown, so
  cancelling playback at any point can never leave a half-applied
  insert or delete behind.
"""

import logging
import time
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from operations import OperationInfo
from operations.step import Step, StepKind
from structures import OpResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics — what the info panel shows under the animation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TraceMetrics:
    total_steps:   int   = 0     # including the DONE marker
    visits:        int   = 0     # VISIT + SCAN steps: the work the operation did
    wall_time_ms:  float = 0.0   # time to run the generator to completion


# ---------------------------------------------------------------------------
# OperationTrace — immutable result of one recorded operation
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationTrace:
    """
    Attributes:
        structure : Registry group ("bst", "graph", …).
        operation : Operation name ("insert", "traverse", …).
        params    : Converted parameters the operation ran with.
        steps     : Every Step, in order, ending with a DONE step.
        result    : The OpResult the operation returned.
        metrics   : TraceMetrics for the run.
    """

    structure: str
    operation: str
    params:    Mapping[str, Any]
    steps:     Tuple[Step, ...]
    result:    OpResult
    metrics:   TraceMetrics = field(default_factory=TraceMetrics)

    @property
    def key(self) -> str:
        return f"{self.structure}.{self.operation}"

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self):
        return iter(self.steps)

    def export(self) -> Dict[str, Any]:
        return {
            "structure": self.structure,
            "operation": self.operation,
            "params":    dict(self.params),
            "result":    self.result.to_dict(),
            "metrics":   self.metrics.__dict__,
            "steps":     [s.to_dict() for s in self.steps],
        }


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        last_trace : The most recent OperationTrace (None before the first run).
    """

    def __init__(self):
        self.last_trace: Optional[OperationTrace] = None

    def record(self, info: OperationInfo, target: Any, **params: Any) -> OperationTrace:
        """Drive `info.fn(target, **params)` to completion."""
        start = time.monotonic()
        gen = info.fn(target, **params)

        steps = []
        while True:
            try:
                steps.append(next(gen))
            except StopIteration as stop:
                result = stop.value
                break

        if not isinstance(result, OpResult):
            raise RuntimeError(f"{info.key} finished without returning an OpResult")

        steps.append(_done_step(len(steps), result, info))
        wall_ms = (time.monotonic() - start) * 1000

        trace = OperationTrace(
            structure=info.structure,
            operation=info.name,
            params=MappingProxyType(dict(params)),
            steps=tuple(steps),
            result=result,
            metrics=TraceMetrics(
                total_steps=len(steps),
                visits=sum(1 for s in steps if s.kind in (StepKind.VISIT, StepKind.SCAN)),
                wall_time_ms=round(wall_ms, 3),
            ),
        )
        self.last_trace = trace
        logger.debug(
            "Recorded %s(%s): %d steps, success=%s, reason=%s",
            info.key, params, len(steps), result.success,
            result.reason.value if result.reason else None,
        )
        return trace


def _done_step(step_number: int, result: OpResult, info: OperationInfo) -> Step:
    if result.success:
        note = f"{info.label} complete."
    else:
        note = f"{info.label} finished without changes ({result.reason.value})."
    return Step(
        step_number=step_number,
        kind=StepKind.DONE,
        subject=result.value,
        locator=result.index,
        note=note,
        pseudocode_line=len(info.pseudocode) - 1,
        is_final=True,
    )
