"""
engine/
-------
Recording, playback & session layer.

    from engine import Session, Stepper, Recorder
"""

from engine.errors   import (
    InvalidArgumentError,
    UnknownOperationError,
    UnknownStructureError,
    VisualizerError,
)
from engine.recorder import OperationTrace, Recorder, TraceMetrics
from engine.stepper  import SPEED_PRESETS, Stepper, StepperState
from engine.session  import Session, SessionStore, convert_params

__all__ = [
    "InvalidArgumentError",
    "UnknownOperationError",
    "UnknownStructureError",
    "VisualizerError",
    "OperationTrace",
    "Recorder",
    "TraceMetrics",
    "SPEED_PRESETS",
    "Stepper",
    "StepperState",
    "Session",
    "SessionStore",
    "convert_params",
]
