"""
step.py — Operation Step Snapshot
==================================
Every traced operation is a generator that yields Step objects.
A Step is one discrete sub-action the renderer animates:

    • hash computed, bucket located, chain entry examined
    • tree node visited on the way down, successor found
    • list position walked, node linked / unlinked
    • vertex visited by a traversal

Design decisions:
  - Step is a frozen dataclass.  The operation generator is the only
    writer; the stepper / renderer are pure readers, and replaying the
    same trace twice produces the same frames.
  - `kind` says WHAT happened, `subject` WHICH value / key / vertex it
    happened to, `locator` WHERE (position, bucket index, path index).
  - `overlay` is a free-form mapping so each structure can attach whatever
    running state it wants shown (visited set, BFS queue, current chain).
    A built Step holds it as a read-only MappingProxyType with tuple
    values; `to_dict` turns it back into plain JSON-ready data.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class StepKind(Enum):
    START     = "start"       # operation announced, new value shown
    VISIT     = "visit"       # node / position / vertex reached
    HASH      = "hash"        # hash value computed for a key
    BUCKET    = "bucket"      # bucket located from the hash
    SCAN      = "scan"        # chain entry compared against the key
    SUCCESSOR = "successor"   # in-order successor located (BST delete)
    FRONTIER  = "frontier"    # vertex discovered, queued / stacked
    EMIT      = "emit"        # value appended to a traversal result
    INSERT    = "insert"      # structure gained an element
    UPDATE    = "update"      # existing element overwritten
    REMOVE    = "remove"      # structure lost an element
    FOUND     = "found"       # query hit
    NOT_FOUND = "not_found"   # query miss
    REJECT    = "reject"      # operation refused (capacity, duplicate, …)
    DONE      = "done"        # explicit end-of-trace marker


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the trace.
        kind            : StepKind of the sub-action.
        subject         : Value, key or vertex id the step is about.
        locator         : Position / bucket index / depth (or None).
        note            : Human-readable explanation shown beside the animation.
        pseudocode_line : 0-based index into the operation's PSEUDOCODE.
        overlay         : Free-form structure-specific data:
                            • "path"     – values visited so far (BST)
                            • "visited"  – vertices visited so far (graph)
                            • "queue"    – BFS queue contents
                            • "stack"    – DFS stack contents
                            • "chain"    – keys in the located bucket
                            • "result"   – traversal output so far
        is_final        : True only on the DONE step.
    """

    step_number:     int                = 0
    kind:            StepKind           = StepKind.START
    subject:         Any                = None
    locator:         Optional[Any]      = None
    note:            str                = ""
    pseudocode_line: int                = 0
    overlay:         Mapping[str, Any]  = field(default_factory=dict)
    is_final:        bool               = False

    def __post_init__(self):
        object.__setattr__(self, "subject", freeze(self.subject))
        object.__setattr__(self, "overlay", freeze(dict(self.overlay)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "kind":            self.kind.value,
            "subject":         thaw(self.subject),
            "locator":         self.locator,
            "note":            self.note,
            "pseudocode_line": self.pseudocode_line,
            "overlay":         thaw(self.overlay),
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Convenience builder so operations don't have to number steps by hand
# ---------------------------------------------------------------------------
class StepBuilder:
    """
    Numbers steps and carries running overlay state between them.

    Usage inside an operation generator:
        sb = StepBuilder()
        sb.overlay["path"] = []
        yield sb.step(StepKind.VISIT, subject=50, note="Compare with 50", line=2)
        sb.overlay["path"].append(50)
        yield sb.step(StepKind.INSERT, subject=42, line=5)
    """

    def __init__(self):
        self.reset()

    def reset(self):
        self.step_no: int            = 0
        self.overlay: Dict[str, Any] = {}

    def step(
        self,
        kind: StepKind,
        subject: Any = None,
        locator: Optional[Any] = None,
        note: str = "",
        line: int = 0,
    ) -> Step:
        built = Step(
            step_number=self.step_no,
            kind=kind,
            subject=subject,
            locator=locator,
            note=note,
            pseudocode_line=line,
            overlay=self.overlay,
        )
        self.step_no += 1
        return built


def freeze(value: Any) -> Any:
    """Read-only deep copy: lists become tuples, dicts become MappingProxyType."""
    if isinstance(value, (list, tuple)):
        return tuple(freeze(v) for v in value)
    if isinstance(value, (dict, MappingProxyType)):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    return value


def thaw(value: Any) -> Any:
    """Plain lists and dicts again, for JSON."""
    if isinstance(value, tuple):
        return [thaw(v) for v in value]
    if isinstance(value, MappingProxyType):
        return {k: thaw(v) for k, v in value.items()}
    return value
