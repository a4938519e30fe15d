"""
results.py — Operation Results
===============================
Every mutating engine call reports back with an OpResult instead of
raising.  Nothing in this domain is fatal: a full tree, a duplicate value
or a missing key are all normal answers the caller can show to the user.

Design decisions:
  - `Reason` is an Enum whose values are short strings so the result can
    go straight into a JSON payload.
  - `OpResult` is frozen.  Traces hold on to it, and a trace must never
    change after it has been recorded.
  - `index` / `value` are optional extras the trace builder uses
    (bucket index for the hash table, inserted position for the list, …).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Reason Enum — why an operation did not change the structure
# ---------------------------------------------------------------------------
class Reason(Enum):
    CAPACITY  = "capacity"    # BST already holds max_nodes values
    DUPLICATE = "duplicate"   # value / edge already present, nothing to do
    NOT_FOUND = "not_found"   # target value / key / vertex is absent
    SELF_LOOP = "self_loop"   # graph edge from a vertex to itself
    EMPTY     = "empty"       # pop / dequeue / peek on an empty container


# ---------------------------------------------------------------------------
# OpResult
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class OpResult:
    """
    Attributes:
        success : True when the operation did what was asked.
        reason  : Why it did not (None on success).
        index   : Optional locator produced by the operation
                  (list position, bucket index, …).
        value   : Optional payload (popped value, found value, …).
    """

    success: bool
    reason:  Optional[Reason] = None
    index:   Optional[int]    = None
    value:   Any              = None

    @classmethod
    def ok(cls, index: Optional[int] = None, value: Any = None) -> "OpResult":
        return cls(success=True, index=index, value=value)

    @classmethod
    def fail(cls, reason: Reason, index: Optional[int] = None) -> "OpResult":
        return cls(success=False, reason=reason, index=index)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success}
        if self.reason is not None:
            data["reason"] = self.reason.value
        if self.index is not None:
            data["index"] = self.index
        if self.value is not None:
            data["value"] = self.value
        return data

    def __bool__(self) -> bool:
        return self.success
