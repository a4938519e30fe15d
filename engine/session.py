"""
session.py — Structure Ownership & Dispatch
============================================
A Session owns exactly one instance of every structure plus one Stepper
per structure.  Everything that touches a structure goes through it:

    s = Session(VisualizerConfig())
    trace = s.execute("bst", "insert", value=45)
    s.stepper("bst").next_step()
    s.snapshot("bst")

Executing an operation:
  1. look up the OperationInfo (unknown names raise)
  2. convert the raw parameters (bad ones raise InvalidArgumentError)
  3. reset that structure's stepper, dropping any playback in flight
  4. record the whole trace, which applies the mutation
  5. start playback of the new trace

SessionStore maps client ids to Sessions for the HTTP layer.
"""

import logging
import uuid
from collections import OrderedDict
from typing import Any, Dict, Optional

from config import VisualizerConfig
from engine.errors import InvalidArgumentError, UnknownOperationError, UnknownStructureError
from engine.recorder import OperationTrace, Recorder
from engine.stepper import Stepper
from operations import STRUCTURES, OperationInfo, get_operation, list_operations
from structures import BinarySearchTree, Graph, HashTable, LinkedList, Queue, Stack

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Example data loaded into fresh structures
# ---------------------------------------------------------------------------
EXAMPLE_STACK  = [10, 20, 30]
EXAMPLE_QUEUE  = [10, 20, 30]
EXAMPLE_BST    = [50, 30, 70, 20, 40, 60, 80]
EXAMPLE_HASH   = [
    ("apple",    "red fruit"),
    ("banana",   "yellow fruit"),
    ("carrot",   "orange vegetable"),
    ("date",     "brown fruit"),
    ("eggplant", "purple vegetable"),
]
EXAMPLE_GRAPH_EDGES = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]


class Session:
    """
    Attributes:
        id       : Opaque identifier (used by SessionStore).
        config   : VisualizerConfig the structures were built with.
        recorder : Shared Recorder; remembers the last trace of any structure.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None, session_id: Optional[str] = None):
        self.id       = session_id or uuid.uuid4().hex
        self.config   = config or VisualizerConfig()
        self.recorder = Recorder()
        self._structures: Dict[str, Any]     = {}
        self._steppers:   Dict[str, Stepper] = {
            name: Stepper(speed=self.config.speed) for name in STRUCTURES
        }
        for name in STRUCTURES:
            self._structures[name] = self._build(name)
        if self.config.seed_examples:
            self.seed_examples()

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------
    def structure(self, name: str) -> Any:
        if name not in self._structures:
            raise UnknownStructureError(name)
        return self._structures[name]

    def stepper(self, name: str) -> Stepper:
        if name not in self._steppers:
            raise UnknownStructureError(name)
        return self._steppers[name]

    def operation(self, structure: str, name: str) -> OperationInfo:
        if structure not in self._structures:
            raise UnknownStructureError(structure)
        info = get_operation(structure, name)
        if info is None:
            raise UnknownOperationError(structure, name)
        return info

    # ------------------------------------------------------------------
    # Execute
    # ------------------------------------------------------------------
    def execute(self, structure: str, operation: str, /, **raw_params: Any) -> OperationTrace:
        info   = self.operation(structure, operation)
        params = convert_params(info, raw_params)

        stepper = self._steppers[structure]
        stepper.reset()
        trace = self.recorder.record(info, self._structures[structure], **params)
        stepper.start(trace)

        logger.debug("Session %s ran %s -> %s", self.id, info.key, trace.result.to_dict())
        return trace

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def snapshot(self, name: str) -> Dict[str, Any]:
        """Layout-independent contents of one structure."""
        obj = self.structure(name)
        if name in ("linked_list", "stack", "queue"):
            return {"items": obj.to_list(), "size": len(obj)}
        if name == "bst":
            return obj.snapshot()
        if name == "hash_table":
            return {
                "bucket_count": obj.bucket_count,
                "size":         len(obj),
                "load_factor":  obj.load_factor(),
                "buckets": [
                    {"index": i, "entries": [e.to_dict() for e in chain]}
                    for i, chain in obj.entries()
                ],
            }
        return obj.to_dict()

    def state(self, name: str) -> Dict[str, Any]:
        return {
            "structure":  name,
            "snapshot":   self.snapshot(name),
            "playback":   self.stepper(name).to_dict(),
            "operations": [info.name for info in list_operations(name)],
        }

    # ------------------------------------------------------------------
    # Reset / seeding
    # ------------------------------------------------------------------
    def reset(self, name: str, seed: Optional[bool] = None) -> None:
        """Replace one structure with a fresh instance."""
        self.structure(name)
        self._steppers[name].reset()
        self._structures[name] = self._build(name)
        if self.config.seed_examples if seed is None else seed:
            self._seed(name)
        logger.info("Session %s reset %s", self.id, name)

    def seed_examples(self) -> None:
        for name in STRUCTURES:
            self._seed(name)

    def set_speed(self, preset: str) -> None:
        for stepper in self._steppers.values():
            stepper.set_speed(preset)

    def _build(self, name: str) -> Any:
        if name == "linked_list":
            return LinkedList()
        if name == "stack":
            return Stack()
        if name == "queue":
            return Queue()
        if name == "bst":
            return BinarySearchTree(max_nodes=self.config.max_nodes)
        if name == "hash_table":
            return HashTable(bucket_count=self.config.bucket_count)
        if name == "graph":
            return Graph()
        raise UnknownStructureError(name)

    def _seed(self, name: str) -> None:
        obj = self._structures[name]
        if name == "stack":
            for v in EXAMPLE_STACK:
                obj.push(v)
        elif name == "queue":
            for v in EXAMPLE_QUEUE:
                obj.enqueue(v)
        elif name == "bst":
            for v in EXAMPLE_BST:
                obj.insert(v)
        elif name == "hash_table":
            for k, v in EXAMPLE_HASH:
                obj.insert(k, v)
        elif name == "graph":
            for a, b in EXAMPLE_GRAPH_EDGES:
                obj.add_edge(a, b)


def convert_params(info: OperationInfo, raw: Dict[str, Any]) -> Dict[str, Any]:
    """Apply each parameter's converter; defaults fill in missing optional ones."""
    unknown = set(raw) - set(info.params)
    if unknown:
        raise InvalidArgumentError(
            f"{info.key} does not take parameter(s): {', '.join(sorted(unknown))}"
        )

    params: Dict[str, Any] = {}
    for name, convert in info.params.items():
        if name in raw:
            value = raw[name]
        elif name in info.defaults:
            value = info.defaults[name]
        else:
            raise InvalidArgumentError(f"{info.key} requires parameter '{name}'")
        try:
            params[name] = convert(value)
        except ValueError as exc:
            raise InvalidArgumentError(f"{info.key}: bad '{name}': {exc}") from exc
    return params


# ---------------------------------------------------------------------------
# SessionStore
# ---------------------------------------------------------------------------
class SessionStore:
    """
    In-memory Session registry keyed by id.

    Holds at most `config.max_sessions` sessions.  Every lookup marks a
    session as recently used; creating one past the cap evicts the
    least recently used.
    """

    def __init__(self, config: Optional[VisualizerConfig] = None):
        self.config = config or VisualizerConfig()
        self._sessions: Dict[str, Session] = OrderedDict()

    def get_or_create(self, session_id: Optional[str] = None) -> Session:
        if session_id and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return self._sessions[session_id]
        session = Session(self.config, session_id=session_id)
        self._sessions[session.id] = session
        while len(self._sessions) > self.config.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            logger.info("Evicted least recently used session %s", evicted)
        logger.info("Created session %s (%d active)", session.id, len(self._sessions))
        return session

    def get(self, session_id: str) -> Optional[Session]:
        return self._sessions.get(session_id)

    def dispose(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("Disposed session %s", session_id)
        return removed

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions
