"""
config.py — Visualizer Settings
================================
One small dataclass holds every tunable the engines and the playback
layer read.  Defaults match the classroom pages: a 15-node tree, a
10-bucket hash table, medium playback speed and example data loaded on
start.

    cfg = VisualizerConfig.from_env()      # DSVIZ_* environment overrides
    cfg = VisualizerConfig(max_nodes=7)    # or explicit
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from structures import DEFAULT_BUCKET_COUNT, DEFAULT_MAX_NODES

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Speed presets (seconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1.0,    # teaching mode
    "medium": 0.8,
    "fast":   0.3,
    "turbo":  0.05,
}

DEFAULT_MAX_SESSIONS = 256

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class VisualizerConfig:
    max_nodes:     int  = DEFAULT_MAX_NODES      # BST capacity
    bucket_count:  int  = DEFAULT_BUCKET_COUNT   # hash table buckets, fixed for its lifetime
    speed:         str  = "medium"               # key into SPEED_PRESETS
    seed_examples: bool = True                   # load the sample data into new sessions
    max_sessions:  int  = DEFAULT_MAX_SESSIONS   # live client sessions kept by the HTTP layer

    def __post_init__(self):
        if not isinstance(self.max_nodes, int) or self.max_nodes < 1:
            raise ValueError(f"max_nodes must be a positive integer, got {self.max_nodes!r}")
        if not isinstance(self.bucket_count, int) or self.bucket_count < 1:
            raise ValueError(f"bucket_count must be a positive integer, got {self.bucket_count!r}")
        if not isinstance(self.max_sessions, int) or self.max_sessions < 1:
            raise ValueError(f"max_sessions must be a positive integer, got {self.max_sessions!r}")
        if self.speed not in SPEED_PRESETS:
            raise ValueError(
                f"speed must be one of {sorted(SPEED_PRESETS)}, got {self.speed!r}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "VisualizerConfig":
        env = os.environ if environ is None else environ
        kwargs = {}
        if "DSVIZ_MAX_NODES" in env:
            kwargs["max_nodes"] = _parse_int("DSVIZ_MAX_NODES", env["DSVIZ_MAX_NODES"])
        if "DSVIZ_BUCKET_COUNT" in env:
            kwargs["bucket_count"] = _parse_int("DSVIZ_BUCKET_COUNT", env["DSVIZ_BUCKET_COUNT"])
        if "DSVIZ_SPEED" in env:
            kwargs["speed"] = env["DSVIZ_SPEED"].strip().lower()
        if "DSVIZ_SEED_EXAMPLES" in env:
            kwargs["seed_examples"] = _parse_bool("DSVIZ_SEED_EXAMPLES", env["DSVIZ_SEED_EXAMPLES"])
        if "DSVIZ_MAX_SESSIONS" in env:
            kwargs["max_sessions"] = _parse_int("DSVIZ_MAX_SESSIONS", env["DSVIZ_MAX_SESSIONS"])

        cfg = cls(**kwargs)
        if kwargs:
            logger.info("Configuration overrides from environment: %s", kwargs)
        return cfg

    def to_dict(self) -> dict:
        return {
            "max_nodes":     self.max_nodes,
            "bucket_count":  self.bucket_count,
            "speed":         self.speed,
            "seed_examples": self.seed_examples,
            "max_sessions":  self.max_sessions,
        }


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_bool(name: str, raw: str) -> bool:
    text = raw.strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")
