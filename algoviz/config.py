# config.py
import json
import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path

logger = logging.getLogger(__name__)

LIST_KINDS = ("SLL", "DLL", "CSLL", "CDLL")
TREE_TYPES = ("BST", "AVL", "MAX_HEAP", "MIN_HEAP")
DATASET_TYPES = ("numbers", "characters", "colors", "emojis")

ENV_PREFIX = "ALGOVIZ_"


@dataclass
class EngineConfig:
    """Defaults for a visualizer session and the layout helpers."""
    list_kind: str = "SLL"
    tree_type: str = "BST"
    dataset_type: str = "numbers"
    max_history: int = None
    layout_width: float = 800
    layout_start_y: float = 80
    level_height: float = 100
    style_overrides: dict = field(default_factory=dict)

    def validate(self):
        if self.list_kind not in LIST_KINDS:
            raise ValueError(f"Unknown list kind '{self.list_kind}', expected one of {LIST_KINDS}")
        if self.tree_type not in TREE_TYPES:
            raise ValueError(f"Unknown tree type '{self.tree_type}', expected one of {TREE_TYPES}")
        if self.dataset_type not in DATASET_TYPES:
            raise ValueError(f"Unknown dataset type '{self.dataset_type}', expected one of {DATASET_TYPES}")
        if self.max_history is not None and self.max_history < 1:
            raise ValueError("max_history must be a positive integer or None")
        return self


def _coerce(name, raw):
    # Environment values arrive as strings
    if name == "max_history":
        return None if raw.lower() in ("", "none") else int(raw)
    if name in ("layout_width", "layout_start_y", "level_height"):
        return float(raw)
    if name == "style_overrides":
        return json.loads(raw)
    return raw


def load_config(path=None, environ=None) -> EngineConfig:
    """
    Build an EngineConfig from an optional JSON file, then apply ALGOVIZ_* environment variables.
    Unknown keys in the file are logged and ignored.
    """
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(EngineConfig)}
    values = {}

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path.resolve()}")
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning(f"Ignoring unknown config key '{key}' in {path}")

    for name in known:
        env_key = ENV_PREFIX + name.upper()
        if env_key in environ:
            values[name] = _coerce(name, environ[env_key])

    return EngineConfig(**values).validate()
