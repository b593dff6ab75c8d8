"""Step traces for linked lists, binary trees, heaps and graph traversals."""
from .command_parser import parse_command
from .config import EngineConfig, load_config
from .dispatcher import GraphOperation, ListOperation, TreeOperation, dispatch, resolve_operation
from .errors import ErrorKind, InvariantError
from .history import SnapshotHistory
from .player import TracePlayer
from .renderer import TextRenderer
from .session import VisualizerSession
from .validate import validate_trace

__version__ = "0.1.0"

__all__ = [
    "dispatch", "resolve_operation", "ListOperation", "TreeOperation", "GraphOperation",
    "parse_command", "VisualizerSession", "SnapshotHistory", "TracePlayer", "TextRenderer",
    "EngineConfig", "load_config", "ErrorKind", "InvariantError", "validate_trace",
]
