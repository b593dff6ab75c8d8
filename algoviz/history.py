# history.py
import copy
import logging
import time

logger = logging.getLogger(__name__)


class SnapshotHistory:
    """
    Undo stack of pre-mutation structure snapshots.

    Snapshots are stored and handed back as deep copies, so no live structure
    ever aliases an entry. With max_depth set, the oldest entries are dropped.
    """

    def __init__(self, max_depth=None):
        self.max_depth = max_depth
        self._entries = []

    def push(self, structure, operation=None, description=""):
        self._entries.append({
            "operation": operation,
            "structure": copy.deepcopy(structure),
            "description": description,
            "timestamp": time.time(),
        })
        if self.max_depth is not None and len(self._entries) > self.max_depth:
            self._entries.pop(0)
        logger.debug(f"History push ({operation}), depth={len(self._entries)}")

    def undo(self):
        """Pop the latest snapshot. Returns None when there is nothing to undo."""
        if not self._entries:
            logger.debug("Undo requested on empty history")
            return None
        entry = self._entries.pop()
        return copy.deepcopy(entry)

    def peek(self):
        return copy.deepcopy(self._entries[-1]) if self._entries else None

    def clear(self):
        self._entries.clear()

    @property
    def can_undo(self):
        return bool(self._entries)

    def __len__(self):
        return len(self._entries)
