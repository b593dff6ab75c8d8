# trace.py
"""
Frame and result builders shared by every tracker.

A tracker call returns one result object:

    {
      "trace_version": "1.0",
      "algorithm":     {"name", "family", "operation"},
      "initial_frame": {"structure", "styles", ["pseudocode"]},
      "steps":         [frame, ...],
      "structure":     output snapshot (statuses idle),
      "committed":     whether the structure changed,
      "error":         None or an ErrorKind value,
      "output":        operation specific data
    }

Frames are deep copies, so replaying steps[0..k] never depends on later mutation.
"""
import copy
import math

from .default_styles import DEFAULT_STYLES

TRACE_VERSION = "1.0"


def make_frame(structure, description, statuses=None, meta=None):
    """
    Build a list/tree frame: a snapshot of the structure plus a status overlay keyed by node id.
    Only non-idle statuses are stored in the overlay.
    """
    overlay = {node_id: status for node_id, status in (statuses or {}).items() if status != "idle"}
    return {
        "structure": copy.deepcopy(structure),
        "statuses": overlay,
        "description": description,
        "meta": copy.deepcopy(meta or {}),
    }


def make_result(name, family, operation, initial_structure, steps, structure,
                committed, error=None, output=None, pseudocode=None, styles=None):
    initial_frame = {
        "structure": copy.deepcopy(initial_structure),
        "styles": copy.deepcopy(styles if styles is not None else DEFAULT_STYLES),
    }
    if pseudocode is not None:
        initial_frame["pseudocode"] = list(pseudocode)

    return {
        "trace_version": TRACE_VERSION,
        "algorithm": {"name": name, "family": family, "operation": operation},
        "initial_frame": initial_frame,
        "steps": steps,
        "structure": copy.deepcopy(structure),
        "committed": committed,
        "error": error.value if error is not None else None,
        "output": output or {},
    }


def failure_result(name, family, operation, structure, error, description, output=None):
    """A no-op result: the structure is returned untouched with a single explanatory frame."""
    steps = [make_frame(structure, description)]
    return make_result(name, family, operation, structure, steps, structure,
                       committed=False, error=error, output=output)


def final_description(result):
    """Text a host surfaces as feedback after running an operation."""
    steps = result.get("steps") or []
    return steps[-1]["description"] if steps else ""


def to_json_compatible(obj):
    """Replace infinite floats with the string "Infinity" so the object can be written as strict JSON."""
    if isinstance(obj, dict):
        return {k: to_json_compatible(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json_compatible(v) for v in obj]
    if isinstance(obj, float) and math.isinf(obj):
        return "Infinity" if obj > 0 else "-Infinity"
    return obj
