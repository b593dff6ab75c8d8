# nodes.py
"""
Linked list node dicts and link bookkeeping.

The order of the node sequence is authoritative. After every change the
next/prev links are recomputed from that order for the list kind, so forward
and backward links can never disagree.
"""
import uuid

from ..errors import InvariantError

LIST_KIND_NAMES = {
    "SLL": "singly linked list",
    "DLL": "doubly linked list",
    "CSLL": "circular singly linked list",
    "CDLL": "circular doubly linked list",
}


def is_doubly(kind):
    return kind in ("DLL", "CDLL")


def is_circular(kind):
    return kind in ("CSLL", "CDLL")


def new_node_id():
    return uuid.uuid4().hex[:9]


def create_list_node(value, node_id=None):
    return {
        "id": node_id or new_node_id(),
        "value": value,
        "next_id": None,
        "prev_id": None,
        "status": "idle",
    }


def relink(nodes, kind):
    """Return copies of the nodes with next/prev links rebuilt from their order."""
    n = len(nodes)
    linked = []
    for i, node in enumerate(nodes):
        node = dict(node, status="idle")
        if i + 1 < n:
            node["next_id"] = nodes[i + 1]["id"]
        else:
            node["next_id"] = nodes[0]["id"] if is_circular(kind) else None

        if not is_doubly(kind):
            node["prev_id"] = None
        elif i > 0:
            node["prev_id"] = nodes[i - 1]["id"]
        else:
            node["prev_id"] = nodes[-1]["id"] if is_circular(kind) else None
        linked.append(node)
    return linked


def build_list(values, kind="SLL"):
    """Build a linked list snapshot from plain values."""
    return relink([create_list_node(v) for v in values], kind)


def check_links(nodes, kind):
    """
    Verify the link invariants for the list kind.
    Raises InvariantError on a breach.
    """
    ids = [node["id"] for node in nodes]
    if len(set(ids)) != len(ids):
        raise InvariantError("Duplicate node ids in linked list")

    expected = relink(nodes, kind)
    for actual, wanted in zip(nodes, expected):
        if actual.get("next_id") != wanted["next_id"]:
            raise InvariantError(
                f"Node {actual['id']} next link {actual.get('next_id')} != {wanted['next_id']} for {kind}")
        if actual.get("prev_id") != wanted["prev_id"]:
            raise InvariantError(
                f"Node {actual['id']} prev link {actual.get('prev_id')} != {wanted['prev_id']} for {kind}")

    # Walk the forward links: circular lists form exactly one cycle covering all nodes
    if nodes:
        by_id = {node["id"]: node for node in nodes}
        seen = []
        current = nodes[0]["id"]
        while current is not None and current not in seen:
            seen.append(current)
            current = by_id[current]["next_id"]
        if len(seen) != len(nodes):
            raise InvariantError("Forward links do not reach every node")
        if is_circular(kind) and current != nodes[0]["id"]:
            raise InvariantError("Circular list does not close back on its head")
    return True


def _as_number(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def values_equal(a, b):
    """Loose equality: 5 matches "5" and "5.0"; other values compare as text."""
    if a == b:
        return True
    na, nb = _as_number(a), _as_number(b)
    if na is not None and nb is not None:
        return na == nb
    return str(a) == str(b)


def value_greater(a, b):
    """Ordering used by sort: numeric when both sides are numeric, otherwise textual."""
    na, nb = _as_number(a), _as_number(b)
    if na is not None and nb is not None:
        return na > nb
    return str(a) > str(b)


def coerce_value(value, dataset_type="numbers"):
    """Convert an operand to the dataset's value type (numbers parse numeric text)."""
    if value is None:
        return None
    if dataset_type == "numbers":
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        number = _as_number(value)
        if number is None:
            return value
        return int(number) if float(number).is_integer() else number
    return str(value)
