# renderer.py
import math


class TextRenderer:
    """
    Render the frames of a result object as plain text, one block per frame.

    List frames draw the chain with its link arrows, tree frames draw one line per
    level, graph frames list the traversal state. Non-idle statuses are shown in
    brackets after the value, e.g. `7[found]`.
    """

    def __init__(self, result):
        self.result = result
        self.algorithm_info = result["algorithm"]
        self.family = self.algorithm_info.get("family")
        self.pseudocode = result["initial_frame"].get("pseudocode", [])

    def render(self):
        """Every frame, with a header line per frame."""
        blocks = [self._header()]
        for i, step in enumerate(self.result.get("steps") or []):
            blocks.append(f"--- Step {i + 1} ---\n{self.render_frame(step)}")
        if self.result.get("error"):
            blocks.append(f"Error: {self.result['error']}")
        return "\n".join(blocks)

    def _header(self):
        info = self.algorithm_info
        return f"=== {info.get('name', '')} ({info.get('family', '')}, {info.get('operation', '')}) ==="

    def render_frame(self, frame):
        if self.family == "Graph" and "visited" in frame:
            return self._render_graph_frame(frame)
        if self.family == "Tree":
            body = self._render_tree(frame["structure"], frame.get("statuses", {}))
        elif self.family == "Linked List":
            body = self._render_list(frame["structure"], frame.get("statuses", {}))
        elif self.family == "Graph":
            body = self._render_graph_structure(frame["structure"])
        else:
            body = ""
        return f"{body}\n{frame['description']}" if body else frame["description"]

    # =================================================================
    # Per-family drawing
    # =================================================================

    @staticmethod
    def _label(node, statuses):
        status = statuses.get(node["id"])
        return f"{node['value']}[{status}]" if status else str(node["value"])

    def _render_list(self, nodes, statuses):
        if not nodes:
            return "(empty)"
        doubly = any(n.get("prev_id") is not None for n in nodes)
        arrow = " <-> " if doubly else " -> "
        text = arrow.join(self._label(n, statuses) for n in nodes)
        circular = nodes[-1].get("next_id") == nodes[0]["id"]
        return text + (" -> (head)" if circular else " -> null")

    def _render_tree(self, nodes, statuses):
        if not nodes:
            return "(empty)"
        levels = {}
        for node in nodes:
            levels.setdefault(node.get("level", 0), []).append(self._label(node, statuses))
        return "\n".join(f"L{level}: " + "  ".join(levels[level]) for level in sorted(levels))

    @staticmethod
    def _render_graph_structure(graph):
        graph = graph or {}
        nodes = ", ".join(str(n["id"]) for n in graph.get("nodes", [])) or "-"
        edges = ", ".join(f"{e['source']}-{e['target']}" for e in graph.get("edges", [])) or "-"
        return f"nodes: {nodes}\nedges: {edges}"

    def _render_graph_frame(self, frame):
        lines = [
            f"current:  {frame['current'] if frame['current'] is not None else '-'}",
            f"visited:  {', '.join(str(v) for v in frame['visited']) or '-'}",
            f"frontier: {', '.join(frame['frontier']) or '-'}",
        ]
        if frame["highlighted_edges"]:
            edges = ", ".join(f"{e['source']}-{e['target']}" for e in frame["highlighted_edges"])
            lines.append(f"edges:    {edges}")
        if "distances" in frame:
            shown = ", ".join(f"{k}={'inf' if isinstance(v, float) and math.isinf(v) else v}"
                              for k, v in frame["distances"].items())
            lines.append(f"distances: {shown}")
        code_line = frame.get("code_highlight")
        if code_line and 0 < code_line <= len(self.pseudocode):
            lines.append(f"line {code_line}: {self.pseudocode[code_line - 1].strip()}")
        lines.append(frame["description"])
        return "\n".join(lines)
