# player.py
class TracePlayer:
    """
    Step cursor over a finished result object.

    The steps are already computed, so moving the cursor never runs an algorithm;
    a host animates by calling next() on its own timer. Position -1 means
    "before the first step", where current() returns the initial frame.
    """

    def __init__(self, result):
        self.result = result
        self.steps = result.get("steps") or []
        self.position = -1

    def __len__(self):
        return len(self.steps)

    @property
    def finished(self):
        return self.position >= len(self.steps) - 1

    def current(self):
        if self.position < 0:
            return self.result["initial_frame"]
        return self.steps[self.position]

    def next(self):
        """Advance one step. Returns the new current frame, or None when already at the end."""
        if self.finished:
            return None
        self.position += 1
        return self.current()

    def previous(self):
        if self.position < 0:
            return None
        self.position -= 1
        return self.current()

    def seek(self, index):
        if not -1 <= index < len(self.steps):
            raise IndexError(f"Step {index} out of range for a trace of {len(self.steps)} steps")
        self.position = index
        return self.current()

    def reset(self):
        self.position = -1

    def __iter__(self):
        # Plays from the current position to the end
        while not self.finished:
            yield self.next()
