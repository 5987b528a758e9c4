from contextlib import contextmanager

class TurnGuard:
    """
    Single-flight guard for state-changing interview turns.
    FAIL-FAST: a second acquire while held raises instead of queueing.
    """
    def __init__(self):
        self._holder = None

    @property
    def busy(self) -> bool:
        return self._holder is not None

    @contextmanager
    def acquire(self, resource_id: str):
        if self._holder is not None:
            raise BlockingIOError(f"Resource {resource_id} is busy with {self._holder}.")
        self._holder = resource_id
        try:
            yield
        finally:
            self._holder = None
