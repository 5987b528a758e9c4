from typing import Dict
from packages.ais_usage.repository import UsageCounterStore

class MemoryUsageCounterStore(UsageCounterStore):
    """
    In-memory implementation of UsageCounterStore.
    Used for local development and testing.
    """
    def __init__(self, initial: Dict[str, int] = None):
        self._counts: Dict[str, int] = dict(initial or {})

    def get(self, date_key: str) -> int:
        return self._counts.get(date_key, 0)

    def increment(self, date_key: str) -> int:
        self._counts[date_key] = self.get(date_key) + 1
        return self._counts[date_key]

    def clear(self) -> None:
        self._counts.clear()
