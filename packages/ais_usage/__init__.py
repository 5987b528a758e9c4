from .repository import UsageCounterStore
from .clock import Clock, SystemClock, FixedClock
from .infrastructure.memory_repo import MemoryUsageCounterStore
from .infrastructure.file_repo import FileUsageCounterStore

__all__ = [
    "UsageCounterStore",
    "Clock",
    "SystemClock",
    "FixedClock",
    "MemoryUsageCounterStore",
    "FileUsageCounterStore",
]
