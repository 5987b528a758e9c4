from abc import ABC, abstractmethod

class UsageCounterStore(ABC):
    """
    Interface for the daily interview counter, keyed by a calendar date string.
    A count never decreases within its date.
    """
    @abstractmethod
    def get(self, date_key: str) -> int:
        pass

    @abstractmethod
    def increment(self, date_key: str) -> int:
        """Add one interview to the date and return the new count."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every stored count (demo reset)."""
        pass
