from abc import ABC, abstractmethod
from datetime import date, datetime, timedelta
from typing import Optional

class Clock(ABC):
    """
    Source of "now" and "today". Injected so quota checks are testable.
    """
    @abstractmethod
    def now(self) -> datetime:
        pass

    def today_key(self) -> str:
        return self.now().date().isoformat()

class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now()

class FixedClock(Clock):
    """Clock frozen at a given instant; advance() moves it forward."""
    def __init__(self, instant: Optional[datetime] = None):
        self._instant = instant or datetime(2024, 1, 1, 9, 0, 0)

    def now(self) -> datetime:
        return self._instant

    def advance(self, **kwargs) -> None:
        self._instant = self._instant + timedelta(**kwargs)

    def set_date(self, day: date) -> None:
        self._instant = datetime.combine(day, self._instant.time())
