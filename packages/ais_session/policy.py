from enum import Enum
from abc import ABC, abstractmethod
from typing import Optional

class PlanTier(str, Enum):
    FREE = "FREE"
    PREMIUM = "PREMIUM"

class UsagePolicy(ABC):
    """
    Decides how many interviews may be started per day.
    The controller consults the policy; the policy never changes controller state.
    """

    @property
    @abstractmethod
    def tier(self) -> PlanTier:
        pass

    @property
    @abstractmethod
    def daily_limit(self) -> Optional[int]:
        """None means unlimited."""
        pass

    def has_reached_limit(self, count_today: int) -> bool:
        return self.daily_limit is not None and count_today >= self.daily_limit

    def remaining(self, count_today: int) -> Optional[int]:
        if self.daily_limit is None:
            return None
        return max(0, self.daily_limit - count_today)

class FreeTierPolicy(UsagePolicy):
    def __init__(self, limit: int = 3):
        if limit < 0:
            raise ValueError("Daily limit cannot be negative")
        self._limit = limit

    @property
    def tier(self) -> PlanTier:
        return PlanTier.FREE

    @property
    def daily_limit(self) -> Optional[int]:
        return self._limit

class PremiumPolicy(UsagePolicy):
    @property
    def tier(self) -> PlanTier:
        return PlanTier.PREMIUM

    @property
    def daily_limit(self) -> Optional[int]:
        return None

def get_policy(tier: PlanTier, free_limit: int = 3) -> UsagePolicy:
    """Factory to get policy instance."""
    if tier == PlanTier.FREE:
        return FreeTierPolicy(free_limit)
    elif tier == PlanTier.PREMIUM:
        return PremiumPolicy()
    else:
        raise ValueError(f"Unknown tier: {tier}")
