from abc import ABC, abstractmethod
from typing import Optional

from .engine import InterviewController

class SessionRegistry(ABC):
    """
    Holds live interview controllers between requests.
    Controllers carry in-flight guards and provider handles, so they are
    kept as objects rather than serialized.
    """
    @abstractmethod
    def save(self, controller: InterviewController) -> None:
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[InterviewController]:
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        pass
