from abc import ABC, abstractmethod
from typing import List
from .domain import Question, InterviewRole

class QuestionBank(ABC):
    """
    Read-only source of the ordered question list for each role.
    """

    @abstractmethod
    def get_questions(self, role: InterviewRole) -> List[Question]:
        """Ordered questions for a role. Unknown role yields an empty list."""
        pass

    @abstractmethod
    def roles(self) -> List[InterviewRole]:
        """Roles that have at least one question."""
        pass
