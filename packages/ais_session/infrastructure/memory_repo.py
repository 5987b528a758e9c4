from typing import Dict, Optional
from packages.ais_session.engine import InterviewController
from packages.ais_session.repository import SessionRegistry

class MemorySessionRegistry(SessionRegistry):
    """
    In-memory SessionRegistry.
    Sessions are lost on restart; the daily usage counter is stored separately.
    """
    def __init__(self):
        self._store: Dict[str, InterviewController] = {}

    def save(self, controller: InterviewController) -> None:
        self._store[controller.session_id] = controller

    def get(self, session_id: str) -> Optional[InterviewController]:
        return self._store.get(session_id)

    def delete(self, session_id: str) -> bool:
        return self._store.pop(session_id, None) is not None
