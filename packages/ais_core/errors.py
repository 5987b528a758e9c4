from typing import Optional, Dict, Any

class AISBaseError(Exception):
    """
    Root exception for AI Interview Studio.
    Every custom exception derives from this class.

    Attributes:
        code (str): error identifier (e.g. 'CONF_Error')
        message (str): human readable message
        details (Optional[Dict[str, Any]]): extra debugging info
    """
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code}] {message}")

class ConfigurationError(AISBaseError):
    """Raised when settings cannot be loaded or validated."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONF_Error", message=message, details=details)

class QuestionBankError(AISBaseError):
    """Raised when a question bank source cannot be parsed."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="QBANK_Error", message=message, details=details)

class ProviderError(AISBaseError):
    """
    Failure of an external collaborator (narration, transcription, recording).
    The controller recovers from these locally; they never end an interview.
    """

class NarrationError(ProviderError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="TTS_Error", message=message, details=details)

class TranscriptionError(ProviderError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="STT_Error", message=message, details=details)

class RecordingError(ProviderError):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="REC_Error", message=message, details=details)

class SessionNotFoundError(AISBaseError):
    """Raised when a session id does not resolve to a live interview."""
    def __init__(self, session_id: str):
        super().__init__(code="SESSION_NotFound", message=f"Session {session_id} not found", details={"session_id": session_id})
