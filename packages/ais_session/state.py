from enum import Enum

class InterviewStage(str, Enum):
    """
    Interview stages. The paywall is an overlay on SETUP, not a stage.
    setup -> intro -> interview -> complete -> (new interview) setup
    """
    SETUP = "setup"
    INTRO = "intro"
    INTERVIEW = "interview"
    COMPLETE = "complete"

class InterviewerMood(str, Enum):
    THINKING = "thinking"
    LISTENING = "listening"
    SPEAKING = "speaking"
    POSITIVE = "positive"
    NEUTRAL = "neutral"

class SessionEvent(str, Enum):
    """
    Events emitted by the Interview Controller.
    """
    PAYWALL_SHOWN = "PAYWALL_SHOWN"
    INTERVIEW_STARTED = "INTERVIEW_STARTED"
    ANSWER_RECORDED = "ANSWER_RECORDED"
    QUESTION_ADVANCED = "QUESTION_ADVANCED"
    QUESTION_REWOUND = "QUESTION_REWOUND"
    INTERVIEW_COMPLETED = "INTERVIEW_COMPLETED"
    TRANSCRIPT_APPENDED = "TRANSCRIPT_APPENDED"
    SESSION_RESET = "SESSION_RESET"

class RejectionReason(str, Enum):
    """
    Why a request left the session unchanged. None of these are errors.
    """
    WRONG_STAGE = "WRONG_STAGE"
    INVALID_SELECTION = "INVALID_SELECTION"
    CONFIG_INCOMPLETE = "CONFIG_INCOMPLETE"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"
    EMPTY_ANSWER = "EMPTY_ANSWER"
    OPERATION_IN_FLIGHT = "OPERATION_IN_FLIGHT"
    AT_FIRST_QUESTION = "AT_FIRST_QUESTION"
    NO_QUESTIONS = "NO_QUESTIONS"
    ALREADY_RECORDING = "ALREADY_RECORDING"
    NOT_RECORDING = "NOT_RECORDING"
    RECORDING_UNAVAILABLE = "RECORDING_UNAVAILABLE"
    TRANSCRIPTION_UNAVAILABLE = "TRANSCRIPTION_UNAVAILABLE"
    RECORDING_FAILED = "RECORDING_FAILED"
    TRANSCRIPTION_FAILED = "TRANSCRIPTION_FAILED"
