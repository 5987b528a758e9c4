from .state import InterviewStage, InterviewerMood, SessionEvent, RejectionReason
from .dto import InterviewSelection, AnswerRecord, SessionContext, ControllerTimings, ActionOutcome
from .policy import PlanTier, UsagePolicy, FreeTierPolicy, PremiumPolicy, get_policy
from .engine import InterviewController
