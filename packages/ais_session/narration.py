"""
Lines spoken by the interviewer.
"""
from typing import Optional

INTERVIEWER_NAME = "Alex"

INTRO_LINE = f"Hi! I'm {INTERVIEWER_NAME}, your AI interviewer. Let's get started with your technical interview!"

COMPLETION_LINE = (
    "Congratulations! You've completed the interview. You did a great job today! "
    "Let me show you your detailed results and feedback."
)

VOICE_TEST_LINE = (
    f"Hello! I'm {INTERVIEWER_NAME}, your AI interviewer. "
    "I'll help you practice technical interviews with voice feedback."
)

def paywall_line(daily_limit: Optional[int]) -> str:
    return (
        f"I'm sorry, but you've used all {daily_limit} of your free interviews for today. "
        "To continue practicing, please upgrade to premium for unlimited interviews!"
    )

def feedback_line(score: int, is_last_question: bool) -> str:
    if score >= 85:
        if is_last_question:
            return "That was fantastic! You really nailed the key concepts there. Excellent work on this final question!"
        return "That was fantastic! You really nailed the key concepts there. I'm impressed with your depth of knowledge."
    if score >= 70:
        return "Nice work! You covered the important points well. That shows solid understanding."
    if is_last_question:
        return "Thanks for your answer. There's definitely room to expand on some of those concepts."
    return "Thanks for your answer. There's definitely room to expand on some of those concepts. Let's keep going!"
