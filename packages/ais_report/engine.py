from typing import Dict, List

from packages.ais_eval.rules import round_half_up
from packages.ais_qbank.domain import Question, ROLE_LABELS, LEVEL_DESCRIPTIONS
from packages.ais_session.dto import SessionContext
from packages.ais_report.dto import InterviewReport, ReportHeader, ReportDetail, ScoreTier

EXCELLENT_FROM = 85
GOOD_FROM = 70

def score_tier(score: int) -> ScoreTier:
    if score >= EXCELLENT_FROM:
        return ScoreTier.EXCELLENT
    if score >= GOOD_FROM:
        return ScoreTier.GOOD
    return ScoreTier.NEEDS_WORK

def format_elapsed(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"

class ReportGenerator:
    """
    Converts a finished (or partial) SessionContext into an InterviewReport.
    """

    @staticmethod
    def generate(context: SessionContext, questions: List[Question]) -> InterviewReport:
        by_id: Dict[str, Question] = {q.id: q for q in questions}
        answers = context.answers

        overall = 0
        if answers:
            overall = round_half_up(sum(a.score for a in answers) / len(answers))

        selection = context.selection
        role_label = ROLE_LABELS.get(selection.role, "") if selection.role else ""
        level_label = LEVEL_DESCRIPTIONS[selection.level][0] if selection.level else ""

        header = ReportHeader(
            overall_score=overall,
            questions_answered=len(answers),
            total_questions=len(questions),
            time_spent=format_elapsed(context.elapsed_seconds),
            excellent_answers=sum(1 for a in answers if a.score >= EXCELLENT_FROM),
            role_label=role_label,
            level_label=level_label,
        )

        details: List[ReportDetail] = []
        for record in answers:
            # Records from a reloaded bank may no longer resolve
            question = by_id.get(record.question_id)
            if question is None:
                continue
            details.append(ReportDetail(
                question_id=record.question_id,
                prompt=question.prompt,
                category=question.category,
                answer=record.answer,
                score=record.score,
                tier=score_tier(record.score),
                feedback=record.feedback,
                strengths=list(record.strengths),
                improvements=list(record.improvements),
            ))

        return InterviewReport(session_id=context.session_id, header=header, details=details)
