from fastapi import APIRouter, Depends, status

from AIS.api.schemas import CatalogResponse, RoleOption, LevelOption, UsageResponse
from AIS.api.dependencies import get_interview_service
from packages.ais_providers.tts.openai_impl import AVAILABLE_VOICES
from packages.ais_qbank.domain import ROLE_LABELS, LEVEL_DESCRIPTIONS, DURATION_CHOICES
from packages.ais_service.interview_service import InterviewService

router = APIRouter(tags=["Catalog"])

@router.get("/catalog", response_model=CatalogResponse)
def get_catalog(service: InterviewService = Depends(get_interview_service)):
    """
    Options for the setup screen. Only roles with questions are listed.
    """
    available = set(service.question_bank.roles())
    return CatalogResponse(
        roles=[RoleOption(id=role, label=label) for role, label in ROLE_LABELS.items() if role in available],
        levels=[
            LevelOption(id=level, label=label, description=description)
            for level, (label, description) in LEVEL_DESCRIPTIONS.items()
        ],
        durations=list(DURATION_CHOICES),
        voices=dict(AVAILABLE_VOICES),
    )

@router.get("/usage", response_model=UsageResponse)
def get_usage(service: InterviewService = Depends(get_interview_service)):
    used = service.interviews_used_today()
    return UsageResponse(
        date=service.clock.today_key(),
        used=used,
        limit=service.policy.daily_limit,
        remaining=service.policy.remaining(used),
    )

@router.delete("/usage", status_code=status.HTTP_204_NO_CONTENT)
def reset_usage(service: InterviewService = Depends(get_interview_service)):
    """
    Demo reset of today's interview count.
    """
    service.reset_daily_usage()
