from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status

from AIS.api.schemas import (
    SessionCreateRequest,
    SelectionRequest,
    AnswerUpdateRequest,
    VoiceRequest,
    TickRequest,
    SessionResponse,
    to_session_response,
)
from AIS.api.dependencies import get_interview_service
from packages.ais_core.errors import SessionNotFoundError
from packages.ais_report.dto import InterviewReport
from packages.ais_service.interview_service import InterviewService
from packages.ais_session.dto import ActionOutcome, InterviewSelection
from packages.ais_session.engine import InterviewController
from packages.ais_session.state import RejectionReason

router = APIRouter(prefix="/interviews", tags=["Interview"])

# Rejections that are part of the normal flow; returned as 200 with the outcome attached.
SOFT_REJECTIONS = {
    RejectionReason.QUOTA_EXCEEDED,
    RejectionReason.TRANSCRIPTION_FAILED,
}

AUDIO_MEDIA_TYPES = {"mp3": "audio/mpeg", "opus": "audio/ogg", "aac": "audio/aac", "wav": "audio/wav"}

def _controller(service: InterviewService, session_id: str) -> InterviewController:
    try:
        return service.get_controller(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

def _respond(controller: InterviewController, outcome: ActionOutcome) -> SessionResponse:
    """
    Map a controller outcome to an HTTP response.
    In-flight turns are 409 (fail-fast), missing voice backends 503, other rejections 400.
    """
    if outcome.accepted or outcome.reason in SOFT_REJECTIONS:
        return to_session_response(controller, outcome)
    if outcome.reason == RejectionReason.OPERATION_IN_FLIGHT:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=outcome.reason.value)
    if outcome.reason in (RejectionReason.TRANSCRIPTION_UNAVAILABLE, RejectionReason.RECORDING_UNAVAILABLE):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=outcome.reason.value)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.reason.value)

@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def create_interview(
    request: SessionCreateRequest,
    service: InterviewService = Depends(get_interview_service)
):
    """
    Create a session in the setup stage, optionally with a preselected configuration.
    """
    controller = service.create_session(voice_enabled=request.voice_enabled)
    rejected = service.apply_selection(
        controller,
        InterviewSelection(role=request.role, level=request.level, duration_minutes=request.duration_minutes),
    )
    if rejected:
        service.delete_session(controller.session_id)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=rejected[0].reason.value)
    return to_session_response(controller)

@router.get("/{session_id}", response_model=SessionResponse)
def get_interview(session_id: str, service: InterviewService = Depends(get_interview_service)):
    return to_session_response(_controller(service, session_id))

@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_interview(session_id: str, service: InterviewService = Depends(get_interview_service)):
    try:
        service.delete_session(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.put("/{session_id}/selection", response_model=SessionResponse)
def update_selection(
    session_id: str,
    request: SelectionRequest,
    service: InterviewService = Depends(get_interview_service)
):
    controller = _controller(service, session_id)
    rejected = service.apply_selection(controller, InterviewSelection(**request.model_dump()))
    if rejected:
        return _respond(controller, rejected[0])
    return to_session_response(controller, ActionOutcome.ok())

@router.post("/{session_id}/start", response_model=SessionResponse)
async def start_interview(session_id: str, service: InterviewService = Depends(get_interview_service)):
    """
    Start the interview. Out of free interviews -> 200 with the paywall shown.
    """
    controller = _controller(service, session_id)
    return _respond(controller, await controller.start_interview())

@router.put("/{session_id}/answer", response_model=SessionResponse)
def update_answer(
    session_id: str,
    request: AnswerUpdateRequest,
    service: InterviewService = Depends(get_interview_service)
):
    controller = _controller(service, session_id)
    return _respond(controller, controller.update_answer(request.text))

@router.post("/{session_id}/submit", response_model=SessionResponse)
async def submit_answer(session_id: str, service: InterviewService = Depends(get_interview_service)):
    """
    Grade the pending answer and move on.
    A second submit while one is being graded gets 409 instead of a duplicate record.
    """
    controller = _controller(service, session_id)
    return _respond(controller, await controller.submit_answer())

@router.post("/{session_id}/transcription", response_model=SessionResponse)
async def upload_transcription(
    session_id: str,
    audio: UploadFile = File(...),
    service: InterviewService = Depends(get_interview_service)
):
    """
    Transcribe a recorded clip and append it to the pending answer.
    """
    controller = _controller(service, session_id)
    data = await audio.read()
    return _respond(controller, await controller.append_transcription(data))

@router.post("/{session_id}/previous", response_model=SessionResponse)
async def previous_question(session_id: str, service: InterviewService = Depends(get_interview_service)):
    controller = _controller(service, session_id)
    return _respond(controller, await controller.previous_question())

@router.post("/{session_id}/repeat", response_model=SessionResponse)
async def repeat_question(session_id: str, service: InterviewService = Depends(get_interview_service)):
    controller = _controller(service, session_id)
    return _respond(controller, await controller.repeat_question())

@router.post("/{session_id}/hints", response_model=SessionResponse)
def toggle_hints(session_id: str, service: InterviewService = Depends(get_interview_service)):
    controller = _controller(service, session_id)
    controller.toggle_hints()
    return to_session_response(controller)

@router.post("/{session_id}/paywall/dismiss", response_model=SessionResponse)
def dismiss_paywall(session_id: str, service: InterviewService = Depends(get_interview_service)):
    controller = _controller(service, session_id)
    controller.dismiss_paywall()
    return to_session_response(controller)

@router.put("/{session_id}/voice", response_model=SessionResponse)
def set_voice(
    session_id: str,
    request: VoiceRequest,
    service: InterviewService = Depends(get_interview_service)
):
    controller = _controller(service, session_id)
    controller.set_voice_enabled(request.enabled)
    return to_session_response(controller)

@router.post("/{session_id}/tick", response_model=SessionResponse)
def tick(
    session_id: str,
    request: TickRequest,
    service: InterviewService = Depends(get_interview_service)
):
    """
    Advance the elapsed timer. The client drives the clock.
    """
    controller = _controller(service, session_id)
    controller.tick(request.seconds)
    return to_session_response(controller)

@router.post("/{session_id}/reset", response_model=SessionResponse)
def new_interview(session_id: str, service: InterviewService = Depends(get_interview_service)):
    controller = _controller(service, session_id)
    return _respond(controller, controller.new_interview())

@router.get("/{session_id}/report", response_model=InterviewReport)
def get_report(session_id: str, service: InterviewService = Depends(get_interview_service)):
    try:
        return service.build_report(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

@router.get("/{session_id}/narration/{index}")
def get_narration_audio(session_id: str, index: int, service: InterviewService = Depends(get_interview_service)):
    """
    Synthesized audio for one line of the session's narration log.
    """
    controller = _controller(service, session_id)
    speech = controller.narration_audio(index)
    if speech is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No audio for this narration line")
    return Response(content=speech.audio, media_type=AUDIO_MEDIA_TYPES.get(speech.audio_format, "application/octet-stream"))
