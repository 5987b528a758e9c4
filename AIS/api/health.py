from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from AIS.api.dependencies import get_config
from packages.ais_core.config import AISConfig

router = APIRouter()

@router.get("/health")
async def health_check(config: AISConfig = Depends(get_config)):
    """
    Server Liveness Probe.
    Returns status, version, voice availability and current timestamp.
    """
    return {
        "status": "ok",
        "version": config.VERSION,
        "voice": config.voice_available,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }
