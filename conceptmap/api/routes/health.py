from fastapi import APIRouter, Depends

from conceptmap.api.deps import get_settings
from conceptmap.config.settings import Settings

router = APIRouter()


@router.get("/health")
async def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    return {
        "status": "ok",
        "pipeline_mode": settings.pipeline_mode,
        "generation_provider": settings.generation_provider,
    }
