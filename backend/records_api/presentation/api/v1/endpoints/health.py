"""Liveness endpoint reporting the active record-store policies."""

from fastapi import APIRouter, Depends

from records_api.config import Settings, get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "store": {
            "update_policy": settings.record_update_policy.value,
            "delete_policy": settings.record_delete_policy.value,
            "write_success_status": settings.write_success_status,
        },
    }
