"""API subtree mounted under /api."""

from fastapi import APIRouter, Depends

from uix.config import AppConfig
from uix.dependencies import get_app_config
from uix.schemas import HealthResponse, UiSettingsResponse
from uix.spa import API_PREFIX

router = APIRouter(prefix=API_PREFIX, tags=["API"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe."""
    return HealthResponse(status="healthy")


@router.get("/settings", response_model=UiSettingsResponse)
async def get_ui_settings(config: AppConfig = Depends(get_app_config)):
    """Public UI settings needed by the login page before authentication."""
    return UiSettingsResponse(
        version=config.package.version,
        port=config.ui.port,
        custom_wallpaper=config.ui.login_wallpaper is not None,
    )
