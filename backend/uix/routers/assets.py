"""Explicit page routes: the SPA shell at / and the login wallpaper."""

from fastapi import APIRouter, Depends
from starlette.responses import FileResponse, PlainTextResponse, Response

from uix.cache_policy import AssetClass, apply_cache_policy
from uix.config import AppConfig
from uix.dependencies import get_app_config
from uix.errors import WallpaperNotFound
from uix.spa import shell_response
from uix.wallpaper import resolve_wallpaper

router = APIRouter(include_in_schema=False)

WALLPAPER_MEDIA_TYPE = "image/jpg"

# HEAD must resolve exactly like GET, not fall through to the catch-all
PAGE_METHODS = ["GET", "HEAD"]


@router.api_route("/", methods=PAGE_METHODS)
async def index(config: AppConfig = Depends(get_app_config)):
    """Serve the SPA shell document without caching."""
    return shell_response(config)


@router.api_route("/assets/snapshot.jpg", methods=PAGE_METHODS)
async def login_wallpaper(config: AppConfig = Depends(get_app_config)):
    """Serve the custom login wallpaper, or the bundled default."""
    try:
        image = await resolve_wallpaper(config)
    except WallpaperNotFound:
        return PlainTextResponse("Not Found", status_code=404)

    if image.is_custom:
        response = Response(content=image.content, media_type=WALLPAPER_MEDIA_TYPE)
    else:
        response = FileResponse(str(image.path), media_type=WALLPAPER_MEDIA_TYPE)
    return apply_cache_policy(response, image.asset_class)
