"""SPA shell serving and the catch-all route.

The catch-all is registered after every other route, so it only sees
requests nothing else matched. It applies, in order:

1. paths under the API prefix -> 404 from the API error pipeline
2. GET/HEAD of an existing file in the public root (other than the shell
   document itself) -> that file
3. anything else -> the shell document, so client-side routing takes over
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from starlette.responses import FileResponse, Response

from uix.cache_policy import AssetClass, apply_cache_policy
from uix.config import AppConfig
from uix.dependencies import get_app_config, get_bundle
from uix.static import BundleStaticFiles

logger = logging.getLogger(__name__)

API_PREFIX = "/api"

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

router = APIRouter()


def is_api_path(path: str, prefix: str = API_PREFIX) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def shell_response(config: AppConfig) -> Response:
    """The index document, never cached."""
    response = FileResponse(str(config.shell_document), media_type="text/html")
    return apply_cache_policy(response, AssetClass.DYNAMIC_NO_CACHE)


@router.api_route("/{full_path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
async def spa_fallback(
    request: Request,
    full_path: str,
    config: AppConfig = Depends(get_app_config),
    bundle: BundleStaticFiles = Depends(get_bundle),
):
    if is_api_path(request.url.path):
        raise HTTPException(status_code=404, detail="Not Found")

    if request.method in ("GET", "HEAD"):
        response = await bundle.serve(full_path, request.scope)
        if response is not None:
            return response

    logger.debug(f"No route for {request.method} {request.url.path}, serving SPA shell")
    return shell_response(config)
