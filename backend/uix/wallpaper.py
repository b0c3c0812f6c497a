"""Login page wallpaper resolution.

The custom wallpaper path is checked on every request so operators can
add, replace or remove the file without restarting the server.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import anyio

from uix.cache_policy import AssetClass
from uix.config import AppConfig
from uix.errors import WallpaperNotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageSource:
    """Where the wallpaper bytes come from.

    ``content`` is set for a custom wallpaper (read in full); the bundled
    default is left for the static file handler to stream from ``path``.
    """

    path: Path
    content: Optional[bytes] = None
    asset_class: AssetClass = AssetClass.STATIC_IMMUTABLE

    @property
    def is_custom(self) -> bool:
        return self.content is not None


async def resolve_wallpaper(config: AppConfig) -> ImageSource:
    """Return the wallpaper to serve.

    Raises WallpaperNotFound when the wallpaper to serve (custom or the
    bundled default) is missing; the error is logged here.
    """
    custom = config.ui.login_wallpaper
    if not custom:
        default = config.default_wallpaper
        if not await anyio.Path(default).is_file():
            logger.error(f"Default Login Wallpaper does not exist: {default}")
            raise WallpaperNotFound(default)
        return ImageSource(path=default)

    path = anyio.Path(custom)
    if not await path.exists():
        logger.error(f"Custom Login Wallpaper does not exist: {custom}")
        raise WallpaperNotFound(custom)

    resolved = await path.resolve()
    try:
        content = await resolved.read_bytes()
    except FileNotFoundError as e:
        # Removed between the existence check and the read
        logger.error(f"Custom Login Wallpaper does not exist: {custom}")
        raise WallpaperNotFound(custom) from e
    return ImageSource(path=Path(resolved), content=content)
