"""Static bundle serving with a permanent cache policy."""

import os
import stat
from typing import Iterable, Optional

import anyio.to_thread
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from uix.cache_policy import AssetClass, apply_cache_policy


class BundleStaticFiles(StaticFiles):
    """StaticFiles over the public root whose responses are cached forever.

    Used by the catch-all route rather than mounted, so a miss falls
    through to the SPA shell instead of raising a 404. Files listed in
    ``exclude`` are always misses, whatever URL alias reaches them.
    """

    def __init__(self, *, exclude: Iterable[str | os.PathLike] = (), **kwargs) -> None:
        super().__init__(**kwargs)
        self.excluded = frozenset(os.path.realpath(p) for p in exclude)

    def file_response(self, full_path, stat_result, scope, status_code=200) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        return apply_cache_policy(response, AssetClass.STATIC_IMMUTABLE)

    async def serve(self, path: str, scope: Scope) -> Optional[Response]:
        """Response for ``path`` (URL form, no leading slash), or None on a miss.

        Directories, missing files, excluded files and paths escaping the
        root are misses.
        """
        relative = os.path.normpath(os.path.join(*path.split("/")))
        full_path, stat_result = await anyio.to_thread.run_sync(self.lookup_path, relative)
        if stat_result is None or not stat.S_ISREG(stat_result.st_mode):
            return None
        if os.path.realpath(full_path) in self.excluded:
            return None
        return self.file_response(full_path, stat_result, scope)
