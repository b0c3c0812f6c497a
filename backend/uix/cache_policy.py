"""Cache-Control policy per asset class.

The SPA shell references hashed bundle filenames that change on every
deploy, so it must be revalidated on each load. Everything else under the
public root (and the login wallpaper) may be cached forever.
"""

import enum
from typing import Dict

from starlette.responses import Response


class AssetClass(str, enum.Enum):
    STATIC_IMMUTABLE = "static_immutable"
    DYNAMIC_NO_CACHE = "dynamic_no_cache"


_POLICIES: Dict[AssetClass, Dict[str, str]] = {
    AssetClass.STATIC_IMMUTABLE: {
        "Cache-Control": "public, max-age=31536000, immutable",
    },
    AssetClass.DYNAMIC_NO_CACHE: {
        "Cache-Control": "no-cache, no-store, must-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
    },
}

# Every header name either policy may set
_POLICY_HEADERS = {name for headers in _POLICIES.values() for name in headers}


def resolve_cache_policy(asset_class: AssetClass) -> Dict[str, str]:
    """Return the header set for an asset class (a fresh copy)."""
    return dict(_POLICIES[asset_class])


def apply_cache_policy(response: Response, asset_class: AssetClass) -> Response:
    """Replace any caching headers on ``response`` with the policy's set."""
    for name in _POLICY_HEADERS:
        if name in response.headers:
            del response.headers[name]
    response.headers.update(resolve_cache_policy(asset_class))
    return response
