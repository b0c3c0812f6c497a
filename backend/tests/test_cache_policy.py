"""Tests for the per-asset-class cache headers."""

from starlette.responses import Response

from uix.cache_policy import AssetClass, apply_cache_policy, resolve_cache_policy


def test_static_immutable_headers():
    assert resolve_cache_policy(AssetClass.STATIC_IMMUTABLE) == {
        "Cache-Control": "public, max-age=31536000, immutable",
    }


def test_dynamic_no_cache_headers():
    assert resolve_cache_policy(AssetClass.DYNAMIC_NO_CACHE) == {
        "Cache-Control": "no-cache, no-store, must-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
    }


def test_resolve_returns_a_copy():
    headers = resolve_cache_policy(AssetClass.STATIC_IMMUTABLE)
    headers["Cache-Control"] = "private"
    assert resolve_cache_policy(AssetClass.STATIC_IMMUTABLE)["Cache-Control"].startswith("public")


def test_apply_replaces_the_other_policy():
    response = apply_cache_policy(Response(b"x"), AssetClass.DYNAMIC_NO_CACHE)
    apply_cache_policy(response, AssetClass.STATIC_IMMUTABLE)
    assert response.headers["cache-control"] == "public, max-age=31536000, immutable"
    assert "pragma" not in response.headers
    assert "expires" not in response.headers
