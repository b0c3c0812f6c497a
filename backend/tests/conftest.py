"""Shared fixtures: a throwaway static bundle and app/client builders."""

import anyio
import pytest
from httpx import AsyncClient, ASGITransport

from uix.config import AppConfig, StartupConfig, UiSettings
from uix.main import create_app

SHELL_HTML = b"<!doctype html><html><body><app-root></app-root></body></html>"
DEFAULT_WALLPAPER = b"\xff\xd8default-wallpaper\xff\xd9"
BUNDLE_JS = b"console.log('main bundle');"
BUNDLE_FILE = "main.3f2a9c1b.js"
NESTED_CSS = b"body { margin: 0; }"
NESTED_FILE = "assets/app.9d0c2e71.css"


@pytest.fixture
def base_path(tmp_path):
    """A base path laid out like a production build."""
    root = tmp_path / "base"
    public = root / "public"
    (public / "assets").mkdir(parents=True)
    (public / "index.html").write_bytes(SHELL_HTML)
    (public / "assets" / "snapshot.jpg").write_bytes(DEFAULT_WALLPAPER)
    (public / BUNDLE_FILE).write_bytes(BUNDLE_JS)
    (public / NESTED_FILE).write_bytes(NESTED_CSS)
    return root


@pytest.fixture
def make_app(base_path):
    def _make(login_wallpaper=None, csp_ws_override=None):
        startup = StartupConfig(_env_file=None, debug=False, csp_ws_override=csp_ws_override)
        config = AppConfig(
            _env_file=None,
            base_path=base_path,
            ui=UiSettings(port=8080, login_wallpaper=login_wallpaper),
        )
        return create_app(startup, config)

    return _make


@pytest.fixture
def make_client(make_app):
    def _make(**kwargs):
        transport = ASGITransport(app=make_app(**kwargs))
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest.fixture
async def client(make_client):
    async with make_client() as c:
        yield c


async def asgi_request(app, path, method="GET"):
    """Send one request straight to the ASGI app, bypassing URL normalisation.

    Returns (status, headers, body) with lower-cased header names.
    """
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(b"host", b"test")],
        "server": ("test", 80),
        "client": ("127.0.0.1", 50000),
    }
    messages = []
    response_complete = anyio.Event()
    request_sent = False

    async def receive():
        nonlocal request_sent
        if request_sent:
            await response_complete.wait()
            return {"type": "http.disconnect"}
        request_sent = True
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        messages.append(message)
        if message["type"] == "http.response.body" and not message.get("more_body", False):
            response_complete.set()

    await app(scope, receive, send)

    start = messages[0]
    headers = {k.decode().lower(): v.decode() for k, v in start["headers"]}
    body = b"".join(m.get("body", b"") for m in messages[1:])
    return start["status"], headers, body
