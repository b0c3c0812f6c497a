"""Content-Security-Policy construction.

All directives are fixed except ``connect-src``, which is computed per
request from the Host header so the browser may open WebSockets back to
whatever address it used to reach the server.
"""

from typing import Dict, List, Optional

from starlette.requests import Request

from uix.config import StartupConfig

FIXED_DIRECTIVES: Dict[str, List[str]] = {
    "default-src": ["'self'"],
    "script-src": ["'self'", "'unsafe-inline'", "'unsafe-eval'"],
    "style-src": ["'self'", "'unsafe-inline'"],
    "img-src": ["'self'", "data:", "https://raw.githubusercontent.com"],
    "worker-src": ["blob:"],
}


def websocket_sources(host: Optional[str], ws_override: Optional[str] = None) -> str:
    """WebSocket sources for ``connect-src``.

    A missing host yields empty host segments rather than an error; the
    override is appended as-is.
    """
    host = host or ""
    return f"wss://{host} ws://{host} {ws_override or ''}"


def build_csp(host: Optional[str], ws_override: Optional[str] = None) -> Dict[str, List[str]]:
    """Return the full directive set for a request arriving on ``host``."""
    directives = {name: list(sources) for name, sources in FIXED_DIRECTIVES.items()}
    directives["connect-src"] = ["'self'", websocket_sources(host, ws_override)]
    return directives


def directive_value(sources: List[str]) -> str:
    return " ".join(sources)


def serialize_csp(directives: Dict[str, List[str]]) -> str:
    """Render directives as a header value: ``name value;name value``."""
    return ";".join(f"{name} {directive_value(sources)}" for name, sources in directives.items())


def build_request_csp(request: Request, startup: StartupConfig) -> Dict[str, List[str]]:
    return build_csp(request.headers.get("host"), startup.csp_ws_override)
