"""Security headers middleware.

Adds the Content-Security-Policy (rebuilt for every request, see
``uix.csp``) and the usual hardening headers to every response.
HSTS and X-Frame-Options are off.
"""

from dataclasses import dataclass
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from uix.config import StartupConfig
from uix.csp import build_request_csp, serialize_csp


@dataclass(frozen=True)
class SecurityHeadersConfig:
    """Static header values. ``None`` disables a header."""

    referrer_policy: Optional[str] = "no-referrer"
    x_content_type_options: Optional[str] = "nosniff"
    x_dns_prefetch_control: Optional[str] = "off"
    x_download_options: Optional[str] = "noopen"
    x_xss_protection: Optional[str] = "1; mode=block"
    strict_transport_security: Optional[str] = None
    x_frame_options: Optional[str] = None

    def headers(self) -> dict:
        values = {
            "Referrer-Policy": self.referrer_policy,
            "X-Content-Type-Options": self.x_content_type_options,
            "X-DNS-Prefetch-Control": self.x_dns_prefetch_control,
            "X-Download-Options": self.x_download_options,
            "X-XSS-Protection": self.x_xss_protection,
            "Strict-Transport-Security": self.strict_transport_security,
            "X-Frame-Options": self.x_frame_options,
        }
        return {name: value for name, value in values.items() if value is not None}


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Injects CSP and hardening headers into all HTTP responses."""

    def __init__(self, app, startup: StartupConfig, config: Optional[SecurityHeadersConfig] = None):
        super().__init__(app)
        self.startup = startup
        self.config = config or SecurityHeadersConfig()

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers.update(self.config.headers())
        response.headers["Content-Security-Policy"] = serialize_csp(
            build_request_csp(request, self.startup)
        )
        if "x-powered-by" in response.headers:
            del response.headers["x-powered-by"]
        return response
