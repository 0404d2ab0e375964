"""Baseline security headers added to every roster response."""
from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware

ROSTER_CSP = "default-src 'self'; style-src 'self'; script-src 'self'; connect-src 'self'"
HSTS_VALUE = "max-age=31536000; includeSubDomains"


def baseline_headers(*, enforce_hsts: bool) -> dict[str, str]:
    headers = {
        "Content-Security-Policy": ROSTER_CSP,
        "X-Frame-Options": "DENY",
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "no-referrer-when-downgrade",
    }
    if enforce_hsts:
        headers["Strict-Transport-Security"] = HSTS_VALUE
    return headers


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Fill in the baseline headers a handler did not set itself."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._headers = baseline_headers(enforce_hsts=enforce_hsts)

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        for name, value in self._headers.items():
            response.headers.setdefault(name, value)
        return response
