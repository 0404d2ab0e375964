"""Double-submit CSRF guard for the roster form posts."""
from __future__ import annotations

import secrets
from urllib import parse as urlparse

from fastapi import Form, HTTPException, Request, Response

CSRF_COOKIE_NAME = "csrf_token"
CSRF_FIELD_NAME = "csrf_token"
CSRF_HEADER_NAME = "x-csrf-token"
CSRF_COOKIE_MAX_AGE = 7 * 24 * 60 * 60


def page_token(request: Request) -> str:
    """Reuse the browser's token when it looks sane, otherwise mint a new one."""
    token = request.cookies.get(CSRF_COOKIE_NAME)
    if token and len(token) >= 16:
        return token
    return secrets.token_urlsafe(32)


def attach_token(response: Response, token: str, *, secure: bool) -> None:
    response.set_cookie(
        CSRF_COOKIE_NAME,
        token,
        max_age=CSRF_COOKIE_MAX_AGE,
        httponly=False,
        secure=secure,
        samesite="strict",
        path="/",
    )


def _same_origin(request: Request) -> bool:
    source = request.headers.get("origin") or request.headers.get("referer") or ""
    if not source:
        return True
    try:
        parsed = urlparse.urlparse(source)
    except ValueError:
        return False
    host = (request.headers.get("host") or "").split(":", 1)[0].lower()
    source_host = (parsed.hostname or "").lower()
    if source_host and host and source_host != host:
        return False
    if parsed.scheme and parsed.scheme != request.url.scheme:
        return False
    return True


def check_token(request: Request, supplied: str | None) -> None:
    """Raise 403 unless the supplied token matches the cookie and the origin is ours."""
    cookie_token = request.cookies.get(CSRF_COOKIE_NAME)
    token = (supplied or "").strip() or (request.headers.get(CSRF_HEADER_NAME) or "").strip()
    if not cookie_token or not token:
        raise HTTPException(403, "Missing CSRF token.")
    if not secrets.compare_digest(cookie_token, token):
        raise HTTPException(403, "Invalid CSRF token.")
    if not _same_origin(request):
        raise HTTPException(403, "Invalid origin.")


def require_csrf(request: Request, csrf_token: str = Form("")) -> None:
    """FastAPI dependency for form endpoints."""
    check_token(request, csrf_token)
