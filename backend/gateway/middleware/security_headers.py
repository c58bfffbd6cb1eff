"""
Board Gateway - Security Headers Middleware
============================================

What:  Adds browser hardening headers to every response.
How:   Sets a fixed header set after the route handler returns. Headers the
       handler already set are left untouched.

Header Set:
    X-Content-Type-Options: nosniff          → no MIME sniffing
    X-Frame-Options: SAMEORIGIN               → clickjacking protection
    Referrer-Policy: no-referrer
    Strict-Transport-Security                 → HTTPS only for 180 days
    Content-Security-Policy                   → skipped for the Swagger UI,
                                                which loads its assets from a CDN
"""

from typing import Dict

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from gateway.config import settings

SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; base-uri 'self'; font-src 'self' https: data:; "
    "form-action 'self'; frame-ancestors 'self'; img-src 'self' data:; "
    "object-src 'none'; script-src 'self'; style-src 'self' https: 'unsafe-inline'"
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Applies SECURITY_HEADERS (and a CSP outside the docs) to each response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)

        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)

        if not request.url.path.startswith(settings.docs_url):
            response.headers.setdefault("Content-Security-Policy", CONTENT_SECURITY_POLICY)

        return response
