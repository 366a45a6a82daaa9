"""CORS + request size middleware."""

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from slack_notify.config import settings

CORS_ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_origin,
        "Access-Control-Allow-Headers": CORS_ALLOW_HEADERS,
    }


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """
    Permissive CORS for browser callers.

    Preflight (OPTIONS) requests are answered directly with an empty body;
    every other response gets the same headers added.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=cors_headers())

        response = await call_next(request)
        for header, value in cors_headers().items():
            response.headers[header] = value
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests with bodies larger than 1 MB."""

    MAX_BODY_SIZE = 1024 * 1024

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > self.MAX_BODY_SIZE:
            return JSONResponse(
                status_code=413,
                content={
                    "error": f"Request body too large. Max size is {self.MAX_BODY_SIZE // (1024 * 1024)} MB."
                },
            )

        return await call_next(request)
