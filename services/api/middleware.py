import logging
from typing import Iterable

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """
    Reject requests whose Origin header is not allow-listed.

    CORSMiddleware alone only withholds the CORS headers for an unknown
    origin; the request still reaches the route. This middleware stops it
    first. Requests without an Origin header are let through.
    """

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = {o.rstrip("/") for o in allowed_origins}

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and "*" not in self.allowed_origins and origin.rstrip("/") not in self.allowed_origins:
            logger.warning(f"Rejected request from origin {origin} to {request.url.path}")
            return JSONResponse(status_code=403, content={"error": "Not allowed by CORS"})
        return await call_next(request)
