"""Zugangskontrolle für das Chat-Completion Gateway: prüft vor jedem Routing
den API-Key-Header gegen den konfigurierten Token."""
import logging
from typing import Iterable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

INVALID_TOKEN_BODY = {"error": "Invalid API token"}


class ApiKeyGate(BaseHTTPMiddleware):
    """Weist jede Anfrage ohne passenden API-Key mit 403 ab, bevor ein
    Handler (oder die Body-Validierung) läuft.

    Der Token wird beim Aufbau übergeben und nicht aus globalem Zustand
    gelesen, damit Tests eigene Credentials injizieren können.
    """

    def __init__(
        self,
        app,
        api_token: str,
        header_name: str = "api-key",
        exempt_paths: Iterable[str] = ("/health",),
    ) -> None:
        super().__init__(app)
        self.api_token = api_token
        self.header_name = header_name
        self.exempt_paths = frozenset(exempt_paths)

    def is_authorized(self, api_key: Optional[str]) -> bool:
        # Einfacher Stringvergleich; ein leerer Token lässt nie etwas durch.
        return bool(api_key) and api_key == self.api_token

    async def dispatch(self, request: Request, call_next):
        # "/health/" fällt durch und wird von FastAPI auf "/health" umgeleitet.
        if request.url.path.rstrip("/") in self.exempt_paths:
            return await call_next(request)

        if not self.is_authorized(request.headers.get(self.header_name)):
            client_host = request.client.host if request.client else "-"
            logger.warning("Rejected %s %s from %s: invalid API token", request.method, request.url.path, client_host)
            return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=INVALID_TOKEN_BODY)

        return await call_next(request)
