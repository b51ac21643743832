"""Protokolliert jede Anfrage mit Methode, Pfad, Status und Dauer."""
import logging
from time import perf_counter

from fastapi import Request

logger = logging.getLogger("app.requests")


async def log_requests(request: Request, call_next):
    start = perf_counter()
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration = (perf_counter() - start) * 1000
        logger.info("%s %s status=%s %.1fms", request.method, request.url.path, status_code, duration)
