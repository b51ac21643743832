"""FastAPI-Einstiegspunkt für das Chat-Completion Gateway zur Hugging Face
Inference API."""
import logging
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import Settings, settings as default_settings
from app.core.gate import ApiKeyGate
from app.core.inference import InferenceClient
from app.core.logging_setup import setup_logging
from app.core.request_logging import log_requests

from app.routers import chat as chat_router
from app.routers import health as health_router

logger = logging.getLogger(__name__)


async def unhandled_exception(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Baut die App aus den übergebenen Settings.

    - Registriert das API-Key-Gate mit dem konfigurierten Token.
    - Legt den Inference-Client im App State ab.
    - Bindet Chat- und Health-Router ein.
    """
    settings = settings or default_settings

    app = FastAPI(
        title="Hosted Inference Chat Gateway",
        version="1.0.0",
        description="Forwards chat completions to the Hugging Face inference API.",
    )

    app.state.settings = settings
    app.state.inference = InferenceClient(settings)

    # Reihenfolge: zuletzt hinzugefügte Middleware läuft zuerst.
    app.add_middleware(
        ApiKeyGate,
        api_token=settings.api_token,
        header_name=settings.api_key_header,
        exempt_paths=("/health",),
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(Exception, unhandled_exception)

    app.include_router(chat_router.router)
    app.include_router(health_router.router)
    return app


app = create_app()


def run() -> None:
    """Startet den Server auf HOST:PORT; bei Fehlern Exit-Code 1."""
    setup_logging(default_settings.log_level, default_settings.log_file)
    # uvicorn meldet "running on ..." erst nach erfolgreichem Bind und beendet
    # sich bei Bind-Fehlern selbst per sys.exit(1).
    try:
        uvicorn.run(app, host=default_settings.host, port=default_settings.port, log_config=None)
    except SystemExit as exc:
        if exc.code:
            logger.error("Server failed to start on port %s", default_settings.port)
        raise
    except Exception:
        logger.exception("Server failed to start on port %s", default_settings.port)
        sys.exit(1)


if __name__ == "__main__":
    run()
