"""Chat-Router stellt den Completion-Endpunkt des Gateways bereit."""
from fastapi import APIRouter, Request

from app.core.messages import build_messages
from app.core.models import ChatRequest

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("/completions")
async def chat_completions(chat_request: ChatRequest, request: Request):
    """Reicht die Unterhaltung an den Inference-Provider weiter.

    Pipeline:
    1) Default-System-Nachricht bei genau einer Eingabenachricht.
    2) System-Nachrichten vor User-Nachrichten sortieren.
    3) Completion beim Provider anfordern und unverändert zurückgeben.

    Fehler des Providers werden nicht abgefangen und landen beim globalen
    Exception-Handler (500).
    """
    settings = request.app.state.settings
    inference = request.app.state.inference

    messages = build_messages(
        [message.model_dump() for message in chat_request.messages],
        settings.default_system_content,
    )
    return await inference.chat_completion(messages)
