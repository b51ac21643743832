"""API-Modelle für das Chat-Completion Gateway: eingehende Chat-Anfragen
mit ihrer geordneten Nachrichtenliste."""
from typing import List

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """Eine Nachricht des Transkripts. Die Rolle ist frei wählbar und wird
    hier nicht gegen eine feste Menge geprüft."""

    role: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ChatRequest(BaseModel):
    """Body von POST /chat/completions; mindestens eine Nachricht."""

    messages: List[ChatMessage] = Field(..., min_length=1)
