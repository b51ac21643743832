"""Steuert die Kommunikation mit der Hugging Face Inference API über den
OpenAI-kompatiblen Router des Providers."""
import logging
import time
from functools import cached_property
from typing import Any, Dict, List

from openai import AsyncOpenAI, OpenAIError

from app.core.config import Settings

logger = logging.getLogger(__name__)


class InferenceClient:
    """Sendet die aufbereitete Nachrichtenliste an das konfigurierte Modell
    und liefert die Completion unverändert zurück."""

    def __init__(self, settings: Settings) -> None:
        self.api_key = settings.huggingface_api_key
        self.base_url = settings.inference_base_url
        self.model = settings.inference_model
        self.provider = settings.inference_provider
        self.max_tokens = settings.inference_max_tokens

    @cached_property
    def client(self) -> AsyncOpenAI:
        # Lazy: ein fehlender Key schlägt erst beim ersten Call fehl.
        # Keine Retries: ein Fehler des Providers geht direkt an den Aufrufer.
        return AsyncOpenAI(api_key=self.api_key, base_url=self.base_url, max_retries=0)

    @property
    def routed_model(self) -> str:
        # Der Router wählt den Provider über das Suffix "<model>:<provider>".
        return f"{self.model}:{self.provider}"

    async def chat_completion(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        logger.info("Inference request: model=%s messages=%d", self.routed_model, len(messages))
        start = time.perf_counter()
        try:
            completion = await self.client.chat.completions.create(
                model=self.routed_model,
                messages=messages,
                max_tokens=self.max_tokens,
            )
        except OpenAIError as exc:
            logger.error(
                "Inference failed: model=%s latency=%.2fs type=%s",
                self.routed_model,
                time.perf_counter() - start,
                type(exc).__name__,
            )
            raise
        logger.info("Inference done: model=%s latency=%.2fs", self.routed_model, time.perf_counter() - start)
        return completion.model_dump(exclude_unset=True)
