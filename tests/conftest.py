import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

API_TOKEN = "test-token"

COMPLETION = {
    "id": "chatcmpl-123",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "your-model-choice-here",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "Hello!"},
            "finish_reason": "stop",
        }
    ],
}


@pytest.fixture
def settings():
    return Settings(API_TOKEN=API_TOKEN, HUGGINGFACE_API_KEY="hf-test", _env_file=None)


@pytest.fixture
def app(settings):
    app = create_app(settings)
    # Inference-Client durch Mock ersetzen, damit kein Netzwerk-Call passiert
    app.state.inference = MagicMock()
    app.state.inference.chat_completion = AsyncMock(return_value=COMPLETION)
    return app


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"api-key": API_TOKEN}
