from app.core.config import DEFAULT_SYSTEM_CONTENT, Settings


def test_defaults(monkeypatch):
    for name in ("PORT", "API_TOKEN", "INFERENCE_MAX_TOKENS", "INFERENCE_PROVIDER", "API_KEY_HEADER"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.api_token == ""
    assert settings.api_key_header == "api-key"
    assert settings.inference_provider == "hf-inference"
    assert settings.inference_max_tokens == 500
    assert settings.default_system_content == DEFAULT_SYSTEM_CONTENT


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("API_TOKEN", "from-env")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.api_token == "from-env"
