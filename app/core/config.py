"""Konfigurationsmodul für das Chat-Completion Gateway: lädt Port, API-Token
und die Zugangsdaten des Inference-Providers via Pydantic-Settings."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SYSTEM_CONTENT = "Any default instructions for your model go here."


class Settings(BaseSettings):
    """Hält alle konfigurierbaren Werte, die das Gateway zur Laufzeit
    benötigt (Port, Zugangs-Token, Inference-Endpunkt, Logging)."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")

    # Zugang zum Gateway: ein einziger statischer Token.
    api_token: str = Field("", alias="API_TOKEN")  # Muss per Env gesetzt werden.
    api_key_header: str = Field("api-key", alias="API_KEY_HEADER")

    # Hugging Face Inference (OpenAI-kompatibler Router)
    huggingface_api_key: str = Field("", alias="HUGGINGFACE_API_KEY")
    inference_base_url: str = Field("https://router.huggingface.co/v1", alias="INFERENCE_BASE_URL")
    inference_model: str = Field("your-model-choice-here", alias="INFERENCE_MODEL")
    inference_provider: str = Field("hf-inference", alias="INFERENCE_PROVIDER")
    inference_max_tokens: int = Field(500, alias="INFERENCE_MAX_TOKENS")
    default_system_content: str = Field(DEFAULT_SYSTEM_CONTENT, alias="DEFAULT_SYSTEM_CONTENT")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: str = Field("", alias="LOG_FILE")  # Leer = nur Konsole.


settings = Settings()
