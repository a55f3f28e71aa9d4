import os
from typing import Literal

from pydantic_settings import BaseSettings


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing."""


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    llm_provider: Literal["azure_openai", "gemini"] = "azure_openai"

    # Azure OpenAI chat completions
    azure_openai_endpoint: str = ""
    azure_openai_api_key: str = ""
    azure_openai_api_version: str = "2024-10-21"
    azure_openai_deployment: str = "gpt-4.1"

    # Google Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def missing_llm_settings(self) -> list[str]:
        """Names of required settings that are empty for the selected provider."""
        if self.llm_provider == "gemini":
            required = {"GEMINI_API_KEY": self.gemini_api_key}
        else:
            required = {
                "AZURE_OPENAI_ENDPOINT": self.azure_openai_endpoint,
                "AZURE_OPENAI_API_KEY": self.azure_openai_api_key,
                "AZURE_OPENAI_DEPLOYMENT": self.azure_openai_deployment,
            }
        return [name for name, value in required.items() if not value]

    @property
    def llm_configured(self) -> bool:
        return not self.missing_llm_settings()


def validate_llm_settings(config: Settings) -> None:
    """Fail fast when the selected LLM provider is not fully configured."""
    missing = config.missing_llm_settings()
    if missing:
        raise ConfigurationError(
            f"Missing required settings for provider '{config.llm_provider}': "
            + ", ".join(missing)
        )


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
