from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # OpenRouter
    openrouter_api_key: str = ""
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "meta-llama/llama-3.3-70b-instruct:free"
    openrouter_timeout: float = 60.0  # seconds

    # Generation parameters
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000
    llm_top_p: float = 0.95

    # Descriptive headers sent upstream (HTTP-Referer / X-Title)
    site_url: str = "http://localhost:3000"
    app_title: str = "Placement Bot"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "http://localhost:3000"

    @property
    def chat_completions_url(self) -> str:
        return f"{self.openrouter_base_url.rstrip('/')}/chat/completions"

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def has_api_key(self) -> bool:
        """Check if the OpenRouter key is set (not empty/placeholder)."""
        key = self.openrouter_api_key
        return bool(key) and key not in ("placeholder", "your-api-key-here", "your-openrouter-api-key-here")


@lru_cache
def get_settings() -> Settings:
    return Settings()
