"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings

from weekwise.utils.constants import HANDOFF_KEY


class Settings(BaseSettings):
    """Type-safe configuration sourced from .env / environment."""

    # GitHub Models (OpenAI-compatible inference endpoint)
    github_token: str = ""
    models_endpoint: str = "https://models.github.ai/inference"
    model_name: str = "openai/gpt-4.1"
    temperature: float = 0.7
    top_p: float = 0.9
    max_tokens: int = 2000
    model_timeout_seconds: float | None = None  # None = transport default

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    static_dir: str = "dist"

    # Client tools
    api_base_url: str = "http://127.0.0.1:3001/api"
    client_timeout_seconds: int = 120
    handoff_path: str = f".weekwise/{HANDOFF_KEY}.json"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "protected_namespaces": (),
    }

    @property
    def has_token(self) -> bool:
        return bool(self.github_token.strip())


settings = Settings()
