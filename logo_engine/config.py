"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - theme_primary is always a well-formed "h s% l%" triple

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: works out-of-the-box without an icon library file
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logo_engine.core.colors import is_hsl_triple


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Theme
    theme_primary: str = "41 40% 60%"

    @field_validator("theme_primary")
    @classmethod
    def check_theme_primary(cls, v: str) -> str:
        if not is_hsl_triple(v):
            raise ValueError(f"theme_primary must be an 'h s% l%' triple, got {v!r}")
        return v.strip()

    # Editing
    crop_debounce_ms: int = 50

    # Icon registry
    icon_library_path: str | None = None
    theme_icon_ids: list[str] = []
    theme_icon_base_path: str = "/icons/theme-icons"
    library_icon_base_path: str = "/icons/game-icons.net"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
