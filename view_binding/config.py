import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """View binding settings with validation.

    Every field has a default; override through VIEW_BINDING_* environment
    variables or a .env file next to the project root.
    """

    # Template discovery
    templates_root: Path = Field(default=Path("templates"), description="Root directory scanned for templates")
    view_extension: str = Field(default=".spark", description="File extension of renderable views")
    shared_folders: list[str] = Field(default_factory=lambda: ["Shared"], description="Folder names for shared templates")

    # Binder configuration
    fallback_master: str = Field(default="Application", min_length=1, description="Master used when a view names none")
    bindings_file_name: str = Field(default="bindings.xml", min_length=1, description="Binding declaration file name")
    view_model_modules: list[str] = Field(default_factory=list, description="Modules scanned for view model types")
    max_workers: int = Field(default=1, ge=1, description="Worker threads for the binding pass")

    # Diagnostics
    history_capacity: int = Field(default=50, ge=1, description="Reports kept in the diagnostic history")
    log_level: str = Field(default="INFO", description="Root logging level")
    log_dir: Path | None = Field(default=None, description="Directory for JSON log files")
    api_host: str = Field(default="127.0.0.1", min_length=1, description="Diagnostics server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="Diagnostics server port")

    model_config = SettingsConfigDict(
        env_prefix="VIEW_BINDING_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("view_extension", mode="after")
    @classmethod
    def validate_view_extension(cls, v: str) -> str:
        """Ensure the view extension is a dotted suffix."""
        v = v.strip().lower()
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("view_extension must look like '.spark'")
        return v

    @field_validator("fallback_master", "bindings_file_name", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure names are not whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a stdlib logging level."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
