"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Sequence

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ... import __version__ as package_version


def _resolve_project_dirs() -> tuple[Path, Path]:
    """Locate the package directory and the repository root."""

    current = Path(__file__).resolve()
    package_dir: Path | None = None
    for parent in current.parents:
        if parent.name == "tasktracker":
            package_dir = parent
            break
    if package_dir is None:
        raise RuntimeError("Unable to determine package directory for the task tracker.")
    repository_root = package_dir.parent.parent
    return package_dir, repository_root


PACKAGE_DIR, REPOSITORY_ROOT = _resolve_project_dirs()

EnvironmentName = Literal["development", "test", "ci"]

DEFAULT_JWT_SECRET = "change-me"

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
        "expose_error_details": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
        "expose_error_details": False,
    },
    "ci": {
        "log_level": "INFO",
        "reload": False,
        "expose_error_details": False,
    },
}


class Settings(BaseSettings):
    """Runtime configuration for the task tracker service."""

    model_config = SettingsConfigDict(
        env_prefix="TASKTRACKER_",
        env_file=(REPOSITORY_ROOT / ".env",),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Task Tracker"
    environment: EnvironmentName = "development"
    api_prefix: str = "/api"
    version: str = package_version
    mongo_url: str = "mongodb://localhost:27017"
    mongo_database: str = "tasktracker"
    cors_allow_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]
    app_host: str = "0.0.0.0"
    app_port: int = 3000
    log_level: str = "INFO"
    reload: bool = True
    expose_error_details: bool = True

    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    default_page_size: int = 5
    recently_viewed_limit: int = 5

    seed_admin_email: str = "admin@test.com"
    seed_admin_password: str = "123456"

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        return _ENVIRONMENT_ALIASES.get(normalized, "development")

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings for CORS configuration."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("default_page_size", "recently_viewed_limit", mode="before")
    @classmethod
    def _ensure_positive(cls, value: object) -> int:
        try:
            parsed = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 5
        return max(parsed, 1)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(getattr(self, "model_fields_set", set()))
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()
