from __future__ import annotations

from typing import Tuple

from pydantic import Field, SecretStr, confloat, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_LABELS


def _split_labels(raw: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


class AutomergeConfig(BaseSettings):
    """Configuration loaded from GitHub Actions inputs."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        frozen=True,
        extra="ignore",
    )

    github_token: SecretStr = Field(default="", description="GitHub token used for API calls")
    github_api_url: str = Field(default="https://api.github.com")
    http_timeout_seconds: confloat(gt=0) = Field(default=15.0)

    labels: str = Field(
        default=",".join(DEFAULT_LABELS),
        description="Comma separated merge-intent labels to remove",
    )

    dry_run: bool = Field(default=False, description="Log label removals without performing them")
    require_blocked: bool = Field(
        default=True,
        description="Only assess pull requests GitHub reports as blocked",
    )

    @field_validator("labels", mode="after")
    @classmethod
    def _require_labels(cls, value: str) -> str:
        names = _split_labels(value)
        if not names:
            raise ValueError("labels must name at least one label")
        return ",".join(names)

    @field_validator("github_api_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().rstrip("/")
        return value

    @property
    def label_names(self) -> Tuple[str, ...]:
        return _split_labels(self.labels)
