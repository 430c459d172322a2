"""
Run settings, read from the environment (and .env via python-dotenv).
"""

import os
from pydantic import BaseModel, Field, field_validator

from slidetoc.walker import DEFAULT_EXCLUDE

BACKENDS = ("python", "com")
LOCALES = ("ja", "en")


class GeneratorSettings(BaseModel):
    """Settings shared by the index and TOC pipelines."""

    backend: str = Field(default="python", description="Document backend: python or com")
    exclude: str = Field(default=DEFAULT_EXCLUDE, description="Skip paths containing this marker")
    locale: str = Field(default="ja", description="Header/footer caption language")
    force: bool = Field(default=False, description="Regenerate even when output is fresh")

    @field_validator("backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in BACKENDS:
            raise ValueError(f"Unknown backend: {v} (expected one of {', '.join(BACKENDS)})")
        return v

    @field_validator("locale")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        v = v.lower()
        if v not in LOCALES:
            raise ValueError(f"Unknown locale: {v} (expected one of {', '.join(LOCALES)})")
        return v

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorSettings":
        """
        Build settings from SLIDETOC_* environment variables.

        Keyword overrides (e.g. CLI flags) win over the environment; None
        values are ignored.
        """
        data = {
            "backend": os.getenv("SLIDETOC_BACKEND", "python"),
            "exclude": os.getenv("SLIDETOC_EXCLUDE", DEFAULT_EXCLUDE),
            "locale": os.getenv("SLIDETOC_LOCALE", "ja"),
            "force": os.getenv("SLIDETOC_FORCE", "").lower() in ("1", "true", "yes"),
        }
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(data)
