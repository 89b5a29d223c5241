"""Unified settings — init kwargs, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — values passed by the embedding application
  2. Env vars     — ``KENNITALA_*`` prefix, ``__`` for nested sections
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from kennitala.config.models import ValidationConfig


class KennitalaSettings(BaseSettings):
    """Settings for the validation service and its logging.

    Example::

        KENNITALA_VALIDATION__DEFAULT_CATEGORY=individual
        KENNITALA_VALIDATION__ACCEPT_SEPARATOR=true
        KENNITALA_VERBOSE=1
    """

    model_config = {
        "frozen": True,
        "env_prefix": "KENNITALA_",
        "env_nested_delimiter": "__",
    }

    verbose: bool = False
    log_json: bool = False

    validation: ValidationConfig = Field(default_factory=ValidationConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs and env vars; no dotenv or secrets files."""
        return (init_settings, env_settings)
