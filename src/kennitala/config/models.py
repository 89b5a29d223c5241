"""Pydantic configuration models with code-baked defaults."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from kennitala.domain.types import Category


class ValidationConfig(BaseModel):
    """Defaults applied by :class:`~kennitala.services.validate.ValidationService`."""

    model_config = {"frozen": True}

    default_category: str = "all"
    accept_separator: bool = False

    @field_validator("default_category")
    @classmethod
    def _known_category(cls, value: str) -> str:
        Category.parse(value)
        return value.strip().lower()

    @property
    def category(self) -> Category:
        return Category.parse(self.default_category)
