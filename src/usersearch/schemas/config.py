"""Pydantic configuration schema for YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.criteria import MAX_PAGE_SIZE


class SearchSettings(BaseModel):
    max_count: int = Field(default=MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    default_count: int | None = Field(default=None, ge=1, le=MAX_PAGE_SIZE)

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _default_within_max(self) -> "SearchSettings":
        if self.default_count is not None and self.default_count > self.max_count:
            raise ValueError("default_count cannot exceed max_count")
        return self


class ScorerSettings(BaseModel):
    prefix_weight: float = Field(default=0.1, ge=0.0, le=0.25)

    model_config = ConfigDict(extra="forbid")


class RankerSettings(BaseModel):
    selection: Literal["sort", "heap"] = "sort"

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    search: SearchSettings | None = None
    scorer: ScorerSettings | None = None
    ranker: RankerSettings | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
