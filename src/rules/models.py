from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IconsRules(BaseModel):
    root: str
    extension: str = ".svg"
    default_variant_suffix: str = "-line"
    collision_policy: Literal["last_wins", "reject"] = "last_wins"

    @field_validator("extension")
    @classmethod
    def _dotted_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError("extension must start with '.'")
        return value

    @field_validator("default_variant_suffix")
    @classmethod
    def _non_empty_suffix(cls, value: str) -> str:
        if not value:
            raise ValueError("default_variant_suffix must be non-empty")
        return value

class PluginRules(BaseModel):
    prefix: str = "remix"
    size_token: str = "4"

    # YAML reads `size_token: 4` as an int
    @field_validator("size_token", mode="before")
    @classmethod
    def _token_as_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

class ThemeRules(BaseModel):
    spacing: dict[str, str] = Field(default_factory=dict)

    # Other token groups (colors, fontSize, ...) pass through untouched
    model_config = ConfigDict(extra="allow")

    @field_validator("spacing", mode="before")
    @classmethod
    def _stringify_tokens(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): str(v) for k, v in value.items()}
        return value

class Rules(BaseModel):
    schema_version: Literal[1] = 1
    icons: IconsRules
    plugin: PluginRules = Field(default_factory=PluginRules)
    theme: ThemeRules = Field(default_factory=ThemeRules)
