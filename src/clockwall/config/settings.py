"""Settings and configuration management using Pydantic."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, field_validator, model_validator
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from clockwall.render.palette import ColorScheme, default_schemes

CONFIG_FILE = Path("config.yaml")


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """
    Loads settings from ``config.yaml`` in the working directory.

    A missing file contributes nothing; a malformed one is an error.
    """

    def _load(self) -> Dict[str, Any]:
        if not CONFIG_FILE.exists():
            return {}
        encoding = self.config.get("env_file_encoding")
        content = yaml.safe_load(CONFIG_FILE.read_text(encoding))
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ValueError(f"{CONFIG_FILE} must contain a mapping, got {type(content).__name__}")
        return content

    def get_field_value(self, field: FieldInfo, field_name: str) -> Tuple[Any, str, bool]:
        return self._load().get(field_name), field_name, False

    def __call__(self) -> Dict[str, Any]:
        return {key: value for key, value in self._load().items() if key in self.settings_cls.model_fields}


class Settings(BaseSettings):
    """Clockwall configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLOCKWALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # First source wins: explicit values, then env, then config.yaml
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    # Canvas
    canvas_width: int = Field(
        default=1920,
        ge=1,
        description="Canvas width in pixels",
    )
    canvas_height: int = Field(
        default=1080,
        ge=1,
        description="Canvas height in pixels",
    )
    frame_rate: float = Field(
        default=60.0,
        gt=0,
        le=240,
        description="Frames rendered per second",
    )

    # Animation
    animation_duration_ms: float = Field(
        default=2500.0,
        gt=0,
        description="Duration of a hand transition in milliseconds",
    )

    # Appearance
    bar_ratio: float = Field(
        default=0.02,
        ge=0,
        lt=0.5,
        description="Height of the seconds bar as a fraction of the canvas height",
    )
    clock_weight: float = Field(
        default=1.0,
        gt=0,
        description="Stroke width of the clock faces",
    )
    hand_weight: float = Field(
        default=2.0,
        gt=0,
        description="Stroke width of the clock hands",
    )
    color_schemes: List[ColorScheme] = Field(
        default_factory=default_schemes,
        description="Available background/accent colour pairs",
    )
    color_scheme: int = Field(
        default=1,
        ge=0,
        description="Index of the colour scheme shown at startup",
    )

    # Output
    output_path: Path = Field(
        default=Path("/tmp/clockwall.svg"),
        description="Where the frame loop writes the current frame",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Log file path",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    @field_validator("color_schemes")
    @classmethod
    def validate_schemes(cls, v: List[ColorScheme]) -> List[ColorScheme]:
        """Require at least one colour scheme."""
        if not v:
            raise ValueError("At least one colour scheme is required")
        return v

    @field_validator("output_path", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Expand environment variables and user paths."""
        if v is None:
            return None
        if isinstance(v, str):
            v = os.path.expandvars(os.path.expanduser(v))
        return Path(v)

    @model_validator(mode="after")
    def validate_scheme_index(self) -> "Settings":
        if self.color_scheme >= len(self.color_schemes):
            raise ValueError(
                f"color_scheme {self.color_scheme} out of range for {len(self.color_schemes)} schemes"
            )
        return self

    def ensure_directories(self) -> None:
        """Ensure output and log directories exist."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
