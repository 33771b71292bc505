"""Configuration settings for chaoticbadge."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StyleKind(str, Enum):
    """Visual style used to fill the badge blocks."""

    FLAT = "flat"
    SHATTER = "shatter"


class BadgeStyle(BaseModel):
    """Font and size configuration shared by every badge style.

    Spacing values are derived from the font size and height so that they
    always agree with each other; they cannot be set directly.
    """

    model_config = ConfigDict(frozen=True)

    font_family: str = Field(
        default="Verdana,Helvetica,sans-serif",
        min_length=1,
        description="CSS font family list used for badge text",
    )
    font_size_pts: int = Field(
        default=9,
        ge=1,
        description="Font size in points",
    )
    height: int = Field(
        default=20,
        ge=1,
        description="Badge height in user units",
    )

    @property
    def border(self) -> int:
        """Horizontal padding on each side of a text run."""
        return int((self.height - self.font_size_pts) / 2)

    @property
    def text_offset_y(self) -> int:
        """Y-offset of the text baseline."""
        return int(self.height / 2 + self.font_size_pts / 2)

    @property
    def text_shadow_offset_y(self) -> int:
        """Y-offset of the text shadow baseline, one unit below the text."""
        return self.text_offset_y + 1

    def with_changes(self, **changes: Any) -> "BadgeStyle":
        """Return a validated copy with some fields replaced.

        Args:
            **changes: Field values to override

        Returns:
            New BadgeStyle instance

        Raises:
            pydantic.ValidationError: If a replaced value is invalid
        """
        return type(self).model_validate({**self.model_dump(), **changes})


class ShatterConfig(BaseModel):
    """Configuration for the shattered mosaic fill."""

    model_config = ConfigDict(frozen=True)

    max_scale_width: float = Field(
        default=120.0,
        gt=0.0,
        description="Maximum working width for triangulation",
    )
    max_scale_height: float = Field(
        default=80.0,
        gt=0.0,
        description="Maximum working height for triangulation",
    )
    color_chuck: float = Field(
        default=64.0,
        ge=0.0,
        le=768.0,
        description="How far shard brightness may move from the base color (channel-sum units)",
    )
    base_sep: float = Field(
        default=15.0,
        gt=0.0,
        description="Typical distance between mosaic points in working units",
    )
    max_border_points: int = Field(
        default=256,
        ge=2,
        description="Cap on jittered points placed along each rectangle edge",
    )
    super_triangle_margin: float = Field(
        default=32.0,
        ge=1.0,
        description=(
            "Multiplier on the bounding-circle radius used to size the super-triangle. "
            "At 32 the retained triangles cover all but about 1e-4 of the rectangle area; "
            "the base rectangle under the mosaic fills the rest"
        ),
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BadgeSettings(BaseModel):
    """Main application settings."""

    style: BadgeStyle = Field(default_factory=BadgeStyle)
    style_kind: StyleKind = Field(
        default=StyleKind.FLAT,
        description="Which style strategy renders the blocks",
    )
    emoticons: bool = Field(
        default=False,
        description="Use the emoticon status texts instead of the standard ones",
    )
    shatter: ShatterConfig = Field(default_factory=ShatterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BadgeSettings:
    """Get default application settings."""
    return BadgeSettings()
