"""Configuration management for chaoticbadge.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, manifests or defaults.

Key classes:
- BadgeStyle: Font and size settings with derived spacing
- ShatterConfig: Mosaic fill settings
- LoggingConfig: Logging settings
- BadgeSettings: Main application settings
- BadgeRequest / BadgeManifest: Batch rendering input
"""

from chaoticbadge.config.manifest import BadgeManifest, BadgeRequest, load_manifest
from chaoticbadge.config.settings import (
    BadgeSettings,
    BadgeStyle,
    LoggingConfig,
    ShatterConfig,
    StyleKind,
    get_default_settings,
)

__all__ = [
    "BadgeManifest",
    "BadgeRequest",
    "BadgeSettings",
    "BadgeStyle",
    "LoggingConfig",
    "ShatterConfig",
    "StyleKind",
    "get_default_settings",
    "load_manifest",
]
