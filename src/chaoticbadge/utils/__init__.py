"""Utility functions for chaoticbadge.

This module provides logging setup and render statistics tracking.
"""

from chaoticbadge.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
