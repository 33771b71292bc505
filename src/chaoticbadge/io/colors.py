"""Color override parsing.

Overrides arrive as user-supplied hex strings. Malformed values are dropped
(treated as no override) with a warning so that the renderer only ever sees
valid colors.
"""

import logging

from chaoticbadge.domain import Color
from chaoticbadge.exceptions import ColorFormatError

logger = logging.getLogger(__name__)


def parse_color(value: str | None) -> Color | None:
    """Parse an optional hex color override.

    Args:
        value: ``rgb`` or ``rrggbb`` hex digits with optional ``#``, or None

    Returns:
        Color, or None when the value is missing or malformed
    """
    if value is None or not value.strip():
        return None
    try:
        return Color.from_hex(value)
    except ColorFormatError:
        logger.warning("Ignoring malformed color override %r", value)
        return None
