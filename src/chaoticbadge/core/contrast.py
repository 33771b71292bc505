"""Text color selection for readable contrast against a background."""

from chaoticbadge.domain import BLACK, WHITE, Color

# Average channel of 160 or more counts as light
LIGHT_THRESHOLD = 160 * 3


def is_light(color: Color) -> bool:
    """Whether a background is light enough to need dark text.

    Examples:
        >>> is_light(Color(160, 160, 160))
        True
        >>> is_light(Color(159, 160, 160))
        False
    """
    return color.channel_sum >= LIGHT_THRESHOLD


def contrast_color(background: Color) -> Color:
    """Return black for light backgrounds and white for dark ones."""
    return BLACK if is_light(background) else WHITE
