"""Shattered mosaic fill for badge blocks.

A block is triangulated at a reduced working size, then each triangle is
painted with the block color brightened or darkened by a random factor.
The factor range is derived from the color's channel sum so that dark and
light colors both get visible variation without leaving 0-255.
"""

import logging
import random

from chaoticbadge.config import ShatterConfig
from chaoticbadge.core.geometry import triangulate_rectangle
from chaoticbadge.core.rng import resolve_rng
from chaoticbadge.domain import Color, Group, Polygon, Rect

logger = logging.getLogger(__name__)

# Upper bound of mag = 3 + r + g + b
_MAX_MAGNITUDE = 256 * 3


def working_size(width: float, height: float, config: ShatterConfig) -> tuple[float, float]:
    """Clamp block dimensions to the triangulation caps, keeping the aspect ratio.

    Args:
        width: True block width (> 0)
        height: True block height (> 0)
        config: Shatter configuration holding the caps

    Returns:
        (fx, fy) working dimensions, never larger than the inputs
    """
    factor = min(1.0, config.max_scale_width / width, config.max_scale_height / height)
    return width * factor, height * factor


def shade_bounds(color: Color, chuck: float = 64.0) -> tuple[float, float]:
    """Compute the range of brightness factors for a base color.

    Args:
        color: Base color
        chuck: Maximum change of the channel sum

    Returns:
        (scale_bot, scale_top) with scale_bot <= 1 <= scale_top
    """
    mag = 3 + color.channel_sum
    top = min(mag + chuck, _MAX_MAGNITUDE)
    bot = max(mag - chuck, 0)
    return bot / mag, top / mag


def shade_channel(channel: int, scale: float) -> int:
    """Scale one 8-bit channel, saturating at 255."""
    return int(min(255.0, (channel + 1) * scale))


def shade_color(color: Color, scale: float) -> Color:
    """Apply a brightness factor to every channel independently."""
    return Color(
        shade_channel(color.r, scale),
        shade_channel(color.g, scale),
        shade_channel(color.b, scale),
    )


def shatter_block(
    width: float,
    height: float,
    color: Color,
    config: ShatterConfig | None = None,
    rng: random.Random | None = None,
) -> Group | Rect:
    """Build a block filled with shaded triangles.

    The group starts with a rectangle in the base color, which stays visible
    through antialiasing seams between shards, followed by one polygon per
    triangle in true block coordinates.

    Args:
        width: Block width
        height: Block height
        color: Base color
        config: Shatter configuration (default: ShatterConfig())
        rng: Random generator (default: the calling thread's)

    Returns:
        Group of shards, or a plain Rect when the block has no area
    """
    if width <= 0 or height <= 0:
        return Rect(width=max(width, 0.0), height=max(height, 0.0), fill=color)

    config = config or ShatterConfig()
    rng = resolve_rng(rng)

    scale_bot, scale_top = shade_bounds(color, config.color_chuck)
    fx, fy = working_size(width, height, config)
    mesh = triangulate_rectangle(
        fx,
        fy,
        config.base_sep,
        rng=rng,
        max_border_points=config.max_border_points,
        margin=config.super_triangle_margin,
    )

    sx = width / fx
    sy = height / fy
    group = Group()
    group.add(Rect(width=width, height=height, fill=color))
    for tri in mesh.triangles:
        scale = rng.random() * (scale_top - scale_bot) + scale_bot
        points = tuple((v.x * sx, v.y * sy) for v in mesh.triangle_points(tri))
        group.add(Polygon(points=points, fill=shade_color(color, scale)))

    logger.debug(
        "Shattered %.1fx%.1f block (working %.1fx%.1f) into %d shards",
        width,
        height,
        fx,
        fy,
        len(mesh.triangles),
    )
    return group
