"""Two-segment badge layout.

The renderer measures both text runs, asks the style strategy for colors and
block backgrounds, and assembles the drawing tree:

    root (font family, font size)
    ├── left group
    │   ├── left block
    │   ├── icon group (optional, tinted with the label color)
    │   ├── label shadow text
    │   └── label text
    └── right group (translated by the left block width)
        ├── right block
        ├── status shadow text
        └── status text
"""

import logging
import math
from typing import Protocol

from chaoticbadge.config import BadgeStyle
from chaoticbadge.core.style import BadgeStyleStrategy, StyleContext
from chaoticbadge.domain import Color, Drawing, Group, Icon, Path, Scale, Status, Text, Translate
from chaoticbadge.exceptions import IconError, RenderError, TextMeasurementError

logger = logging.getLogger(__name__)


class TextMeasurer(Protocol):
    """Anything that can report the rendered width of a text run."""

    def measure(self, text: str, font_family: str, font_size_pts: float) -> float:
        """Return the advance width of ``text`` in user units."""
        ...


def place_icon(icon: Icon, height: float) -> tuple[Group, float]:
    """Scale an icon to the badge height.

    The icon is moved so its bounding box starts at the origin, then scaled
    uniformly so its height equals ``height``.

    Args:
        icon: Pre-parsed icon
        height: Badge height

    Returns:
        (icon group, horizontal space the icon occupies)

    Raises:
        IconError: If the icon has a zero-height bounding box
    """
    if icon.height <= 0:
        raise IconError(f"Icon bounding box {icon.bounds} has no height")

    scale = height / icon.height
    x_min, y_min, _, _ = icon.bounds
    group = Group(
        children=[Path(icon.path_data)],
        transforms=(Scale(scale, scale), Translate(-x_min, -y_min)),
    )
    return group, scale * icon.width


class BadgeRenderer:
    """Lays out badges using a style strategy and a text measurer.

    Example:
        renderer = BadgeRenderer(FlatStyle(), FixedWidthMeasurer())
        drawing = renderer.render("build", Status.PASSING)
    """

    def __init__(self, strategy: BadgeStyleStrategy, measurer: TextMeasurer | None) -> None:
        """Initialize the renderer.

        Args:
            strategy: Style strategy deciding colors and blocks
            measurer: Text measurement capability

        Raises:
            TextMeasurementError: If no measurer is given
        """
        if measurer is None:
            raise TextMeasurementError("no text measurer configured")
        self.strategy = strategy
        self.measurer = measurer

    @property
    def style(self) -> BadgeStyle:
        """Font and size configuration of the strategy."""
        return self.strategy.style

    def _measure(self, text: str, style: BadgeStyle) -> float:
        width = self.measurer.measure(text, style.font_family, style.font_size_pts)
        if not math.isfinite(width) or width < 0:
            raise RenderError(text, f"measurer returned an invalid width {width!r}")
        return width

    def render(
        self,
        label: str,
        status: Status,
        status_text: str | None = None,
        left_color: Color | None = None,
        right_color: Color | None = None,
        icon: Icon | None = None,
    ) -> Drawing:
        """Render a badge.

        Args:
            label: Left block text
            status: Status classification
            status_text: Right block text (default: from the status table)
            left_color: Left block color override
            right_color: Right block color override
            icon: Icon drawn before the label, scaled to the badge height

        Returns:
            Drawing whose width is the sum of both blocks and whose height is
            the style height

        Raises:
            IconError: If the icon has no height
            RenderError: If the measurer reports an unusable width
        """
        strategy = self.strategy.with_overrides(left_color, right_color)
        style = strategy.style
        if status_text is None:
            status_text = strategy.status_map.resolve(status).text

        icon_group: Group | None = None
        icon_offset = 0.0
        if icon is not None:
            icon_group, icon_offset = place_icon(icon, style.height)

        ctx = StyleContext(label=label, status=status, status_text=status_text, icon=icon_group)
        left_text_color = strategy.left_color(ctx)
        right_text_color = strategy.right_color(ctx)
        shadow_color = strategy.shadow_color(ctx)
        if icon_group is not None:
            icon_group.fill = left_text_color

        label_width = self._measure(label, style)
        status_width = self._measure(status_text, style)
        left_width = icon_offset + label_width + style.border * 2
        right_width = status_width + style.border * 2

        # Left
        label_transforms = (Translate(icon_offset),) if icon_group is not None else ()
        left_group = Group()
        left_group.add(strategy.left_block(left_width, ctx))
        if icon_group is not None:
            left_group.add(icon_group)
        left_group.add(
            Text(label, style.border, style.text_shadow_offset_y, shadow_color, label_transforms)
        )
        left_group.add(Text(label, style.border, style.text_offset_y, left_text_color, label_transforms))

        # Right
        right_group = Group(transforms=(Translate(left_width),))
        right_group.add(strategy.right_block(right_width, ctx))
        right_group.add(Text(status_text, style.border, style.text_shadow_offset_y, shadow_color))
        right_group.add(Text(status_text, style.border, style.text_offset_y, right_text_color))

        root = Group(font_family=style.font_family, font_size_pts=style.font_size_pts)
        root.add(left_group)
        root.add(right_group)

        logger.debug(
            "Rendered badge %r / %r: %.1f + %.1f wide",
            label,
            status_text,
            left_width,
            right_width,
        )
        return Drawing(width=left_width + right_width, height=style.height, root=root)
