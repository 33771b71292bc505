"""Style strategies deciding badge colors and block backgrounds.

The layout engine is the same for every style; a strategy only answers five
questions for a given badge: the text color of each side, the shadow color,
and the background element of each block.

Key classes:
- StyleContext: What is being rendered, handed to every strategy call
- BadgeStyleStrategy: Abstract strategy interface
- FlatStyle: Solid blocks
- ShatterStyle: Blocks filled with a shaded triangle mosaic
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from chaoticbadge.config import BadgeSettings, BadgeStyle, ShatterConfig, StyleKind
from chaoticbadge.core.contrast import contrast_color
from chaoticbadge.core.shading import shatter_block
from chaoticbadge.domain import (
    DEFAULT_LEFT_COLOR,
    EMOTICON_STATUS_MAP,
    SHADOW_COLOR,
    STANDARD_STATUS_MAP,
    Color,
    Element,
    Group,
    Rect,
    Status,
    StatusMap,
)


@dataclass(frozen=True, slots=True)
class StyleContext:
    """Badge content passed to every strategy call.

    Attributes:
        label: Left block text
        status: Status classification
        status_text: Resolved right block text
        icon: Icon group, if the badge has one
    """

    label: str
    status: Status
    status_text: str
    icon: Group | None = None


class BadgeStyleStrategy(ABC):
    """Interface every badge style implements."""

    style: BadgeStyle
    status_map: StatusMap

    @abstractmethod
    def left_color(self, ctx: StyleContext) -> Color:
        """Color of the label text and icon."""

    @abstractmethod
    def right_color(self, ctx: StyleContext) -> Color:
        """Color of the status text."""

    @abstractmethod
    def shadow_color(self, ctx: StyleContext) -> Color:
        """Color of the text shadows."""

    @abstractmethod
    def left_block(self, width: float, ctx: StyleContext) -> Element:
        """Background element of the label block."""

    @abstractmethod
    def right_block(self, width: float, ctx: StyleContext) -> Element:
        """Background element of the status block."""

    @abstractmethod
    def with_overrides(
        self,
        left_color: Color | None = None,
        right_color: Color | None = None,
    ) -> "BadgeStyleStrategy":
        """Return a copy using the given background colors where provided."""


@dataclass(frozen=True)
class FlatStyle(BadgeStyleStrategy):
    """Solid-color blocks with automatic light/dark text.

    Attributes:
        style: Font and size configuration
        status_map: Status -> (text, color) table
        left_background: Label block color
        right_background: Status block color; None uses the status table
    """

    style: BadgeStyle = field(default_factory=BadgeStyle)
    status_map: StatusMap = STANDARD_STATUS_MAP
    left_background: Color = DEFAULT_LEFT_COLOR
    right_background: Color | None = None

    def left_background_color(self, ctx: StyleContext) -> Color:  # noqa: ARG002
        """Background color of the label block."""
        return self.left_background

    def right_background_color(self, ctx: StyleContext) -> Color:
        """Background color of the status block.

        The explicit override wins, then the status table, then its ERROR entry.
        """
        if self.right_background is not None:
            return self.right_background
        return self.status_map.resolve(ctx.status).color

    def left_color(self, ctx: StyleContext) -> Color:
        return contrast_color(self.left_background_color(ctx))

    def right_color(self, ctx: StyleContext) -> Color:
        return contrast_color(self.right_background_color(ctx))

    def shadow_color(self, ctx: StyleContext) -> Color:  # noqa: ARG002
        return SHADOW_COLOR

    def left_block(self, width: float, ctx: StyleContext) -> Element:
        return Rect(width=width, height=self.style.height, fill=self.left_background_color(ctx))

    def right_block(self, width: float, ctx: StyleContext) -> Element:
        return Rect(width=width, height=self.style.height, fill=self.right_background_color(ctx))

    def with_overrides(
        self,
        left_color: Color | None = None,
        right_color: Color | None = None,
    ) -> "FlatStyle":
        changes: dict[str, Color] = {}
        if left_color is not None:
            changes["left_background"] = left_color
        if right_color is not None:
            changes["right_background"] = right_color
        return replace(self, **changes) if changes else self


@dataclass(frozen=True)
class ShatterStyle(FlatStyle):
    """Flat colors, but each block is a mosaic of shaded triangles.

    A generator passed as ``rng`` is used for every render by this style and
    must not be shared between threads; leave it unset to use a per-thread one.

    Attributes:
        shatter: Mosaic configuration
        rng: Random generator for point jitter and shading
    """

    shatter: ShatterConfig = field(default_factory=ShatterConfig)
    rng: random.Random | None = field(default=None, compare=False, repr=False)

    def left_block(self, width: float, ctx: StyleContext) -> Element:
        return shatter_block(
            width, self.style.height, self.left_background_color(ctx), self.shatter, self.rng
        )

    def right_block(self, width: float, ctx: StyleContext) -> Element:
        return shatter_block(
            width, self.style.height, self.right_background_color(ctx), self.shatter, self.rng
        )


def create_strategy(
    settings: BadgeSettings,
    rng: random.Random | None = None,
) -> BadgeStyleStrategy:
    """Build the strategy selected by the settings.

    Args:
        settings: Application settings
        rng: Random generator for the shatter style

    Returns:
        FlatStyle or ShatterStyle
    """
    status_map = EMOTICON_STATUS_MAP if settings.emoticons else STANDARD_STATUS_MAP
    if settings.style_kind is StyleKind.SHATTER:
        return ShatterStyle(
            style=settings.style,
            status_map=status_map,
            shatter=settings.shatter,
            rng=rng,
        )
    return FlatStyle(style=settings.style, status_map=status_map)
