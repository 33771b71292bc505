"""RGB color value used for every fill in a badge."""

from dataclasses import dataclass

from chaoticbadge.exceptions import ColorFormatError

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True, slots=True)
class Color:
    """An opaque color with 8-bit channels.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} outside 0-255")

    @property
    def channel_sum(self) -> int:
        """Sum of the three channels (0-765)."""
        return self.r + self.g + self.b

    def to_hex(self) -> str:
        """Format as a CSS hex color.

        Returns:
            Lowercase ``#rrggbb`` string
        """
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_tuple(self) -> tuple[int, int, int]:
        """Convert to a simple (r, g, b) tuple."""
        return (self.r, self.g, self.b)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse a hex color.

        Accepts ``rgb`` or ``rrggbb`` with an optional leading ``#``.

        Args:
            value: Hex color string

        Returns:
            Color instance

        Raises:
            ColorFormatError: If the string is not a valid hex color
        """
        digits = value.strip().removeprefix("#")
        if len(digits) not in (3, 6) or not set(digits) <= _HEX_DIGITS:
            raise ColorFormatError(value)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


BLACK = Color(0x00, 0x00, 0x00)
WHITE = Color(0xFF, 0xFF, 0xFF)
SHADOW_COLOR = Color(0x20, 0x20, 0x20)
DEFAULT_LEFT_COLOR = Color(0x40, 0x40, 0x40)
PASSING_COLOR = Color(0x2D, 0xEA, 0x56)
FAILING_COLOR = Color(0xF3, 0x3B, 0x27)
UNKNOWN_COLOR = Color(0xEA, 0x83, 0x2D)
