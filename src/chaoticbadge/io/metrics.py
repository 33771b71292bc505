"""Text measurement backed by font metrics.

This module provides the measurers handed to ``BadgeRenderer``:

- FontMetrics: Advance widths read from a TTF/OTF file with fonttools
- FixedWidthMeasurer: A constant per-character width, for when no font file
  is available and approximate layout is acceptable
"""

from pathlib import Path

from fontTools.ttLib import TTFont

# SVG user units (px) per typographic point
PX_PER_PT = 96.0 / 72.0


class FontMetrics:
    """Measures text using the horizontal metrics of a font file.

    Widths are the sum of glyph advance widths from the ``hmtx`` table for the
    glyphs the best ``cmap`` maps each character to; unmapped characters use
    ``.notdef``. Kerning is ignored. The font family argument of ``measure``
    is accepted for interface compatibility but the loaded font is always used.

    Example:
        with FontMetrics(Path("Verdana.ttf")) as metrics:
            width = metrics.measure("build", "Verdana", 9)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the measurer.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None
        self._cmap: dict[int, str] = {}
        self._advances: dict[str, int] = {}
        self._units_per_em = 0

    def load(self) -> None:
        """Load the font file and cache its metrics.

        Tables are read eagerly so that ``measure`` is safe to call from
        several threads afterwards.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        font = TTFont(str(self._font_path))
        self._cmap = dict(font.getBestCmap() or {})
        self._advances = {name: advance for name, (advance, _lsb) in font["hmtx"].metrics.items()}
        self._units_per_em = font["head"].unitsPerEm  # type: ignore[attr-defined]
        self._font = font

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        return self._units_per_em

    def advance_units(self, text: str) -> int:
        """Sum of advance widths in font units.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")

        notdef = self._advances.get(".notdef", 0)
        total = 0
        for ch in text:
            glyph_name = self._cmap.get(ord(ch))
            total += self._advances.get(glyph_name, notdef) if glyph_name else notdef
        return total

    def measure(self, text: str, font_family: str, font_size_pts: float) -> float:  # noqa: ARG002
        """Return the advance width of ``text`` in user units (px).

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        units = self.advance_units(text)
        return units / self._units_per_em * font_size_pts * PX_PER_PT

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontMetrics":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()


class FixedWidthMeasurer:
    """Approximates every character as the same fraction of an em."""

    def __init__(self, char_width_em: float = 0.6) -> None:
        if char_width_em <= 0:
            raise ValueError(f"char_width_em must be positive, got {char_width_em}")
        self.char_width_em = char_width_em

    def measure(self, text: str, font_family: str, font_size_pts: float) -> float:  # noqa: ARG002
        return len(text) * self.char_width_em * font_size_pts * PX_PER_PT
