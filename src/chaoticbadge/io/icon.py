"""Icon loading from SVG files.

Icons are flattened into a single path using fonttools' SVG path parser, so
any ``path``, ``rect``, ``circle``, ``ellipse``, ``polygon``, ``polyline`` or
``line`` element contributes to the outline. The bounding box is computed
from the same outline and drives icon scaling in the layout engine.
"""

from pathlib import Path

from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.recordingPen import RecordingPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import SVGPath

from chaoticbadge.domain import Icon
from chaoticbadge.exceptions import IconLoadError


def _icon_from_svg_path(svg_path: SVGPath, source: str) -> Icon:
    recording = RecordingPen()
    try:
        svg_path.draw(recording)
    except (ValueError, KeyError) as e:
        raise IconLoadError(source, f"invalid shape data: {e}") from e

    path_pen = SVGPathPen(None)
    bounds_pen = BoundsPen(None)
    recording.replay(path_pen)
    recording.replay(bounds_pen)

    if bounds_pen.bounds is None:
        raise IconLoadError(source, "no drawable shapes")
    x_min, y_min, x_max, y_max = bounds_pen.bounds
    if y_max - y_min <= 0:
        raise IconLoadError(source, "outline has zero height")

    return Icon(path_data=path_pen.getCommands(), bounds=(x_min, y_min, x_max, y_max))


def load_icon(path: Path) -> Icon:
    """Load an icon from an SVG file.

    Args:
        path: Path to the SVG file

    Returns:
        Icon with flattened path data and bounding box

    Raises:
        IconLoadError: If the file is missing, unparsable or empty
    """
    if not path.exists():
        raise IconLoadError(str(path), "file not found")
    try:
        svg_path = SVGPath(str(path))
    except (OSError, SyntaxError) as e:
        raise IconLoadError(str(path), str(e)) from e
    return _icon_from_svg_path(svg_path, str(path))


def icon_from_string(data: str | bytes, source: str = "<string>") -> Icon:
    """Load an icon from SVG markup.

    Args:
        data: SVG document
        source: Name used in error messages

    Returns:
        Icon with flattened path data and bounding box

    Raises:
        IconLoadError: If the markup is unparsable or empty
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        svg_path = SVGPath.fromstring(data)
    except SyntaxError as e:
        raise IconLoadError(source, str(e)) from e
    return _icon_from_svg_path(svg_path, source)
