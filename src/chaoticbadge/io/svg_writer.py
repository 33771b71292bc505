"""SVG serialization of badge drawings.

Only the element kinds produced by the renderer are supported. Numbers are
written with at most three decimals so output stays compact and stable.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from chaoticbadge.domain import (
    Drawing,
    Element,
    Group,
    Path as PathElement,
    Polygon,
    Rect,
    Scale,
    Text,
    Transform,
    Translate,
)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_number(value: float) -> str:
    """Format a coordinate without trailing zeros.

    Examples:
        >>> format_number(12.0)
        '12'
        >>> format_number(3.14159)
        '3.142'
    """
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def format_transforms(transforms: tuple[Transform, ...]) -> str:
    """Format a transform list as an SVG ``transform`` attribute value."""
    parts = []
    for transform in transforms:
        if isinstance(transform, Translate):
            if transform.y == 0:
                parts.append(f"translate({format_number(transform.x)})")
            else:
                parts.append(
                    f"translate({format_number(transform.x)},{format_number(transform.y)})"
                )
        elif isinstance(transform, Scale):
            parts.append(f"scale({format_number(transform.sx)},{format_number(transform.sy)})")
        else:
            raise TypeError(f"Unsupported transform: {transform!r}")
    return " ".join(parts)


class SvgWriter:
    """Converts drawing trees to SVG markup.

    Example:
        writer = SvgWriter()
        writer.write(drawing, Path("build.svg"))
    """

    def to_element(self, drawing: Drawing) -> ET.Element:
        """Build the ``<svg>`` element tree for a drawing."""
        width = format_number(drawing.width)
        height = format_number(drawing.height)
        svg = ET.Element(
            "svg",
            {
                "xmlns": SVG_NAMESPACE,
                "width": width,
                "height": height,
                "viewBox": f"0 0 {width} {height}",
            },
        )
        self._append(svg, drawing.root)
        return svg

    def to_string(self, drawing: Drawing) -> str:
        """Serialize a drawing to an SVG document string."""
        return ET.tostring(self.to_element(drawing), encoding="unicode")

    def write(self, drawing: Drawing, path: Path) -> None:
        """Write a drawing to an SVG file (UTF-8, with XML declaration).

        Args:
            drawing: Drawing to serialize
            path: Output file path
        """
        tree = ET.ElementTree(self.to_element(drawing))
        tree.write(path, encoding="utf-8", xml_declaration=True)

    def _append(self, parent: ET.Element, element: Element) -> None:
        if isinstance(element, Group):
            node = ET.SubElement(parent, "g")
            if element.transforms:
                node.set("transform", format_transforms(element.transforms))
            if element.fill is not None:
                node.set("fill", element.fill.to_hex())
            if element.font_family is not None:
                node.set("font-family", element.font_family)
            if element.font_size_pts is not None:
                node.set("font-size", f"{format_number(element.font_size_pts)}pt")
            for child in element.children:
                self._append(node, child)
        elif isinstance(element, Rect):
            ET.SubElement(
                parent,
                "rect",
                {
                    "width": format_number(element.width),
                    "height": format_number(element.height),
                    "fill": element.fill.to_hex(),
                },
            )
        elif isinstance(element, Polygon):
            points = " ".join(f"{format_number(x)},{format_number(y)}" for x, y in element.points)
            ET.SubElement(parent, "polygon", {"points": points, "fill": element.fill.to_hex()})
        elif isinstance(element, Text):
            node = ET.SubElement(
                parent,
                "text",
                {
                    "x": format_number(element.x),
                    "y": format_number(element.y),
                    "fill": element.fill.to_hex(),
                },
            )
            if element.transforms:
                node.set("transform", format_transforms(element.transforms))
            node.text = element.content
        elif isinstance(element, PathElement):
            ET.SubElement(parent, "path", {"d": element.d})
        else:
            raise TypeError(f"Unsupported drawing element: {element!r}")
