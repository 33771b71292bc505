"""Tests for domain models to verify they work correctly."""

import pytest

from chaoticbadge.domain import (
    BLACK,
    EMOTICON_STATUS_MAP,
    PASSING_COLOR,
    STANDARD_STATUS_MAP,
    WHITE,
    Color,
    Drawing,
    Group,
    Icon,
    Polygon,
    Rect,
    Status,
    StatusEntry,
    StatusMap,
    Text,
    Translate,
)
from chaoticbadge.exceptions import ColorFormatError


class TestColor:
    """Tests for Color class."""

    def test_color_creation(self) -> None:
        """Test basic color creation."""
        c = Color(10, 20, 30)
        assert c.r == 10
        assert c.g == 20
        assert c.b == 30
        assert c.channel_sum == 60

    def test_color_channel_range(self) -> None:
        """Test that channels outside 0-255 are rejected."""
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_color_to_hex(self) -> None:
        """Test hex formatting."""
        assert Color(0x2D, 0xEA, 0x56).to_hex() == "#2dea56"
        assert BLACK.to_hex() == "#000000"
        assert WHITE.to_hex() == "#ffffff"

    def test_color_to_tuple(self) -> None:
        """Test tuple conversion."""
        assert Color(1, 2, 3).to_tuple() == (1, 2, 3)

    def test_from_hex_long(self) -> None:
        """Test parsing rrggbb with and without '#'."""
        assert Color.from_hex("#2dea56") == PASSING_COLOR
        assert Color.from_hex("2DEA56") == PASSING_COLOR

    def test_from_hex_short(self) -> None:
        """Test parsing rgb shorthand."""
        assert Color.from_hex("#fa0") == Color(0xFF, 0xAA, 0x00)

    @pytest.mark.parametrize("value", ["", "#", "12345", "#ggg", "1234567", "red"])
    def test_from_hex_invalid(self, value: str) -> None:
        """Test malformed hex strings raise ColorFormatError."""
        with pytest.raises(ColorFormatError) as exc_info:
            Color.from_hex(value)
        assert exc_info.value.value == value

    def test_color_immutable(self) -> None:
        """Test that color is immutable."""
        c = Color(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 5  # type: ignore


class TestStatus:
    """Tests for Status enum."""

    def test_status_values(self) -> None:
        """Test status slugs."""
        assert Status("passing") is Status.PASSING
        assert Status("not-found") is Status.NOT_FOUND
        assert len(Status) == 7


class TestStatusMap:
    """Tests for StatusMap class."""

    def test_standard_texts(self) -> None:
        """Test the standard table texts."""
        texts = {status: STANDARD_STATUS_MAP.resolve(status).text for status in Status}
        assert texts == {
            Status.PASSING: "passing",
            Status.FAILING: "failing",
            Status.UNKNOWN: "unknown",
            Status.RELEASE: "release",
            Status.PRERELEASE: "prerelease",
            Status.NOT_FOUND: "not found",
            Status.ERROR: "error",
        }

    def test_emoticon_texts(self) -> None:
        """Test the emoticon table covers every status."""
        assert len(EMOTICON_STATUS_MAP) == len(Status)
        assert EMOTICON_STATUS_MAP.resolve(Status.PASSING).text == "^.^"
        assert EMOTICON_STATUS_MAP.resolve(Status.ERROR).text == "o.o?"

    def test_colors_shared_between_tables(self) -> None:
        """Test both tables use the same colors per status."""
        for status in Status:
            assert (
                STANDARD_STATUS_MAP.resolve(status).color
                == EMOTICON_STATUS_MAP.resolve(status).color
            )

    def test_unmapped_value_resolves_to_error(self) -> None:
        """Test values outside the enum resolve to the ERROR entry."""
        sentinel = object()
        assert sentinel not in STANDARD_STATUS_MAP
        assert STANDARD_STATUS_MAP.resolve(sentinel) == STANDARD_STATUS_MAP.resolve(Status.ERROR)
        assert STANDARD_STATUS_MAP.resolve(["unhashable"]) == STANDARD_STATUS_MAP.resolve(
            Status.ERROR
        )

    def test_partial_map_uses_own_error_entry(self) -> None:
        """Test a map's own ERROR entry wins over the standard one."""
        custom = StatusEntry("oops", Color(1, 1, 1))
        status_map = StatusMap({Status.ERROR: custom})
        assert status_map.resolve(Status.PASSING) == custom

    def test_empty_map_uses_standard_error_entry(self) -> None:
        """Test a map without ERROR falls back to the standard ERROR entry."""
        status_map = StatusMap({Status.PASSING: StatusEntry("ok", PASSING_COLOR)})
        assert status_map.resolve(Status.FAILING) == STANDARD_STATUS_MAP.resolve(Status.ERROR)
        assert status_map.get(Status.FAILING) is None

    def test_map_is_read_only(self) -> None:
        """Test that entries cannot be modified after construction."""
        source = {Status.PASSING: StatusEntry("ok", PASSING_COLOR)}
        status_map = StatusMap(source)
        source[Status.FAILING] = StatusEntry("bad", BLACK)
        assert Status.FAILING not in status_map
        with pytest.raises(TypeError):
            status_map.entries[Status.FAILING] = StatusEntry("bad", BLACK)  # type: ignore

    def test_map_is_hashable(self) -> None:
        """Test that equal maps hash equally."""
        a = StatusMap({Status.PASSING: StatusEntry("ok", PASSING_COLOR)})
        b = StatusMap({Status.PASSING: StatusEntry("ok", PASSING_COLOR)})
        assert a == b
        assert hash(a) == hash(b)


class TestDrawing:
    """Tests for drawing tree classes."""

    def test_group_add_chains(self) -> None:
        """Test Group.add returns the group."""
        group = Group()
        rect = Rect(10, 20, BLACK)
        assert group.add(rect) is group
        assert group.children == [rect]

    def test_iter_elements_depth_first(self) -> None:
        """Test nested elements are yielded in paint order."""
        inner_rect = Rect(1, 1, BLACK)
        inner = Group(children=[inner_rect], transforms=(Translate(5),))
        text = Text("hi", 1, 2, WHITE)
        root = Group(children=[inner, text])

        assert list(root.iter_elements()) == [inner, inner_rect, text]

    def test_polygon_points(self) -> None:
        """Test polygon stores its points."""
        polygon = Polygon(points=((0, 0), (1, 0), (0, 1)), fill=WHITE)
        assert len(polygon.points) == 3

    def test_drawing(self) -> None:
        """Test drawing holds size and root."""
        drawing = Drawing(width=50.5, height=20, root=Group())
        assert drawing.width == 50.5
        assert drawing.root.children == []


class TestIcon:
    """Tests for Icon class."""

    def test_icon_size(self) -> None:
        """Test width and height come from the bounding box."""
        icon = Icon(path_data="M0 0L10 0L10 5Z", bounds=(2.0, -1.0, 12.0, 4.0))
        assert icon.width == 10.0
        assert icon.height == 5.0
