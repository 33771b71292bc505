"""Unit tests for settings and batch manifests."""

import json

import pytest
from pydantic import ValidationError

from chaoticbadge.config import (
    BadgeRequest,
    BadgeSettings,
    BadgeStyle,
    ShatterConfig,
    StyleKind,
    get_default_settings,
    load_manifest,
)
from chaoticbadge.domain import Status
from chaoticbadge.exceptions import ManifestError


class TestBadgeStyle:
    """Tests for BadgeStyle settings."""

    def test_defaults(self) -> None:
        """Test default font and size."""
        style = BadgeStyle()
        assert style.font_family == "Verdana,Helvetica,sans-serif"
        assert style.font_size_pts == 9
        assert style.height == 20

    def test_with_changes(self) -> None:
        """Test copies re-derive spacing."""
        style = BadgeStyle().with_changes(height=30)
        assert style.height == 30
        assert style.border == 10
        assert style.text_offset_y == 19

    def test_with_changes_validates(self) -> None:
        """Test invalid replacements are rejected."""
        with pytest.raises(ValidationError):
            BadgeStyle().with_changes(height=0)

    def test_frozen(self) -> None:
        """Test the style cannot be mutated."""
        style = BadgeStyle()
        with pytest.raises(ValidationError):
            style.height = 40  # type: ignore[misc]


class TestShatterConfig:
    """Tests for ShatterConfig settings."""

    def test_defaults(self) -> None:
        """Test the mosaic defaults."""
        config = ShatterConfig()
        assert config.max_scale_width == 120
        assert config.max_scale_height == 80
        assert config.color_chuck == 64
        assert config.base_sep == 15

    @pytest.mark.parametrize("sep", [0, -1])
    def test_separation_must_be_positive(self, sep: float) -> None:
        """Test a non-positive separation is rejected."""
        with pytest.raises(ValidationError):
            ShatterConfig(base_sep=sep)

    def test_margin_minimum(self) -> None:
        """Test the super-triangle margin cannot shrink the bounding circle."""
        with pytest.raises(ValidationError):
            ShatterConfig(super_triangle_margin=0.5)


class TestBadgeSettings:
    """Tests for BadgeSettings."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = get_default_settings()
        assert settings.style_kind is StyleKind.FLAT
        assert settings.emoticons is False
        assert settings.logging.log_level == "WARNING"

    def test_style_kind_from_string(self) -> None:
        """Test style kind accepts its slug."""
        assert BadgeSettings(style_kind="shatter").style_kind is StyleKind.SHATTER


class TestBadgeRequest:
    """Tests for BadgeRequest."""

    def test_defaults(self) -> None:
        """Test a request only needs a label."""
        request = BadgeRequest(label="build")
        assert request.status is Status.PASSING
        assert request.status_text is None
        assert request.icon is None

    @pytest.mark.parametrize(
        ("label", "expected"),
        [("build", "build.svg"), ("my build", "my-build.svg"), ("a/b", "a-b.svg"), ("!!!", "badge.svg")],
    )
    def test_output_name(self, label: str, expected: str) -> None:
        """Test output names are derived from the label."""
        assert BadgeRequest(label=label).output_name() == expected

    def test_explicit_output(self) -> None:
        """Test an explicit output name wins."""
        assert BadgeRequest(label="build", output="ci.svg").output_name() == "ci.svg"


class TestLoadManifest:
    """Tests for load_manifest function."""

    def test_load(self, tmp_path) -> None:
        """Test a valid manifest."""
        path = tmp_path / "badges.json"
        path.write_text(
            json.dumps(
                {
                    "badges": [
                        {"label": "build", "status": "passing"},
                        {"label": "nuget", "status": "not-found", "right_color": "#123"},
                    ]
                }
            ),
            encoding="utf-8",
        )
        manifest = load_manifest(path)
        assert len(manifest.badges) == 2
        assert manifest.badges[1].status is Status.NOT_FOUND
        assert manifest.badges[1].right_color == "#123"

    def test_missing_file(self, tmp_path) -> None:
        """Test a missing manifest raises ManifestError."""
        with pytest.raises(ManifestError):
            load_manifest(tmp_path / "missing.json")

    def test_invalid_status(self, tmp_path) -> None:
        """Test an unknown status slug fails validation."""
        path = tmp_path / "badges.json"
        path.write_text('{"badges": [{"label": "x", "status": "broken"}]}', encoding="utf-8")
        with pytest.raises(ManifestError, match="1 validation error"):
            load_manifest(path)

    def test_invalid_json(self, tmp_path) -> None:
        """Test malformed JSON raises ManifestError."""
        path = tmp_path / "badges.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ManifestError):
            load_manifest(path)
