"""Unit tests for batch rendering and render statistics."""

from pathlib import Path
from unittest.mock import MagicMock, call

from chaoticbadge.config import BadgeRequest
from chaoticbadge.core.batch import BatchRenderer, render_request
from chaoticbadge.core.layout import BadgeRenderer
from chaoticbadge.core.style import FlatStyle, ShatterStyle
from chaoticbadge.domain import Status
from chaoticbadge.io import FixedWidthMeasurer, SvgWriter
from chaoticbadge.utils import RenderLogger, RenderStats


class TestRenderRequest:
    """Tests for render_request function."""

    def test_success(self, tmp_path: Path) -> None:
        """Test a successful render returns the output path."""
        renderer = BadgeRenderer(FlatStyle(), FixedWidthMeasurer())
        result = render_request(BadgeRequest(label="build"), renderer, SvgWriter(), tmp_path)

        assert "error" not in result
        assert result["output"] == str(tmp_path / "build.svg")
        assert result["width"] > 0
        assert (tmp_path / "build.svg").exists()

    def test_error_captured(self, tmp_path: Path) -> None:
        """Test failures are returned as an error record."""
        renderer = BadgeRenderer(FlatStyle(), FixedWidthMeasurer())
        request = BadgeRequest(label="build", icon=tmp_path / "missing.svg")
        result = render_request(request, renderer, SvgWriter(), tmp_path)

        assert result["error_type"] == "IconLoadError"
        assert result["label"] == "build"
        assert "Traceback" in result["traceback"]
        assert not (tmp_path / "build.svg").exists()

    def test_malformed_color_ignored(self, tmp_path: Path) -> None:
        """Test a malformed color override does not fail the badge."""
        renderer = BadgeRenderer(FlatStyle(), FixedWidthMeasurer())
        request = BadgeRequest(label="build", left_color="#zzzzzz")
        result = render_request(request, renderer, SvgWriter(), tmp_path)
        assert "error" not in result


class TestBatchRenderer:
    """Tests for BatchRenderer class."""

    def test_process(self, tmp_path: Path) -> None:
        """Test every request is written."""
        requests = [
            BadgeRequest(label="build"),
            BadgeRequest(label="tests", status=Status.FAILING),
            BadgeRequest(label="release", status=Status.RELEASE, status_text="1.0.0"),
        ]
        output_dir = tmp_path / "out"
        stats = BatchRenderer(FlatStyle(), FixedWidthMeasurer()).process(
            requests, output_dir=output_dir, max_workers=2
        )

        assert stats.rendered_count == 3
        assert stats.error_count == 0
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "build.svg",
            "release.svg",
            "tests.svg",
        ]
        assert stats.duration_seconds >= 0
        assert stats.avg_render_time_ms is not None

    def test_duplicates_skipped(self, tmp_path: Path) -> None:
        """Test a repeated output name is rendered once."""
        requests = [BadgeRequest(label="build"), BadgeRequest(label="build", status=Status.FAILING)]
        stats = BatchRenderer(FlatStyle(), FixedWidthMeasurer()).process(requests, tmp_path)

        assert stats.rendered_count == 1
        assert stats.skipped_count == 1

    def test_errors_do_not_stop_batch(self, tmp_path: Path) -> None:
        """Test one failing badge leaves the others intact."""
        requests = [
            BadgeRequest(label="broken", icon=tmp_path / "missing.svg"),
            BadgeRequest(label="build"),
        ]
        stats = BatchRenderer(FlatStyle(), FixedWidthMeasurer()).process(requests, tmp_path)

        assert stats.rendered_count == 1
        assert stats.error_count == 1
        assert stats.errors[0][0] == "broken"

    def test_progress_callback(self, tmp_path: Path) -> None:
        """Test progress is reported after each badge."""
        calls: list[tuple[int, int]] = []
        requests = [BadgeRequest(label=f"b{i}") for i in range(4)]
        BatchRenderer(FlatStyle(), FixedWidthMeasurer()).process(
            requests, tmp_path, progress_callback=lambda done, total: calls.append((done, total))
        )
        assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_seeded_shatter_reproducible(self, tmp_path: Path) -> None:
        """Test a seed makes shatter output identical across runs."""
        requests = [BadgeRequest(label="build"), BadgeRequest(label="tests")]
        for name in ("a", "b"):
            BatchRenderer(ShatterStyle(), FixedWidthMeasurer(), seed=42).process(
                requests, tmp_path / name, max_workers=2
            )

        for badge in ("build.svg", "tests.svg"):
            first = (tmp_path / "a" / badge).read_text(encoding="utf-8")
            second = (tmp_path / "b" / badge).read_text(encoding="utf-8")
            assert first == second
            assert "<polygon" in first

    def test_unseeded_shatter_on_threads(self, tmp_path: Path) -> None:
        """Test unseeded shatter badges render on several worker threads."""
        requests = [BadgeRequest(label=f"b{i}") for i in range(8)]
        stats = BatchRenderer(ShatterStyle(), FixedWidthMeasurer()).process(
            requests, tmp_path, max_workers=4
        )

        assert stats.rendered_count == 8
        assert stats.error_count == 0
        for i in range(8):
            assert "<polygon" in (tmp_path / f"b{i}.svg").read_text(encoding="utf-8")

    def test_start_logged_for_rendered_requests(self, tmp_path: Path) -> None:
        """Test a start event is logged for each request that is not skipped."""
        logger = MagicMock()
        requests = [BadgeRequest(label="build"), BadgeRequest(label="build"), BadgeRequest(label="docs")]
        BatchRenderer(FlatStyle(), FixedWidthMeasurer(), render_logger=RenderLogger(logger)).process(
            requests, tmp_path
        )

        starts = [c for c in logger.debug.call_args_list if c.args == ("Rendering badge",)]
        assert starts == [call("Rendering badge", label="build"), call("Rendering badge", label="docs")]

    def test_renderer_for_flat_keeps_strategy(self) -> None:
        """Test flat strategies are shared between requests."""
        strategy = FlatStyle()
        batch = BatchRenderer(strategy, FixedWidthMeasurer(), seed=1)
        assert batch.renderer_for(0).strategy is strategy


class TestRenderLogger:
    """Tests for RenderLogger statistics."""

    def test_counts(self) -> None:
        """Test each event updates the statistics."""
        render_logger = RenderLogger()
        render_logger.log_render_start("a")
        render_logger.log_render_complete("a", "a.svg", 50.0, 2.0)
        render_logger.log_render_complete("b", "b.svg", 60.0, 4.0)
        render_logger.log_render_skipped("c", "duplicate")
        render_logger.log_render_error("d", "boom", error_type="RuntimeError")

        stats = render_logger.stats
        assert stats.rendered_count == 2
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("d", "boom")]
        assert stats.avg_render_time_ms == 3.0

    def test_empty_stats(self) -> None:
        """Test statistics before anything is rendered."""
        stats = RenderStats()
        assert stats.duration_seconds == 0.0
        assert stats.avg_render_time_ms is None
