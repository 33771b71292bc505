"""Parallel rendering of many badges.

Badges are independent, so a batch is spread over a thread pool with no
locking. Each shatter render draws from its own random generator: a seeded
one per request when a seed is given, otherwise the worker thread's own.

Key components:
- render_request: Render and write one badge, capturing any error
- BatchRenderer: Orchestrates a whole manifest
"""

import random
import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import replace
from pathlib import Path
from typing import Any

from chaoticbadge.config import BadgeRequest
from chaoticbadge.core.layout import BadgeRenderer, TextMeasurer
from chaoticbadge.core.style import BadgeStyleStrategy, ShatterStyle
from chaoticbadge.io import SvgWriter, load_icon, parse_color
from chaoticbadge.utils import RenderLogger, RenderStats


def render_request(
    request: BadgeRequest,
    renderer: BadgeRenderer,
    writer: SvgWriter,
    output_dir: Path,
) -> dict[str, Any]:
    """Render a single badge and write it to ``output_dir``.

    Args:
        request: Badge to render
        renderer: Renderer to use
        writer: SVG writer
        output_dir: Directory receiving the SVG file

    Returns:
        Dictionary containing either:
        - Success: {"label": str, "output": str, "width": float, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "label": str, "traceback": str, "duration_ms": float}
    """
    start_time = time.time()

    try:
        icon = load_icon(request.icon) if request.icon is not None else None
        drawing = renderer.render(
            request.label,
            request.status,
            status_text=request.status_text,
            left_color=parse_color(request.left_color),
            right_color=parse_color(request.right_color),
            icon=icon,
        )
        output_path = output_dir / request.output_name()
        writer.write(drawing, output_path)

        duration_ms = (time.time() - start_time) * 1000
        return {
            "label": request.label,
            "output": str(output_path),
            "width": drawing.width,
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "label": request.label,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class BatchRenderer:
    """Renders a list of badge requests on a thread pool.

    Example:
        batch = BatchRenderer(ShatterStyle(), FixedWidthMeasurer(), seed=7)
        stats = batch.process(manifest.badges, output_dir=Path("badges"))
    """

    def __init__(
        self,
        strategy: BadgeStyleStrategy,
        measurer: TextMeasurer,
        writer: SvgWriter | None = None,
        seed: int | None = None,
        render_logger: RenderLogger | None = None,
    ) -> None:
        """Initialize the batch renderer.

        Args:
            strategy: Style strategy for every badge
            measurer: Text measurement capability
            writer: SVG writer (default: SvgWriter())
            seed: Base seed; request ``i`` uses ``seed + i`` for reproducible mosaics
            render_logger: Logger collecting statistics
        """
        self.strategy = strategy
        self.measurer = measurer
        self.writer = writer or SvgWriter()
        self.seed = seed
        self.render_logger = render_logger or RenderLogger()

    def renderer_for(self, index: int) -> BadgeRenderer:
        """Return the renderer used for the request at ``index``."""
        strategy = self.strategy
        if isinstance(strategy, ShatterStyle):
            rng = random.Random(self.seed + index) if self.seed is not None else None
            strategy = replace(strategy, rng=rng)
        return BadgeRenderer(strategy, self.measurer)

    def process(
        self,
        requests: Sequence[BadgeRequest],
        output_dir: Path,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> RenderStats:
        """Render every request and write the results.

        Requests whose output name repeats an earlier one are skipped.

        Args:
            requests: Badges to render
            output_dir: Directory receiving the SVG files (created if missing)
            max_workers: Thread count (None = executor default)
            progress_callback: Called with (completed, total) after each badge

        Returns:
            Statistics of the run
        """
        stats = self.render_logger.stats
        stats.start_time = time.time()
        output_dir.mkdir(parents=True, exist_ok=True)

        pending: list[tuple[int, BadgeRequest]] = []
        seen_outputs: set[str] = set()
        for index, request in enumerate(requests):
            name = request.output_name()
            if name in seen_outputs:
                self.render_logger.log_render_skipped(request.label, f"duplicate output {name}")
                continue
            seen_outputs.add(name)
            self.render_logger.log_render_start(request.label)
            pending.append((index, request))

        total = len(pending)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(
                    render_request, request, self.renderer_for(index), self.writer, output_dir
                )
                for index, request in pending
            ]
            for completed, future in enumerate(as_completed(futures), start=1):
                result = future.result()
                if "error" in result:
                    self.render_logger.log_render_error(
                        result["label"],
                        result["error"],
                        error_type=result["error_type"],
                        traceback=result["traceback"],
                    )
                else:
                    self.render_logger.log_render_complete(
                        result["label"],
                        result["output"],
                        result["width"],
                        result["duration_ms"],
                    )
                if progress_callback is not None:
                    progress_callback(completed, total)

        stats.end_time = time.time()
        return stats
