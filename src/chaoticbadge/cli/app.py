"""CLI application entry point for chaoticbadge.

This module provides the main CLI interface using Typer.
"""

import random
from pathlib import Path
from typing import Annotated

import typer

from chaoticbadge import __version__
from chaoticbadge.cli.output import (
    console,
    create_progress,
    print_badge_info,
    print_batch_errors,
    print_batch_summary,
    print_error,
    print_header,
    print_step,
    print_written,
)
from chaoticbadge.config import (
    BadgeRequest,
    BadgeSettings,
    BadgeStyle,
    LoggingConfig,
    StyleKind,
    load_manifest,
)
from chaoticbadge.core import BadgeRenderer, BatchRenderer, TextMeasurer, create_strategy
from chaoticbadge.domain import Status
from chaoticbadge.exceptions import (
    ChaoticBadgeError,
    IconLoadError,
    ManifestError,
    TextMeasurementError,
)
from chaoticbadge.io import FixedWidthMeasurer, FontMetrics, SvgWriter, load_icon, parse_color
from chaoticbadge.utils import RenderLogger, configure_logging

# Height and font size overrides at or below this are ignored
MIN_SIZE_OVERRIDE = 4

# Create the Typer app
app = typer.Typer(
    name="chaoticbadge",
    help="Render two-segment status badges as SVG.",
    add_completion=False,
    no_args_is_help=True,
)

FontFileOption = Annotated[
    Path | None,
    typer.Option(
        "--font-file",
        "-f",
        help="TTF/OTF font used to measure text",
    ),
]
ApproximateMetricsOption = Annotated[
    bool,
    typer.Option(
        "--approximate-metrics",
        help="Measure text with a fixed character width instead of a font file",
    ),
]
StyleOption = Annotated[
    StyleKind,
    typer.Option(
        "--style",
        "-s",
        help="Block style",
        case_sensitive=False,
    ),
]
EmoticonsOption = Annotated[
    bool,
    typer.Option(
        "--emoticons",
        help="Use emoticon status texts",
    ),
]
HeightOption = Annotated[
    int | None,
    typer.Option(
        "--height",
        help=f"Badge height (ignored unless > {MIN_SIZE_OVERRIDE})",
    ),
]
FontSizeOption = Annotated[
    int | None,
    typer.Option(
        "--font-size",
        help=f"Font size in points (ignored unless > {MIN_SIZE_OVERRIDE})",
    ),
]
FontFamilyOption = Annotated[
    str | None,
    typer.Option(
        "--font-family",
        help="CSS font family written to the SVG",
    ),
]
SeedOption = Annotated[
    int | None,
    typer.Option(
        "--seed",
        help="Seed for the shatter mosaic (default: random)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]chaoticbadge[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render two-segment status badges as SVG."""


def build_settings(
    style_kind: StyleKind,
    emoticons: bool,
    height: int | None,
    font_size: int | None,
    font_family: str | None,
    log_file: Path | None,
    log_level: str,
) -> BadgeSettings:
    """Create settings from CLI arguments.

    Height and font size only apply when larger than ``MIN_SIZE_OVERRIDE``.
    """
    style = BadgeStyle()
    if height is not None and height > MIN_SIZE_OVERRIDE:
        style = style.with_changes(height=height)
    if font_size is not None and font_size > MIN_SIZE_OVERRIDE:
        style = style.with_changes(font_size_pts=font_size)
    if font_family:
        style = style.with_changes(font_family=font_family)

    return BadgeSettings(
        style=style,
        style_kind=style_kind,
        emoticons=emoticons,
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def build_measurer(font_file: Path | None, approximate: bool) -> TextMeasurer:
    """Create the text measurer selected on the command line.

    Raises:
        TextMeasurementError: If neither a usable font nor approximation is selected
    """
    if font_file is not None:
        metrics = FontMetrics(font_file)
        try:
            metrics.load()
        except Exception as e:
            raise TextMeasurementError(f"could not load font '{font_file}': {e}") from e
        return metrics
    if approximate:
        return FixedWidthMeasurer()
    raise TextMeasurementError("no font file given (use --font-file or --approximate-metrics)")


@app.command()
def render(
    label: Annotated[
        str,
        typer.Argument(
            help="Text of the left block",
            show_default=False,
        ),
    ],
    status: Annotated[
        Status,
        typer.Argument(
            help="Status classification",
            case_sensitive=False,
        ),
    ] = Status.PASSING,
    status_text: Annotated[
        str | None,
        typer.Option(
            "--status-text",
            "-t",
            help="Text of the right block (default: from the status)",
        ),
    ] = None,
    left_color: Annotated[
        str | None,
        typer.Option(
            "--left-color",
            help="Left block hex color (malformed values are ignored)",
        ),
    ] = None,
    right_color: Annotated[
        str | None,
        typer.Option(
            "--right-color",
            help="Right block hex color (malformed values are ignored)",
        ),
    ] = None,
    icon: Annotated[
        Path | None,
        typer.Option(
            "--icon",
            "-i",
            help="SVG icon drawn before the label",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {label}.svg)",
        ),
    ] = None,
    style: StyleOption = StyleKind.FLAT,
    emoticons: EmoticonsOption = False,
    height: HeightOption = None,
    font_size: FontSizeOption = None,
    font_family: FontFamilyOption = None,
    font_file: FontFileOption = None,
    approximate_metrics: ApproximateMetricsOption = False,
    seed: SeedOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render a single badge to an SVG file.

    Example:
        chaoticbadge render build passing --style shatter --font-file Verdana.ttf

    This will create build.svg.
    """
    settings = build_settings(style, emoticons, height, font_size, font_family, log_file, log_level)
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    request = BadgeRequest(
        label=label,
        status=status,
        status_text=status_text,
        left_color=left_color,
        right_color=right_color,
        icon=icon,
    )
    output_path = output if output is not None else Path(request.output_name())

    try:
        measurer = build_measurer(font_file, approximate_metrics)
        rng = random.Random(seed) if seed is not None else None
        renderer = BadgeRenderer(create_strategy(settings, rng=rng), measurer)

        if not quiet:
            print_step("Rendering")

        badge_icon = load_icon(icon) if icon is not None else None
        drawing = renderer.render(
            label,
            status,
            status_text=status_text,
            left_color=parse_color(left_color),
            right_color=parse_color(right_color),
            icon=badge_icon,
        )
        SvgWriter().write(drawing, output_path)

        if not quiet:
            shown_text = (
                status_text
                if status_text is not None
                else renderer.strategy.status_map.resolve(status).text
            )
            print_badge_info(label, shown_text, style.value, drawing.width, drawing.height)
            print_written(str(output_path), _format_file_size(output_path))

    except TextMeasurementError as e:
        print_error("Cannot measure text", details=e.reason)
        raise typer.Exit(code=1)
    except IconLoadError as e:
        print_error(f"Could not load icon: {e.reason}")
        raise typer.Exit(code=1)
    except ChaoticBadgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Could not write badge: {e}")
        raise typer.Exit(code=1)


@app.command()
def batch(
    manifest: Annotated[
        Path,
        typer.Argument(
            help="JSON manifest listing the badges to render",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path,
        typer.Option(
            "--output-dir",
            "-d",
            help="Directory receiving the SVG files",
        ),
    ] = Path("."),
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of worker threads (default: auto)",
            min=1,
        ),
    ] = None,
    style: StyleOption = StyleKind.FLAT,
    emoticons: EmoticonsOption = False,
    height: HeightOption = None,
    font_size: FontSizeOption = None,
    font_family: FontFamilyOption = None,
    font_file: FontFileOption = None,
    approximate_metrics: ApproximateMetricsOption = False,
    seed: SeedOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render every badge listed in a manifest.

    The manifest is a JSON object: {"badges": [{"label": "build", "status": "passing"}, ...]}
    """
    settings = build_settings(style, emoticons, height, font_size, font_family, log_file, log_level)
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        requests = load_manifest(manifest).badges
        measurer = build_measurer(font_file, approximate_metrics)
        batch_renderer = BatchRenderer(
            create_strategy(settings),
            measurer,
            seed=seed,
            render_logger=RenderLogger(logger),
        )

        if not quiet:
            print_step(f"Rendering {len(requests)} badges")
            with create_progress() as progress:
                task_id = progress.add_task("Rendering", total=len(requests))

                def update_progress(completed: int, total: int) -> None:
                    progress.update(task_id, completed=completed, total=total)

                stats = batch_renderer.process(
                    requests,
                    output_dir=output_dir,
                    max_workers=workers,
                    progress_callback=update_progress,
                )
        else:
            stats = batch_renderer.process(requests, output_dir=output_dir, max_workers=workers)

    except ManifestError as e:
        print_error(f"Could not read manifest: {e.reason}")
        raise typer.Exit(code=1)
    except TextMeasurementError as e:
        print_error("Cannot measure text", details=e.reason)
        raise typer.Exit(code=1)
    except ChaoticBadgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_batch_summary(
            output_dir=str(output_dir),
            total_time_s=stats.duration_seconds,
            rendered=stats.rendered_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            avg_time_ms=stats.avg_render_time_ms,
        )
        print_batch_errors(stats.errors)

    if stats.error_count:
        raise typer.Exit(code=1)


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "12 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
