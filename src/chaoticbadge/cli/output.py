"""Rich console output for the badge CLI.

Everything the commands print goes through the shared ``console`` so that
``--quiet`` and test runners only have one stream to deal with.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

console = Console()

MARK_STEP = "▸"
MARK_OK = "✓"
MARK_FAIL = "✗"
MARK_SEP = "·"


def create_progress() -> Progress:
    """Create the progress bar shown while a batch renders.

    Returns:
        Progress with a bar, a done/total counter and elapsed time
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=32, complete_style="cyan", finished_style="green"),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
    )


def print_header(version: str) -> None:
    """Print the program name and version above a rule."""
    console.print()
    console.rule(f"[bold]chaoticbadge[/bold] {version}", align="left")


def print_step(message: str) -> None:
    console.print(f"\n{MARK_STEP} {message}")


def print_badge_info(label: str, status_text: str, style: str, width: float, height: float) -> None:
    """Print a one-line preview of a rendered badge.

    Args:
        label: Left block text
        status_text: Right block text
        style: Style name
        width: Badge width in px
        height: Badge height in px
    """
    preview = Text("  ")
    preview.append(f" {label} ", style="white on grey23")
    preview.append(f" {status_text} ", style="black on green3")
    preview.append(f"  {style} {MARK_SEP} {width:.1f} x {height:g} px", style="dim")
    console.print(preview)


def format_duration(seconds: float) -> str:
    """Format a duration for the batch summary.

    Examples:
        >>> format_duration(0.25)
        '250 ms'
        >>> format_duration(75)
        '1 min 15.0 s'
    """
    if seconds < 1:
        return f"{seconds * 1000:.0f} ms"
    if seconds < 60:
        return f"{seconds:.2f} s"
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)} min {rest:.1f} s"


def print_written(output_path: str, file_size: str) -> None:
    """Report the file a badge was saved to."""
    line = Text(f"\n{MARK_OK} ", style="bold green")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})", style="dim")
    console.print(line)


def print_batch_summary(
    output_dir: str,
    total_time_s: float,
    rendered: int,
    skipped: int,
    errors: int,
    avg_time_ms: float | None = None,
) -> None:
    """Print the result table of a batch run.

    Args:
        output_dir: Directory the badges were written to
        total_time_s: Wall time of the run in seconds
        rendered: Number of badges written
        skipped: Number of requests skipped as duplicates
        errors: Number of requests that failed
        avg_time_ms: Mean render time per written badge
    """
    status = "[bold green]done[/bold green]" if errors == 0 else "[bold red]done with errors[/bold red]"
    console.print(f"\n{MARK_OK if errors == 0 else MARK_FAIL} Batch {status}")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_row("output", output_dir)
    table.add_row("rendered", str(rendered))
    table.add_row("skipped", str(skipped))
    table.add_row("failed", f"[red]{errors}[/red]" if errors else "0")
    table.add_row("time", format_duration(total_time_s))
    if avg_time_ms is not None:
        table.add_row("per badge", f"{avg_time_ms:.1f} ms")
    console.print(table)


def print_batch_errors(errors: list[tuple[str, str]]) -> None:
    """List the badges that failed, one per line."""
    for label, message in errors:
        console.print(f"  [red]{MARK_FAIL}[/red] [bold]{label}[/bold] {MARK_SEP} {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print a fatal error.

    Args:
        message: What went wrong
        details: Underlying cause, printed on its own line
    """
    console.print(f"\n[bold red]{MARK_FAIL} {message}[/bold red]")
    if details:
        console.print(f"  {details}", style="dim")
