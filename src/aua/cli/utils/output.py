"""Rich console output formatting utilities."""

from datetime import datetime, timezone

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from aua.models import (
    AccountInfo,
    ChartInfo,
    PlayRecord,
    SongInfoContent,
    UserBest30Content,
)

console = Console()

DIFFICULTY_LABELS = ["PST", "PRS", "FTR", "BYD"]


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_difficulty(difficulty: int) -> str:
    """Format a difficulty ordinal as its short label."""
    if 0 <= difficulty < len(DIFFICULTY_LABELS):
        return DIFFICULTY_LABELS[difficulty]
    return str(difficulty)


def format_constant(rating: int) -> str:
    """Format a chart rating (constant * 10) as the in-game level, e.g. 9+."""
    level, tenths = divmod(rating, 10)
    if level >= 9 and tenths >= 7:
        return f"{level}+"
    return str(level)


def format_timestamp_ms(timestamp_ms: int | None) -> str:
    """Format a millisecond epoch timestamp for display."""
    if not timestamp_ms:
        return "N/A"
    dt = datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%d %H:%M:%S")


def create_song_table(songs: list[SongInfoContent]) -> Table:
    """Create a rich table with one row per chart.

    Args:
        songs: Songs to display.

    Returns:
        Rich Table instance
    """
    table = Table(title="Songs")

    table.add_column("Song ID", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("Diff", justify="center", style="magenta")
    table.add_column("Level", justify="right")
    table.add_column("Constant", justify="right", style="green")
    table.add_column("Notes", justify="right")

    for song in songs:
        for chart in song.difficulties:
            table.add_row(
                song.song_id,
                chart.name_en,
                format_difficulty(chart.difficulty),
                format_constant(chart.rating),
                f"{chart.constant:.1f}",
                str(chart.note),
            )

    return table


def create_chart_panel(song_id: str, chart: ChartInfo) -> Panel:
    """Create a detailed panel for a single chart."""
    content = f"""[bold]Title:[/bold] {chart.name_en}
[bold]Artist:[/bold] {chart.artist}
[bold]Pack:[/bold] {chart.set_friendly or chart.set}
[bold]BPM:[/bold] {chart.bpm}
[bold]Version:[/bold] {chart.version}

[bold cyan]{format_difficulty(chart.difficulty)} {format_constant(chart.rating)}[/bold cyan]
  Constant: {chart.constant:.1f}
  Notes: {chart.note}
  Chart Designer: {chart.chart_designer}
  Jacket Designer: {chart.jacket_designer}"""

    return Panel(content, title=f"[bold]{song_id}[/bold]", border_style="blue")


def create_record_table(
    records: list[PlayRecord],
    title: str = "Records",
    songinfo: list[ChartInfo] | None = None,
) -> Table:
    """Create a rich table displaying play records.

    When ``songinfo`` is given it must be parallel to ``records``; its titles
    replace the song ids.
    """
    table = Table(title=title)

    table.add_column("#", justify="right")
    table.add_column("Song", style="cyan")
    table.add_column("Diff", justify="center", style="magenta")
    table.add_column("Score", justify="right")
    table.add_column("Rating", justify="right", style="green")
    table.add_column("P / N / L", justify="right")
    table.add_column("Played", no_wrap=True)

    for index, record in enumerate(records, start=1):
        name = record.song_id
        if songinfo and index <= len(songinfo):
            name = songinfo[index - 1].name_en
        table.add_row(
            str(index),
            name,
            format_difficulty(record.difficulty),
            f"{record.score:,}",
            f"{record.rating:.3f}",
            f"{record.perfect_count} / {record.near_count} / {record.miss_count}",
            format_timestamp_ms(record.time_played),
        )

    return table


def create_account_panel(account: AccountInfo) -> Panel:
    """Create a panel for a player profile."""
    potential = account.potential
    content = f"""[bold]Name:[/bold] {account.name}
[bold]Code:[/bold] {account.code}
[bold]Potential:[/bold] {f"{potential:.2f}" if potential is not None else "hidden"}
[bold]Joined:[/bold] {format_timestamp_ms(account.join_date)}"""

    return Panel(content, title="[bold]Player[/bold]", border_style="green")


def create_best30_panel(content: UserBest30Content) -> Panel:
    """Create a summary panel for best 30 averages."""
    text = f"""[bold]Best 30 Avg:[/bold] {content.best30_avg:.4f}
[bold]Recent 10 Avg:[/bold] {content.recent10_avg:.4f}"""

    return Panel(
        text,
        title=f"[bold]{content.account_info.name}[/bold]",
        border_style="cyan",
    )
