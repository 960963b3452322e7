"""Console-based output handler for CRUSH."""

from rich.console import Console
from rich.table import Table

from crush.config.models import CrushSettings
from crush.signal.model import Signal


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        """Print an informational message."""
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        self.print(f"[red]Error:[/red] {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        self.print(f"[green]{message}[/green]")

    def print_settings(self, settings: CrushSettings, source: str | None = None) -> None:
        """Print the effective crush settings as a table."""
        table = Table(title="Crush Settings")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", justify="right")

        table.add_row("Sample rate", f"{settings.sample_rate} Hz")
        table.add_row("Bit depth", f"{settings.bit_depth} bit")
        table.add_row("Interpolation", settings.interpolation.value)

        self.console.print(table)
        if source:
            self.console.print(f"[dim]Settings from {source}[/dim]")

    def print_signal_summary(self, label: str, signal: Signal) -> None:
        """Print a one-line description of a signal."""
        self.print(
            f"{label}: {signal.channel_count} channel(s), {signal.sample_rate} Hz, "
            f"{signal.frame_count} frames ({signal.duration_seconds:.2f}s)"
        )
