"""Console-based output handler for sampledsignals."""

from rich.console import Console
from rich.table import Table


class ConsoleOutputHandler:
    """Rich Console-based output handler."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def print(self, message: str, **kwargs) -> None:
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        self.print(message)

    def warning(self, message: str) -> None:
        self.print(f"[yellow]Warning:[/yellow] {message}")

    def error(self, message: str) -> None:
        self.print(f"[red]Error:[/red] {message}")

    def table(self, title: str, rows: list[tuple[str, str]]) -> None:
        """Print ``rows`` as a borderless key/value table."""
        table = Table(title=title, show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        for key, value in rows:
            table.add_row(key, value)
        self.console.print(table)
