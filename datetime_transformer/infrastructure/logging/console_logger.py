from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing_extensions import override

from rich.console import Console
from rich.markup import escape

from ...ports import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    column: str = ""
    pattern: str = ""
    operation: str = ""
    start_time: datetime = field(default_factory=datetime.now)

    def elapsed_ms(self) -> float:
        return (datetime.now() - self.start_time).total_seconds() * 1000


class ConsoleLogger(LoggerPort):
    """Rich console logger with verbosity levels and conversion statistics."""

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = {
            "values_transformed": 0,
            "columns_processed": 0,
            "warnings": 0,
            "errors": 0,
        }

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    def clear_context(self) -> None:
        self._context = None

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{message}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_conversion(self, direction: str, value: object, result: object) -> None:
        self._stats["values_transformed"] += 1
        self.verbose(f"{direction.capitalize()}: {escape(repr(value))} → {escape(repr(result))}")

    @override
    def log_column_processed(
        self, column: str, row_count: int, failed_count: int
    ) -> None:
        self._stats["columns_processed"] += 1
        self._stats["values_transformed"] += row_count - failed_count
        msg = f"  Processed {row_count:,} values in {column}"
        if failed_count:
            msg += f" ({failed_count:,} failed)"
        self.verbose(msg)

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Transformation Statistics:[/dim]")
            self.console.print(
                f"[dim]  Values transformed: {self._stats['values_transformed']:,}[/dim]"
            )
            self.console.print(
                f"[dim]  Columns processed: {self._stats['columns_processed']}[/dim]"
            )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "values_transformed": 0,
            "columns_processed": 0,
            "warnings": 0,
            "errors": 0,
        }

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts: list[str] = []
        if self._context.column:
            parts.append(self._context.column)
        if self._context.pattern:
            parts.append(escape(self._context.pattern))
        return f"\\[{':'.join(parts)}] " if parts else ""
