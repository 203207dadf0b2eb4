"""Console output with optional color."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from rich.console import Console

from azure_vision_app.formatter import NO_RESULT_TEXT, format_analysis
from azure_vision_app.models import AnalysisResult


class Reporter(ABC):
    """Line-oriented console output. Subclasses decide how to color it."""

    @abstractmethod
    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None:
        self.info(message)

    def warn(self, message: str) -> None:
        self.info(message)

    def error(self, message: str) -> None:
        self.info(message)

    def section(self, title: str | None, lines: Iterable[str], style: str | None = None) -> None:
        if title:
            self.info(title)
        for line in lines:
            self.info(line)

    def analysis(self, result: AnalysisResult | None) -> None:
        """Print every present section of an analysis result."""
        if result is None:
            self.info(NO_RESULT_TEXT)
            return
        for section in format_analysis(result):
            self.section(section.title, section.lines, section.style)


class RichReporter(Reporter):
    """Reporter backed by a rich Console.

    rich drops the colors by itself when the output is not a terminal.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)

    def _print(self, message: str, style: str | None = None) -> None:
        self.console.print(
            message, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def info(self, message: str) -> None:
        self._print(message)

    def success(self, message: str) -> None:
        self._print(message, "green")

    def warn(self, message: str) -> None:
        self._print(message, "yellow")

    def error(self, message: str) -> None:
        self._print(message, "bold red")

    def section(self, title: str | None, lines: Iterable[str], style: str | None = None) -> None:
        if title:
            self._print(title, style)
        for line in lines:
            self._print(line, style)
