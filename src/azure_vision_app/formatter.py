"""Turn analysis results into console sections."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from azure_vision_app.models import AnalysisResult

NO_RESULT_TEXT = "Ingen analysresultat."


@dataclass(frozen=True)
class Section:
    """A block of output lines. ``title`` is printed as a header when set."""

    name: str
    title: str | None
    lines: tuple[str, ...]
    style: str | None = None


def format_percent(value: float) -> str:
    """Format a confidence as a percentage with two decimals, e.g. 0.8765 -> '87.65%'."""
    percent = (Decimal(str(value)) * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{percent}%"


def _item_line(label: str, confidence: float) -> str:
    return f" - {label} (tillförlitlighet: {format_percent(confidence)})"


def format_analysis(result: AnalysisResult) -> list[Section]:
    """Build output sections in fixed order, skipping absent ones."""
    sections: list[Section] = []

    if result.description:
        lines = tuple(
            f"Beskrivning: {c.text} (tillförlitlighet: {format_percent(c.confidence)})"
            for c in result.description
        )
        sections.append(Section("description", None, lines, "green"))

    if result.tags:
        lines = tuple(_item_line(t.name, t.confidence) for t in result.tags)
        sections.append(Section("tags", "Taggar:", lines, "yellow"))

    if result.categories:
        lines = tuple(_item_line(c.name, c.score) for c in result.categories)
        sections.append(Section("categories", "Kategorier:", lines, "cyan"))

    if result.brands:
        lines = tuple(_item_line(b.name, b.confidence) for b in result.brands)
        sections.append(Section("brands", "Varumärken:", lines, "magenta"))

    if result.objects:
        lines = tuple(_item_line(o.label, o.confidence) for o in result.objects)
        sections.append(Section("objects", "Objekt i bilden:", lines, "red"))

    if result.adult is not None:
        lines = (
            f" -Vuxet: {result.adult.is_adult}",
            f" -Racy: {result.adult.is_racy}",
            f" -Blodigt: {result.adult.is_gory}",
        )
        sections.append(Section("adult", "Bedömningar:", lines))

    return sections


def render_analysis(result: AnalysisResult | None) -> str:
    """Plain-text rendering of an analysis result."""
    if result is None:
        return NO_RESULT_TEXT
    out: list[str] = []
    for section in format_analysis(result):
        if section.title:
            out.append(section.title)
        out.extend(section.lines)
    return "\n".join(out)
