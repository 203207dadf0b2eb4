"""Tests for analysis formatting."""

import pytest
from conftest import output_of

from azure_vision_app.formatter import format_analysis, format_percent, render_analysis
from azure_vision_app.models import (
    AdultContent,
    AnalysisResult,
    Brand,
    Caption,
    Category,
    DetectedObject,
    Tag,
)
from azure_vision_app.reporter import Reporter


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.8765, "87.65%"),
        (0.92, "92.00%"),
        (1.0, "100.00%"),
        (0.0, "0.00%"),
        (0.12345, "12.35%"),
        (0.00001, "0.00%"),
    ],
)
def test_format_percent(value, expected):
    assert format_percent(value) == expected


def test_only_tags_emits_single_section():
    result = AnalysisResult(tags=(Tag("animal", 0.88),))
    sections = format_analysis(result)
    assert [s.name for s in sections] == ["tags"]
    assert sections[0].title == "Taggar:"
    assert sections[0].lines == (" - animal (tillförlitlighet: 88.00%)",)


def test_sections_in_fixed_order():
    result = AnalysisResult(
        adult=AdultContent(is_adult=False, is_racy=False, is_gory=True),
        objects=(DetectedObject("cat", 0.5),),
        brands=(Brand("Acme", 0.6),),
        categories=(Category("animal_", 0.7),),
        tags=(Tag("animal", 0.8),),
        description=(Caption("a cat", 0.9),),
    )
    names = [s.name for s in format_analysis(result)]
    assert names == ["description", "tags", "categories", "brands", "objects", "adult"]


def test_render_analysis_text():
    result = AnalysisResult(
        description=(Caption("a cat", 0.92),),
        objects=(DetectedObject("cat", 0.5),),
        adult=AdultContent(is_adult=False, is_racy=True, is_gory=False),
    )
    assert render_analysis(result) == "\n".join(
        [
            "Beskrivning: a cat (tillförlitlighet: 92.00%)",
            "Objekt i bilden:",
            " - cat (tillförlitlighet: 50.00%)",
            "Bedömningar:",
            " -Vuxet: False",
            " -Racy: True",
            " -Blodigt: False",
        ]
    )


def test_empty_sections_are_skipped():
    result = AnalysisResult(description=(), tags=(), brands=())
    assert format_analysis(result) == []
    assert render_analysis(result) == ""


def test_render_missing_result():
    assert render_analysis(None) == "Ingen analysresultat."


def test_reporter_prints_sections_verbatim(reporter, console):
    result = AnalysisResult(
        description=(Caption("a [bold] cat :smile:", 0.5),),
        categories=(Category("people_", 0.25),),
    )
    reporter.analysis(result)
    assert output_of(console).splitlines() == [
        "Beskrivning: a [bold] cat :smile: (tillförlitlighet: 50.00%)",
        "Kategorier:",
        " - people_ (tillförlitlighet: 25.00%)",
    ]


def test_reporter_missing_result(reporter, console):
    reporter.analysis(None)
    assert output_of(console).strip() == "Ingen analysresultat."


def test_reporter_base_is_abstract():
    with pytest.raises(TypeError):
        Reporter()


def test_reporter_defaults_route_through_info():
    class ListReporter(Reporter):
        def __init__(self):
            self.lines = []

        def info(self, message):
            self.lines.append(message)

    reporter = ListReporter()
    reporter.error("fel")
    reporter.section("Taggar:", [" - cat"])
    assert reporter.lines == ["fel", "Taggar:", " - cat"]
