# test_reporters.py

import io
import json

from rich.console import Console

from notemark.core.tables import TableLocation
from notemark.core.urls import ExtractedUrl, UrlKind
from notemark.reporters import JsonReporter, RichReporter


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def test_json_reporter_urls():
    # Given
    output = io.StringIO()
    urls = [
        ExtractedUrl(url="a.png", kind=UrlKind.IMAGE),
        ExtractedUrl(url="b.md", kind=UrlKind.ANCHOR),
    ]

    # When
    JsonReporter(output).report_urls(urls, "note.md")

    # Then
    data = json.loads(output.getvalue())
    assert data["target"] == "note.md"
    assert data["urls"][0] == {"url": "a.png", "kind": "image"}
    assert data["summary"] == {"total": 2, "images": 1, "anchors": 1}


def test_json_reporter_tables():
    output = io.StringIO()
    tables = [TableLocation(line_number=3, columns=2, header="| a | b |", divider="|---|---|")]

    JsonReporter(output).report_tables(tables, "note.md")

    data = json.loads(output.getvalue())
    assert data["tables"] == [
        {"line_number": 3, "columns": 2, "header": "| a | b |", "divider": "|---|---|"}
    ]


def test_rich_reporter_urls():
    console, buffer = _console()

    RichReporter(console).report_urls([ExtractedUrl(url="a.png", kind=UrlKind.IMAGE)], "note.md")

    text = buffer.getvalue()
    assert "a.png" in text
    assert "1 URLs: 1 images, 0 links" in text


def test_rich_reporter_no_urls():
    console, buffer = _console()

    RichReporter(console).report_urls([], "note.md")

    assert "No URLs found in note.md" in buffer.getvalue()


def test_rich_reporter_tables():
    console, buffer = _console()
    tables = [TableLocation(line_number=7, columns=3, header="a | b | c", divider="-|-|-")]

    RichReporter(console).report_tables(tables, "note.md")

    text = buffer.getvalue()
    assert "a | b | c" in text
    assert "7" in text


def test_rich_reporter_target_with_brackets_is_literal():
    # Given a target that looks like Rich markup
    console, buffer = _console()

    # When
    RichReporter(console).report_urls([], "notes/[/bold]draft[x].md")
    RichReporter(console).report_tables([], "notes/[/bold]draft[x].md")

    # Then
    text = buffer.getvalue()
    assert "No URLs found in notes/[/bold]draft[x].md" in text
    assert "No tables found in notes/[/bold]draft[x].md" in text
