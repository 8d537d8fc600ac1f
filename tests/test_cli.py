# test_cli.py

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from notemark import __version__
from notemark.cli.app import app

runner = CliRunner()


@pytest.fixture
def note_file(tmp_path: Path) -> Path:
    path = tmp_path / "note.md"
    path.write_text(
        "\n".join([
            "# Trip [notes](https://example.com/trip)",
            "",
            "![photo](photo.jpg)",
            "",
            "| Day | Place |",
            "| --- | ----- |",
            "| 1   | Paris |",
        ]),
        encoding="utf-8",
    )
    return path


def test_urls_json(note_file: Path):
    # When
    result = runner.invoke(app, ["urls", str(note_file), "--format", "json"])

    # Then
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["urls"] == [
        {"url": "https://example.com/trip", "kind": "anchor"},
        {"url": "photo.jpg", "kind": "image"},
    ]
    assert data["summary"] == {"total": 2, "images": 1, "anchors": 1}


def test_urls_json_without_anchors(note_file: Path):
    result = runner.invoke(app, ["urls", str(note_file), "--no-anchors", "-f", "json"])

    assert result.exit_code == 0
    assert [item["url"] for item in json.loads(result.output)["urls"]] == ["photo.jpg"]


def test_urls_rich(note_file: Path):
    result = runner.invoke(app, ["urls", str(note_file)])

    assert result.exit_code == 0
    assert "photo.jpg" in result.output
    assert "2 URLs: 1 images, 1 links" in result.output


def test_urls_from_stdin():
    result = runner.invoke(app, ["urls", "-", "--format", "json"], input="[a](b.md)")

    assert result.exit_code == 0
    assert json.loads(result.output)["urls"] == [{"url": "b.md", "kind": "anchor"}]


def test_urls_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["urls", str(tmp_path / "missing.md")])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_urls_unknown_format(note_file: Path):
    result = runner.invoke(app, ["urls", str(note_file), "--format", "xml"])

    assert result.exit_code == 1
    assert "Unknown format" in result.output


def test_title(note_file: Path):
    result = runner.invoke(app, ["title", str(note_file)])

    assert result.exit_code == 0
    assert result.output.strip() == "Trip notes"


def test_title_from_stdin():
    result = runner.invoke(app, ["title", "-"], input="\n\n## [Hello](x) world\nbody")

    assert result.exit_code == 0
    assert result.output.strip() == "Hello world"


def test_tables_json(note_file: Path):
    result = runner.invoke(app, ["tables", str(note_file), "--format", "json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["summary"] == {"total": 1}
    assert data["tables"][0]["line_number"] == 5
    assert data["tables"][0]["columns"] == 2


def test_tables_directory_is_rejected(tmp_path: Path):
    result = runner.invoke(app, ["tables", str(tmp_path)])

    assert result.exit_code == 1
    assert "not a file" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"v{__version__}" in result.output


def test_missing_file_with_markup_in_name(tmp_path: Path):
    # Given
    target = tmp_path / "[/red]note[x].md"

    # When
    result = runner.invoke(app, ["title", str(target)])

    # Then
    assert result.exit_code == 1
    assert "[/red]note[x].md" in result.output.replace("\n", "")


def test_urls_file_with_brackets_in_name(tmp_path: Path):
    path = tmp_path / "[draft].md"
    path.write_text("![a](a.png)", encoding="utf-8")

    result = runner.invoke(app, ["urls", str(path)])

    assert result.exit_code == 0
    assert "a.png" in result.output
