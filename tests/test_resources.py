# test_resources.py

import pytest

from notemark.core.resources import (
    is_resource_url,
    replace_resource_url,
    resource_id_from_url,
    resource_url,
)

RESOURCE_ID = "0123456789abcdef0123456789abcdef"


def test_replace_resource_url_in_image():
    # Given
    md = "![img](https://example.com/a.png)"

    # When
    result = replace_resource_url(md, "https://example.com/a.png", RESOURCE_ID)

    # Then
    assert result == f"![img](:/{RESOURCE_ID})"


def test_replace_resource_url_with_angle_brackets():
    md = "[file](<https://example.com/my file.pdf>)"

    result = replace_resource_url(md, "https://example.com/my file.pdf", RESOURCE_ID)

    assert result == f"[file](:/{RESOURCE_ID})"


def test_replace_resource_url_replaces_all_occurrences():
    md = "![a](http://x.com/a.png)\n\nText\n\n[again](http://x.com/a.png \"title\")"

    result = replace_resource_url(md, "http://x.com/a.png", RESOURCE_ID)

    assert result == f"![a](:/{RESOURCE_ID})\n\nText\n\n[again](:/{RESOURCE_ID} \"title\")"


def test_replace_resource_url_ignores_urls_outside_links():
    md = "See http://x.com/a.png or [link](http://x.com/a.png)"

    result = replace_resource_url(md, "http://x.com/a.png", RESOURCE_ID)

    assert result == f"See http://x.com/a.png or [link](:/{RESOURCE_ID})"


def test_replace_resource_url_treats_url_literally():
    # Given a URL full of regex metacharacters
    md = "![a](https://x.com/aXpng) ![b](https://x.com/a.png?size=1+2)"

    # When
    result = replace_resource_url(md, "https://x.com/a.png?size=1+2", RESOURCE_ID)

    # Then only the literal match is replaced
    assert result == f"![a](https://x.com/aXpng) ![b](:/{RESOURCE_ID})"


def test_replace_resource_url_empty_input():
    assert replace_resource_url("", "http://x.com", RESOURCE_ID) == ""
    assert replace_resource_url("[a](b)", "", RESOURCE_ID) == "[a](b)"


def test_resource_url():
    assert resource_url(RESOURCE_ID) == f":/{RESOURCE_ID}"


@pytest.mark.parametrize(
    "url, expected",
    [
        (f":/{RESOURCE_ID}", True),
        (f":/{RESOURCE_ID}#page=2", True),
        (":/short", False),
        (f"https://x.com/{RESOURCE_ID}", False),
        ("", False),
    ],
)
def test_is_resource_url(url: str, expected: bool):
    assert is_resource_url(url) is expected


def test_resource_id_from_url():
    assert resource_id_from_url(f":/{RESOURCE_ID}#frag") == RESOURCE_ID
    assert resource_id_from_url("http://x.com") == ""
