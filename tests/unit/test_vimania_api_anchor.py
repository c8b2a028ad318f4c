"""Tests for heading slugs and anchor lookup."""

import pytest

from vimania.api.anchor import find_anchor_line, title_to_anchor

pytestmark = pytest.mark.anchor


@pytest.mark.parametrize(
    ("title", "anchor"),
    [
        ("Custom ID Test", "custom-id-test"),
        ("Hello, World!", "hello-world"),
        ("Installation", "installation"),
        ("Step 1: Setup (optional)", "step-1-setup-optional"),
        ("pre-commit hooks", "pre-commit-hooks"),
        ("snake_case name", "snakecase-name"),
        ("Multiple   Spaces", "multiple-spaces"),
        ("", ""),
        (None, ""),
    ],
)
def test_title_to_anchor(title, anchor):
    assert title_to_anchor(title) == anchor


DOC = [
    "# Intro",
    "",
    "Some text",
    "## Getting Started!",
    "### Details {: #custom-details }",
    "Paragraph {: #para-id .note}",
    "## Intro",
]


def test_find_anchor_line_heading():
    assert find_anchor_line("intro", DOC) == 0


def test_find_anchor_line_strips_hash():
    assert find_anchor_line("#getting-started", DOC) == 3


def test_find_anchor_line_heading_text_is_slugged():
    assert find_anchor_line("Getting Started", DOC) == 3


def test_find_anchor_line_custom_id():
    assert find_anchor_line("custom-details", DOC) == 4
    assert find_anchor_line("para-id", DOC) == 5


def test_find_anchor_line_first_match_wins():
    assert find_anchor_line("intro", DOC) == 0


def test_find_anchor_line_missing():
    assert find_anchor_line("nowhere", DOC) is None
    assert find_anchor_line("intro", []) is None


def test_find_anchor_line_reference_example():
    assert find_anchor_line("intro", ["# Intro", "[Link](#intro)"]) == 0
