"""Tests for reference definition lookup."""

import pytest

from vimania.api.link import resolve_reference

pytestmark = pytest.mark.link

LINES = [
    "Some [text][label] here",
    "",
    "[label]: https://example.com/first  ",
    "  [spaced]:   ./notes.md  ",
    "[label]: https://example.com/second",
    "[a.b*c]: special.md",
]


def test_resolve_reference_found():
    assert resolve_reference("label", LINES) == "https://example.com/first"


def test_resolve_reference_trims_label_and_target():
    assert resolve_reference("  spaced ", LINES) == "./notes.md"


def test_resolve_reference_first_definition_wins():
    assert resolve_reference("label", LINES) == "https://example.com/first"


def test_resolve_reference_case_sensitive():
    assert resolve_reference("Label", LINES) is None


def test_resolve_reference_escapes_label():
    assert resolve_reference("a.b*c", LINES) == "special.md"
    assert resolve_reference("aXb*c", LINES) is None


@pytest.mark.parametrize("label", ["", "   ", None])
def test_resolve_reference_empty_label(label):
    assert resolve_reference(label, LINES) is None


def test_resolve_reference_missing():
    assert resolve_reference("nope", LINES) is None
