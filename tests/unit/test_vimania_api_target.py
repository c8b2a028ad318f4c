"""Tests for target classification and file target parsing."""

import pytest

from vimania.api.target import (
    ParsedFileTarget,
    TargetKind,
    classify_target,
    parse_file_target,
    should_open_in_editor,
)
from vimania.api.target.cmd_classify import cmd_classify

pytestmark = pytest.mark.target


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("notes.md:42#intro", ParsedFileTarget("notes.md", 42, "intro")),
        ("notes.md#intro:42", ParsedFileTarget("notes.md", 42, "intro")),
        ("config.lua:25", ParsedFileTarget("config.lua", 25, None)),
        ("README.md#installation", ParsedFileTarget("README.md", None, "installation")),
        ("./plain/file.txt", ParsedFileTarget("./plain/file.txt", None, None)),
        ("file.md:0", ParsedFileTarget("file.md:0", None, None)),
        ("  spaced.md  ", ParsedFileTarget("spaced.md", None, None)),
        ("C:/tmp/x.md", ParsedFileTarget("C:/tmp/x.md", None, None)),
    ],
)
def test_parse_file_target(value, expected):
    assert parse_file_target(value) == expected


@pytest.mark.parametrize("value", ["", "   ", None])
def test_classify_noop(value):
    target = classify_target(value)
    assert target.kind is TargetKind.NOOP
    assert target.file is None


def test_classify_anchor():
    target = classify_target("#intro")
    assert target.kind is TargetKind.ANCHOR
    assert target.value == "intro"


def test_classify_web():
    target = classify_target(" https://example.com/page ")
    assert target.kind is TargetKind.WEB
    assert target.value == "https://example.com/page"


def test_classify_web_private_host_is_still_web():
    assert classify_target("http://10.0.0.5").kind is TargetKind.WEB


@pytest.mark.parametrize("prefix", ["|filename|", "{filename}"])
def test_classify_pelican(prefix):
    target = classify_target(f"{prefix}./blog-post.md#part")
    assert target.kind is TargetKind.PELICAN
    assert target.value == "./blog-post.md#part"
    assert target.file == ParsedFileTarget("./blog-post.md", None, "part")


def test_classify_file():
    target = classify_target("docs/guide.md:10")
    assert target.kind is TargetKind.FILE
    assert target.file == ParsedFileTarget("docs/guide.md", 10, None)


def test_classify_file_is_idempotent():
    first = classify_target("notes.md:42#intro")
    assert first.file is not None
    second = classify_target(first.file.path)
    assert second.kind is TargetKind.FILE
    assert second.file == ParsedFileTarget("notes.md", None, None)


@pytest.mark.parametrize(
    ("path", "extensions", "expected"),
    [
        ("notes.md", [".md", ".txt"], True),
        ("report.pdf", [".md", ".txt"], False),
        ("Makefile", [".md"], False),
        ("report.pdf", [], True),
        ("archive.tar.gz", [".gz"], True),
    ],
)
def test_should_open_in_editor(path, extensions, expected):
    assert should_open_in_editor(path, extensions) is expected


def test_cmd_classify_file(run_cmd):
    result = run_cmd(cmd_classify, "notes.md:42#intro")
    assert result.success is True
    assert result.output["kind"] == "file"
    assert result.output["path"] == "notes.md"
    assert result.output["line"] == 42
    assert result.output["anchor"] == "intro"
    assert result.output["open_in_editor"] is True


def test_cmd_classify_uses_configured_extensions(run_cmd, write_config):
    write_config({"extensions": ["txt"]})
    result = run_cmd(cmd_classify, "notes.md")
    assert result.success is True
    assert result.output["open_in_editor"] is False


def test_cmd_classify_web(run_cmd):
    result = run_cmd(cmd_classify, "https://example.com")
    assert result.output["kind"] == "web"
    assert result.output["path"] is None
    assert result.output["open_in_editor"] is None


def test_cmd_classify_bad_config(run_cmd, vimania_home):
    (vimania_home / "config.json").write_text("{invalid json")
    result = run_cmd(cmd_classify, "notes.md")
    assert result.success is False
    assert "Invalid JSON" in result.output["errors"][0]
