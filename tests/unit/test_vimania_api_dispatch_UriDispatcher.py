"""Tests for UriDispatcher actions."""

import importlib
import logging
from unittest.mock import patch

import pytest

from vimania.api.dispatch import FileBuffer, UriDispatcher
from vimania.api.dispatch.cmd_handle import cmd_handle
from vimania.api.errors import AnchorNotFound, BlockedHost, FileNotReadable
from vimania.api.target import TargetKind, classify_target

pytestmark = pytest.mark.dispatch


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def make_dispatcher(tmp_path, launcher, notifications, make_config):
    def _make(buffer=None, launcher_obj=None, **config_overrides):
        return UriDispatcher(
            make_config(**config_overrides),
            buffer if buffer is not None else FileBuffer(),
            launcher_obj if launcher_obj is not None else launcher,
            notify=lambda message, level: notifications.append((message, level)),
            base_dir=tmp_path,
        )

    return _make


@pytest.fixture(autouse=True)
def linux_opener():
    module = importlib.import_module("vimania.api.dispatch.UriDispatcher")
    with patch.object(module, "_detect_open_command", return_value=["xdg-open"]):
        yield


def test_noop(make_dispatcher, notifications):
    result = make_dispatcher().dispatch(classify_target(None))
    assert result.action == "noop"
    assert result.kind is TargetKind.NOOP
    assert notifications == [("No link found at cursor", logging.INFO)]


def test_anchor_moves_cursor(make_dispatcher, write_doc):
    buffer = FileBuffer(write_doc(["# Intro", "[Link](#intro)"]), row=1, col=2)
    result = make_dispatcher(buffer).dispatch(classify_target("#intro"))
    assert result.action == "anchor"
    assert buffer.get_cursor() == (0, 0)


def test_anchor_custom_id(make_dispatcher, write_doc):
    buffer = FileBuffer(write_doc(["text", "## Setup {: #custom-setup }", "[go](#custom-setup)"]), row=2)
    make_dispatcher(buffer).dispatch(classify_target("#custom-setup"))
    assert buffer.get_cursor() == (1, 0)


def test_anchor_missing_raises(make_dispatcher, write_doc):
    buffer = FileBuffer(write_doc(["# Intro"]))
    with pytest.raises(AnchorNotFound, match="Anchor not found: elsewhere"):
        make_dispatcher(buffer).dispatch(classify_target("#elsewhere"))


def test_web_default_opener(make_dispatcher, launcher):
    result = make_dispatcher().dispatch(classify_target("https://example.com"))
    assert result.action == "browser"
    assert result.success is True
    assert launcher.calls == [("xdg-open", ["https://example.com"])]


def test_web_configured_browser(make_dispatcher, launcher):
    make_dispatcher(browser_cmd="firefox --new-tab").dispatch(classify_target("https://example.com"))
    assert launcher.calls == [("firefox", ["--new-tab", "https://example.com"])]


def test_web_blocked_host(make_dispatcher, launcher):
    with pytest.raises(BlockedHost):
        make_dispatcher().dispatch(classify_target("http://10.0.0.5"))
    assert launcher.calls == []


def test_web_blocking_disabled(make_dispatcher, launcher):
    make_dispatcher(security={"block_local_networks": False}).dispatch(classify_target("http://10.0.0.5"))
    assert launcher.calls == [("xdg-open", ["http://10.0.0.5"])]


def test_web_launch_failure(make_dispatcher, failing_launcher, notifications):
    result = make_dispatcher(launcher_obj=failing_launcher).dispatch(classify_target("https://example.com"))
    assert result.success is False
    assert notifications[-1][1] == logging.WARNING


def test_file_new_creates_parent_dirs(make_dispatcher, tmp_path):
    buffer = FileBuffer()
    result = make_dispatcher(buffer).dispatch(classify_target("sub/dir/new.md"))
    target = tmp_path / "sub" / "dir" / "new.md"
    assert result.action == "editor"
    assert target.parent.is_dir()
    assert buffer.path == target
    assert buffer.opened == [str(target)]


def test_file_existing_parent_is_fine(make_dispatcher, write_doc, tmp_path):
    write_doc(["x"], name="docs/existing.md")
    buffer = FileBuffer()
    make_dispatcher(buffer).dispatch(classify_target("docs/other.md"))
    assert buffer.path == tmp_path / "docs" / "other.md"


def test_file_with_line(make_dispatcher, write_doc):
    write_doc(["one", "two", "three", "four"], name="notes.md")
    buffer = FileBuffer()
    make_dispatcher(buffer).dispatch(classify_target("notes.md:3"))
    assert buffer.get_cursor() == (2, 0)


def test_file_with_anchor(make_dispatcher, write_doc):
    write_doc(["# Notes", "text", "## Setup Steps", "more"], name="notes.md")
    buffer = FileBuffer()
    make_dispatcher(buffer).dispatch(classify_target("notes.md#setup-steps"))
    assert buffer.get_cursor() == (2, 0)


def test_file_with_missing_anchor_warns(make_dispatcher, write_doc, notifications):
    write_doc(["# Notes"], name="notes.md")
    buffer = FileBuffer()
    result = make_dispatcher(buffer).dispatch(classify_target("notes.md#nope"))
    assert result.action == "editor"
    assert notifications == [("Anchor not found: nope", logging.WARNING)]


def test_pelican_link(make_dispatcher, write_doc, tmp_path):
    write_doc(["# Post"], name="blog-post.md")
    buffer = FileBuffer()
    result = make_dispatcher(buffer).dispatch(classify_target("{filename}./blog-post.md"))
    assert result.kind is TargetKind.PELICAN
    assert buffer.path == tmp_path / "blog-post.md"
    assert buffer.get_lines() == ["# Post"]


def test_file_expands_environment(make_dispatcher, tmp_path, monkeypatch):
    monkeypatch.setenv("DOCS_DIR", str(tmp_path / "env"))
    buffer = FileBuffer()
    make_dispatcher(buffer).dispatch(classify_target("$DOCS_DIR/a.md"))
    assert buffer.path == tmp_path / "env" / "a.md"


def test_file_opened_by_os(make_dispatcher, launcher, tmp_path):
    report = tmp_path / "report.pdf"
    report.write_bytes(b"%PDF")
    result = make_dispatcher().dispatch(classify_target("report.pdf"))
    assert result.action == "os"
    assert launcher.calls == [("xdg-open", [str(report)])]


def test_file_opened_by_os_missing(make_dispatcher, launcher):
    with pytest.raises(FileNotReadable, match="File does not exist"):
        make_dispatcher().dispatch(classify_target("missing.pdf"))
    assert launcher.calls == []


def test_empty_extension_list_opens_everything_in_editor(make_dispatcher, launcher):
    buffer = FileBuffer()
    result = make_dispatcher(buffer, extensions=[]).dispatch(classify_target("image.png"))
    assert result.action == "editor"
    assert launcher.calls == []


def test_file_under_existing_file_raises_file_not_readable(make_dispatcher, write_doc):
    write_doc(["plain file"], name="a.md")
    buffer = FileBuffer()
    with pytest.raises(FileNotReadable, match="Cannot open"):
        make_dispatcher(buffer).dispatch(classify_target("a.md/b.md"))
    assert buffer.opened == []


def test_cmd_handle_no_link_is_not_a_failure(run_cmd, write_doc):
    result = run_cmd(cmd_handle, file=write_doc(["just   words"]), row=0, col=5)
    assert result.success is True
    assert result.result == "No link found at 0:5"
    assert result.output["action"] == "noop"
    assert result.output["errors"] == []
