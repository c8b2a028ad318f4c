"""Tests for the vimania Typer CLI."""

import json
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from vimania import __version__
from vimania.cli import main
from vimania.cli._create_app import _create_app

pytestmark = pytest.mark.cli


@pytest.fixture
def invoke():
    runner = CliRunner()
    app = _create_app()

    def _invoke(*args):
        return runner.invoke(app, list(args))

    return _invoke


def json_output(output: str) -> dict:
    """Decode the JSON document printed on stdout, skipping status lines."""
    start = output.index("{\n")
    data, _ = json.JSONDecoder().raw_decode(output[start:])
    return data


@pytest.fixture
def doc(write_doc):
    return write_doc(["# Intro", "See [docs](README.md#install) and [top](#intro)"])


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"vimania {__version__}"


def test_no_command_shows_help(capsys):
    assert main([]) == 0
    assert "link" in capsys.readouterr().out


def test_invalid_display_format(invoke, doc):
    result = invoke("--display", "xml", "link", "parse", str(doc))
    assert result.exit_code == 1


def test_link_parse_json(invoke, doc):
    result = invoke("-d", "json", "link", "parse", str(doc), "--row", "1", "--col", "6")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["found"] is True
    assert data["target"] == "README.md#install"


def test_link_parse_yaml_default(invoke, doc):
    result = invoke("link", "parse", str(doc), "--row", "1", "--col", "6")
    assert result.exit_code == 0
    assert "README.md#install" in result.output


def test_link_parse_missing_file(invoke, tmp_path):
    result = invoke("-d", "json", "link", "parse", str(tmp_path / "missing.md"))
    assert result.exit_code == 1


def test_link_next_and_prev(invoke, doc):
    result = invoke("-d", "json", "link", "next", str(doc), "--row", "1", "--col", "4")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert (data["row"], data["col"]) == (1, 34)

    result = invoke("-d", "json", "link", "prev", str(doc), "--row", "1", "--col", "34")
    assert result.exit_code == 0
    assert json_output(result.output)["col"] == 4


def test_uri_classify(invoke):
    result = invoke("-d", "json", "uri", "classify", "notes.md:42#intro")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["kind"] == "file"
    assert (data["path"], data["line"], data["anchor"]) == ("notes.md", 42, "intro")


def test_uri_handle_anchor(invoke, doc):
    result = invoke("-d", "json", "uri", "handle", str(doc), "--row", "1", "--col", "36")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["kind"] == "anchor"
    assert data["action"] == "anchor"
    assert (data["row"], data["col"]) == (0, 0)


def test_uri_handle_editor(invoke, doc, tmp_path):
    result = invoke("-d", "json", "uri", "handle", str(doc), "--row", "1", "--col", "6")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["action"] == "editor"
    assert data["current_file"] == str(tmp_path / "README.md")
    assert (tmp_path / "README.md").exists() is False


def test_uri_handle_blocked(invoke, write_doc):
    path = write_doc(["[router](http://192.168.0.1)"])
    result = invoke("-d", "json", "uri", "handle", str(path), "--row", "0", "--col", "2")
    assert result.exit_code == 1
    assert "192.168.0.1" in json_output(result.output)["errors"][0]


def test_uri_edit(invoke, write_doc):
    path = write_doc(["a", "find me"], name="edit.md")
    result = invoke("-d", "json", "uri", "edit", f"{path}#find")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["row"] == 1
    assert data["anchor"] == "find"


def test_title_get(invoke):
    response = MagicMock(status_code=200, text="<title>Example Domain</title>")
    with patch("requests.get", return_value=response):
        result = invoke("-d", "json", "title", "get", "https://example.com")
    assert result.exit_code == 0
    assert json_output(result.output)["title"] == "Example Domain"


def test_title_get_failure(invoke):
    result = invoke("-d", "json", "title", "get", "http://localhost:8080")
    assert result.exit_code == 1
    assert json_output(result.output)["title"] is None


def test_title_markdown(invoke):
    response = MagicMock(status_code=500, text="")
    with patch("requests.get", return_value=response):
        result = invoke("-d", "json", "title", "markdown", "https://example.com")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["markdown"] == "[UNKNOWN_URL_TITLE](https://example.com)"
    assert data["warnings"]


def test_title_markdown_rejects_non_url(invoke):
    result = invoke("-d", "json", "title", "markdown", "not-a-url")
    assert result.exit_code == 1


def test_config_show(invoke, write_config):
    write_config({"timeout": 1500})
    result = invoke("config", "show")
    assert result.exit_code == 0
    assert "timeout: 1500" in result.output


def test_config_init(invoke, vimania_home):
    result = invoke("config", "init")
    assert result.exit_code == 0
    assert (vimania_home / "config.json").exists()

    result = invoke("config", "init")
    assert result.exit_code == 1


def test_domain_app_without_command_shows_help(invoke):
    result = invoke("link")
    assert result.exit_code == 0
    assert "parse" in result.output


def test_uri_handle_no_link(invoke, write_doc):
    path = write_doc(["just   words"])
    result = invoke("-d", "json", "uri", "handle", str(path), "--row", "0", "--col", "5")
    assert result.exit_code == 0
    data = json_output(result.output)
    assert data["action"] == "noop"
    assert data["target"] is None
    assert data["errors"] == []
