"""Integration tests for the CLI commands"""

import json

import pytest
from typer.testing import CliRunner

from mdview.cli.cli import app


DOC = """\
# Hello

!!! note
    Say hello.

## Hello

See [docs](https://example.com).
"""


@pytest.fixture(name="runner")
def runner_fixture():
    return CliRunner()


@pytest.fixture(name="doc_path")
def doc_path_fixture(tmp_path):
    path = tmp_path / "hello.md"
    path.write_text(DOC)
    return path


def test_render_to_stdout(runner, doc_path):
    """render prints the HTML fragment to stdout."""
    result = runner.invoke(app, ["render", str(doc_path)])
    assert result.exit_code == 0, result.output
    assert '<h1 id="hello">' in result.output
    assert 'class="admonition note"' in result.output


def test_render_to_file_with_search(runner, doc_path, tmp_path):
    """render --out writes the file with search matches highlighted."""
    out = tmp_path / "dist" / "hello.html"
    result = runner.invoke(app, ["render", str(doc_path), "--out", str(out), "--search", "hello"])
    assert result.exit_code == 0, result.output
    html = out.read_text()
    assert '<mark data-search-match="0">' in html
    assert 'id="hello"' in html


def test_render_without_anchors(runner, doc_path):
    """render --no-anchors omits heading ids."""
    result = runner.invoke(app, ["render", str(doc_path), "--no-anchors"])
    assert result.exit_code == 0, result.output
    assert "<h1>Hello</h1>" in result.output


def test_toc_json(runner, doc_path):
    """toc --json lists rendered heading ids."""
    result = runner.invoke(app, ["toc", str(doc_path), "--json"])
    assert result.exit_code == 0, result.output
    assert [h["id"] for h in json.loads(result.stdout)] == ["hello", "hello-1"]


def test_toc_text(runner, doc_path):
    """toc indents headings by level and shows their ids."""
    result = runner.invoke(app, ["toc", str(doc_path)])
    assert "  Hello  #hello-1" in result.output


def test_blocks_json(runner, doc_path):
    """blocks prints segments with their resolved records."""
    result = runner.invoke(app, ["blocks", str(doc_path)])
    assert result.exit_code == 0, result.output
    data = json.loads(result.stdout)
    refs = [s for s in data["segments"] if s["type"] == "block"]
    assert refs[0]["block"] == "ADMONITION"
    assert refs[0]["record"]["body_text"] == "Say hello."


def test_search(runner, doc_path):
    """search prints each match with a total count."""
    result = runner.invoke(app, ["search", str(doc_path), "hello"])
    assert result.exit_code == 0, result.output
    assert "3 match(es)" in result.output


def test_stats(runner, doc_path):
    """stats prints the content counts."""
    result = runner.invoke(app, ["stats", str(doc_path)])
    assert result.exit_code == 0, result.output
    assert "headings: 2" in result.output
    assert "links: 1" in result.output


def test_missing_file_fails(runner, tmp_path):
    """A missing input file exits 1 with a readable error."""
    result = runner.invoke(app, ["render", str(tmp_path / "missing.md")])
    assert result.exit_code == 1
    assert "Error: Cannot read" in result.output


def test_invalid_config_fails(runner, doc_path, tmp_path):
    """An invalid config.yaml exits 1."""
    (tmp_path / "config.yaml").write_text("indent_unit: [\n")
    result = runner.invoke(app, ["toc", str(doc_path)])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output
