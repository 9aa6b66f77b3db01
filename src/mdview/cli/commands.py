"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdview.config import Settings, load_config
from mdview.core.models import BlockReference
from mdview.core.parse import read_document
from mdview.core.stats import content_stats
from mdview.render.assets import RenderContext
from mdview.render.document import DocumentRenderer
from mdview.viewer.search import highlight_matches, search_in_content


LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling; configures logging once."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
    return settings


def _read(path: str) -> str:
    """Read an input document, failing cleanly when it cannot be read."""
    try:
        return read_document(Path(path))
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    """Extended-markdown preview renderer."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render")],
    out: Annotated[Optional[str], typer.Option("--out", help="Write HTML here instead of stdout")] = None,
    search: Annotated[Optional[str], typer.Option("--search", help="Highlight matches of this query")] = None,
    language: Annotated[Optional[str], typer.Option("--language", help="Locale used in asset paths")] = None,
    asset_base: Annotated[Optional[str], typer.Option("--asset-base", help="URL prefix for relative assets")] = None,
    no_anchors: Annotated[bool, typer.Option("--no-anchors", help="Omit heading ids and anchor links")] = False,
    ):
    """Render a document to an HTML fragment."""
    settings = _settings(overrides={
        "language": language, "asset_base": asset_base,
        "enable_anchors": False if no_anchors else None,
    })
    raw = _read(path)
    context = RenderContext(doc_path=Path(path).as_posix(), language=settings.language, asset_base=settings.asset_base)
    doc = DocumentRenderer(settings).render(raw, context)
    html = highlight_matches(doc.html, search) if search else doc.html

    if out is None:
        typer.echo(html)
        return
    try:
        Path(out).parent.mkdir(parents=True, exist_ok=True)
        Path(out).write_text(html, encoding="utf-8")
    except OSError as e:
        _fail(f"Cannot write {out}", e)
    typer.echo(f"  {path} -> {out}")


def toc_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    as_json: Annotated[bool, typer.Option("--json", help="Print headings as JSON")] = False,
    ):
    """Print the table of contents with heading ids."""
    settings = _settings()
    doc = DocumentRenderer(settings).render(_read(path))
    if as_json:
        typer.echo(json.dumps([h.model_dump() for h in doc.headings], indent=2, ensure_ascii=False))
        return
    if not doc.headings:
        typer.echo("No headings found.")
        return
    for h in doc.headings:
        typer.echo(f"{'  ' * (h.level - 1)}{h.text}  #{h.id}")


def blocks_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    ):
    """Print render segments and extracted block records as JSON."""
    settings = _settings()
    doc = DocumentRenderer(settings).preprocess(_read(path))
    segments = []
    for segment in doc.segments:
        entry = segment.model_dump(mode="json")
        if isinstance(segment, BlockReference):
            record = doc.record_for(segment)
            entry["record"] = record.model_dump(mode="json") if record is not None else None
        segments.append(entry)
    typer.echo(json.dumps({"front_matter": doc.front_matter, "segments": segments}, indent=2, ensure_ascii=False, default=str))


def search_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    query: Annotated[str, typer.Argument(help="Text to search for")],
    case_sensitive: Annotated[bool, typer.Option("--case-sensitive", help="Match case exactly")] = False,
    ):
    """List matches with line numbers and context."""
    _settings()
    results = search_in_content(_read(path), query, case_sensitive)
    for r in results:
        typer.echo(f"{r.line_number}: {r.context}")
    typer.echo(f"{len(results)} match(es)")


def stats_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file")],
    ):
    """Print word, line, heading, code block, link and image counts."""
    _settings()
    stats = content_stats(_read(path))
    for name, value in stats.model_dump().items():
        typer.echo(f"{name.replace('_', ' ')}: {value}")
