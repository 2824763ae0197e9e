"""CLI command implementations"""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from panelify.config import Settings, load_config
from panelify.core.changes import changed_ids
from panelify.core.files import FileContentStore, display_name
from panelify.core.layout import default_layout, dump_placement
from panelify.core.models import PlacementItem
from panelify.core.sections import parse_sections
from panelify.core.session import DocumentSession, Outcome
from panelify.core.utils.logger import configure_logging
from panelify.crud.database import init_db, make_engine, reset_db
from panelify.crud.sql_repo import SqlLayoutStore


def _fail(msg: str, cause: Exception | str = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _layout_store(settings: Settings) -> SqlLayoutStore:
    engine = make_engine(settings.db_url)
    init_db(engine)
    return SqlLayoutStore(engine, max_recent_files=settings.max_recent_files)


def _doc_key(path: str) -> str:
    """Layouts are keyed by absolute path so the same file matches from any cwd."""
    return str(Path(path).resolve())


def _check(outcome: Outcome) -> None:
    if not outcome.ok:
        _fail(str(outcome.error))


async def _open(path: str) -> tuple[DocumentSession, SqlLayoutStore]:
    """Open path in a fresh session backed by the configured layout database."""
    store = _layout_store(_settings())
    session = DocumentSession(FileContentStore(), store)
    _check(await session.open_document(_doc_key(path)))
    return session, store


def _echo_placement(session: DocumentSession) -> None:
    """Print one line per panel, then any sections still lacking a panel."""
    titles = {s.id: s.title for s in session.sections}
    for item in session.placement:
        title = titles.get(item.id, "(no matching section)")
        typer.echo(f"  {item.id}  x={item.x} y={item.y} w={item.w} h={item.h}  {title}")
    placed = {item.id for item in session.placement}
    unplaced = [s for s in session.sections if s.id not in placed]
    if unplaced:
        typer.echo(f"{len(unplaced)} section(s) without a panel; run 'panelify sync' to place them.")


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR")] = None,
    ):
    """Markdown dashboard layouts: sections as panels, arrangements remembered per document."""
    settings = _settings(overrides={"log_level": "DEBUG" if verbose else log_level})
    configure_logging(settings.log_level)


def init_cmd(
    reset: Annotated[bool, typer.Option("--reset", help="Drop and recreate all tables")] = False,
    ):
    """Initialize the layout database. Use --reset to clear stored layouts."""
    settings = _settings()
    engine = make_engine(settings.db_url)
    if reset:
        reset_db(engine)
        typer.echo("Existing layouts cleared.")
    else:
        init_db(engine)
    typer.echo(f"Database initialized at: {settings.db_url}")


def sections_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to split into sections")],
    ):
    """List the h2 sections a document would be split into."""
    async def _run():
        result = await FileContentStore().read(path)
        if not result.success:
            _fail(f"Failed to read {path}", result.error)
        sections = parse_sections(result.content or "")
        if not sections:
            typer.echo("No '##' sections found.")
            return
        for s in sections:
            lines = len(s.content.splitlines())
            typer.echo(f"  {s.id}  {s.title}  ({lines} line(s))")
        typer.echo(f"{len(sections)} section(s) in {display_name(path)}")

    asyncio.run(_run())


def open_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to open")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the arrangement as JSON")] = False,
    ):
    """Show a document's arrangement (stored, or the default tiling)."""
    async def _run():
        session, store = await _open(path)
        await store.touch_recent(session.path)
        if as_json:
            typer.echo(json.dumps(dump_placement(session.placement), indent=2, ensure_ascii=False))
            return
        typer.echo(f"{display_name(session.path)}: {len(session.sections)} section(s)")
        _echo_placement(session)

    asyncio.run(_run())


def sync_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to re-read")],
    ):
    """Place panels for sections added since the layout was saved, then save."""
    async def _run():
        session, _ = await _open(path)
        _check(await session.reload())
        if not session.has_changes:
            typer.echo("Layout up to date.")
            return
        added = changed_ids(session.placement, session.baseline)
        _check(await session.save())
        for panel_id in added:
            typer.echo(f"  added: {panel_id}")
        typer.echo(f"Saved layout with {len(added)} new panel(s).")

    asyncio.run(_run())


def move_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file whose layout to edit")],
    section_id: Annotated[str, typer.Argument(help="Id of the panel to move or resize")],
    x: Annotated[Optional[int], typer.Option("--x", help="Grid column")] = None,
    y: Annotated[Optional[int], typer.Option("--y", help="Grid row")] = None,
    w: Annotated[Optional[int], typer.Option("--w", help="Width in grid cells")] = None,
    h: Annotated[Optional[int], typer.Option("--h", help="Height in grid cells")] = None,
    ):
    """Move or resize one panel and save the arrangement."""
    async def _run():
        session, _ = await _open(path)
        updates = {k: v for k, v in {"x": x, "y": y, "w": w, "h": h}.items() if v is not None}
        placement = session.placement
        for index, item in enumerate(placement):
            if item.id == section_id:
                break
        else:
            _fail(f"No panel with id '{section_id}'")
        try:
            placement[index] = PlacementItem.model_validate({**item.model_dump(), **updates})
        except ValidationError as e:
            _fail("Invalid panel geometry", e)

        session.update_arrangement(placement)
        if not session.has_changes:
            typer.echo("Nothing to change.")
            return
        _check(await session.save())
        moved = placement[index]
        typer.echo(f"  {moved.id}  x={moved.x} y={moved.y} w={moved.w} h={moved.h}")

    asyncio.run(_run())


def reset_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file whose layout to reset")],
    ):
    """Replace the stored arrangement with the default tiling."""
    async def _run():
        session, _ = await _open(path)
        session.update_arrangement(default_layout(session.sections))
        _check(await session.save())
        typer.echo(f"Reset layout for {display_name(session.path)} ({len(session.placement)} panel(s)).")

    asyncio.run(_run())


def export_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file whose layout to export")],
    out: Annotated[Optional[str], typer.Option("--out", "-o", help="Write JSON here instead of stdout")] = None,
    ):
    """Write a document's arrangement as JSON ([{i, x, y, w, h, minW, minH}])."""
    async def _run():
        session, _ = await _open(path)
        data = json.dumps(dump_placement(session.placement), indent=2, ensure_ascii=False)
        if out is None:
            typer.echo(data)
            return
        try:
            Path(out).write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            _fail(f"Failed to write {out}", e)
        typer.echo(f"  {display_name(session.path)} -> {out}")

    asyncio.run(_run())


def recent_cmd():
    """List recently opened documents that still exist, newest first."""
    async def _run():
        paths = await _layout_store(_settings()).recent_files()
        if not paths:
            typer.echo("No recent files.")
            raise typer.Exit(1)
        for p in paths:
            typer.echo(f"  {display_name(p)}  {p}")

    asyncio.run(_run())


def last_cmd():
    """Print the document whose layout was saved most recently."""
    async def _run():
        last = await _layout_store(_settings()).last_opened_file()
        if last is None:
            typer.echo("No previously opened file.")
            raise typer.Exit(1)
        typer.echo(last)

    asyncio.run(_run())
