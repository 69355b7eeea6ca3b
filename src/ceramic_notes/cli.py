"""CLI for ceramic-notes (bootstrap, list, show, new, edit)."""

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from ceramic_notes.api import CeramicApi
from ceramic_notes.bootstrap import run_bootstrap
from ceramic_notes.config import CERAMIC_URL, AppConfig, load_app_config, load_seed
from ceramic_notes.core.app import NotesApp
from ceramic_notes.core.session import connect, session_opener
from ceramic_notes.errors import ConfigError, NotesError
from ceramic_notes.logging_config import configure_logging
from ceramic_notes.models.note import stream_id_from_url
from ceramic_notes.models.state import IndexLoadedNote, NavNote, State, StoredNote

app = typer.Typer(help="Ceramic notes: keep simple text notes on a Ceramic node.")


@dataclass
class CliOptions:
    url: str
    config_path: Path | None


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    url: str = typer.Option(CERAMIC_URL, "--url", "-u", help="Ceramic node URL"),
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file written by 'bootstrap'"),
    ] = None,
) -> None:
    configure_logging(verbose=verbose)
    ctx.obj = CliOptions(url=url, config_path=config_path)


def _load_seed_and_config(opts: CliOptions) -> tuple[bytes, AppConfig]:
    try:
        return load_seed(), load_app_config(opts.config_path)
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e


async def _authenticated_app(opts: CliOptions) -> NotesApp:
    """Authenticate and return the app, or exit if authentication failed."""
    seed, config = _load_seed_and_config(opts)
    notes_app = NotesApp(session_opener(config, CeramicApi(opts.url)), config=config)
    await notes_app.authenticate(seed)
    if notes_app.state.auth.status != "done":
        logger.error("Authentication failed")
        raise typer.Exit(1)
    return notes_app


def _echo_note(state: State, stream_id: str) -> None:
    entry = state.notes.get(stream_id)
    if isinstance(entry, StoredNote):
        typer.echo(f"# {entry.title}")
        typer.echo(f"  id={stream_id}  date={entry.doc.content.get('date', '')}")
        typer.echo()
        typer.echo(entry.doc.content.get("text", ""))
    elif isinstance(entry, IndexLoadedNote):
        typer.echo(f"# {entry.title} ({entry.status})")
    else:
        typer.echo(f"Note '{stream_id}' not found.")


@app.command()
def bootstrap(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Where to write the generated config"),
    ] = Path("config.json"),
) -> None:
    """Publish the note schemas and the notes definition, then write the config."""
    opts: CliOptions = ctx.obj
    try:
        seed = load_seed()
    except ConfigError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    try:
        store, did = connect(seed, CeramicApi(opts.url))
        config = asyncio.run(run_bootstrap(store, did, output))
    except (NotesError, OSError) as e:
        logger.error("Bootstrap failed: {}", e)
        raise typer.Exit(1) from e
    typer.echo(f"Config written to {output}: definitions={config.definitions!r}")


@app.command(name="list")
def list_cmd(ctx: typer.Context) -> None:
    """List notes, newest first."""

    async def _run() -> State:
        notes_app = await _authenticated_app(ctx.obj)
        return notes_app.state

    state = asyncio.run(_run())
    typer.echo(f"{len(state.notes)} notes:\n")
    for stream_id, entry in state.notes.items():
        typer.echo(f"  {entry.title}  [id={stream_id}]")


@app.command()
def show(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Stream id of the note"),
) -> None:
    """Load a note and print it."""

    async def _run() -> NotesApp:
        notes_app = await _authenticated_app(ctx.obj)
        await notes_app.open_note(note_id)
        return notes_app

    notes_app = asyncio.run(_run())
    entry = notes_app.state.current_note
    _echo_note(notes_app.state, stream_id_from_url(note_id))
    if not isinstance(entry, StoredNote):
        raise typer.Exit(1)


@app.command()
def new(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Note title"),
    text: str = typer.Argument(..., help="Note text"),
) -> None:
    """Save a new note and add it to the notes index."""

    async def _run() -> NotesApp:
        notes_app = await _authenticated_app(ctx.obj)
        notes_app.open_draft()
        await notes_app.save_draft(title, text)
        return notes_app

    notes_app = asyncio.run(_run())
    state = notes_app.state
    if state.draft_status == "failed":
        logger.error("Failed to save note")
        raise typer.Exit(1)
    if isinstance(state.nav, NavNote):
        typer.echo(f"Saved note '{title}' [id={state.nav.stream_id}]")


@app.command()
def edit(
    ctx: typer.Context,
    note_id: str = typer.Argument(..., help="Stream id of the note"),
    text: str = typer.Argument(..., help="New note text"),
) -> None:
    """Replace the text of an existing note."""

    async def _run() -> NotesApp:
        notes_app = await _authenticated_app(ctx.obj)
        await notes_app.open_note(note_id)
        entry = notes_app.state.current_note
        if isinstance(entry, StoredNote):
            await notes_app.save_note(entry.doc, text)
        return notes_app

    notes_app = asyncio.run(_run())
    entry = notes_app.state.current_note
    if not isinstance(entry, StoredNote):
        logger.error("Failed to load note {}", note_id)
        raise typer.Exit(1)
    if entry.status != "saved":
        logger.error("Failed to save note {} ({})", note_id, entry.status)
        raise typer.Exit(1)
    typer.echo(f"Saved note '{entry.title}'")
