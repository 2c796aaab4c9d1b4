"""fastlocal CLI — typer entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Optional

from dotenv import load_dotenv
import typer

# Load .env from cwd before anything reads env vars
load_dotenv(Path.cwd() / ".env")
from rich.console import Console
from rich.json import JSON
from rich.markup import escape
from rich.table import Table

from fastlocal.config import Settings, load_config
from fastlocal.errors import ConfigError
from fastlocal.log import configure_logging
from fastlocal.materializers import list_materializers
from fastlocal.provider import FastLocalProvider

app = typer.Typer(
    name="fastlocal",
    help="Write declared files to local disk, always overwriting.",
    no_args_is_help=True,
)
console = Console()


def _get_provider() -> FastLocalProvider:
    return FastLocalProvider()


# ── write ─────────────────────────────────────────────────

@app.command()
def write(
    config_path: Annotated[Path, typer.Argument(help="TOML or JSON file declaring `files` and `add_newline_at_end`")],
    add_newline: Annotated[Optional[bool], typer.Option(
        "--add-newline/--no-add-newline",
        help="Override add_newline_at_end from the config",
    )] = None,
    state: Annotated[Optional[Path], typer.Option("--state", help="Write the scrubbed state as JSON to this path")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Debug logging")] = False,
) -> None:
    """Write every file declared in CONFIG_PATH."""
    settings = Settings.from_env()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[bold red]Config error:[/] {escape(str(e))}")
        raise typer.Exit(1)
    if add_newline is not None:
        config["add_newline_at_end"] = add_newline

    provider = _get_provider()
    response = provider.get_data_source(f"{provider.type_name}_file").read(config)

    if response.state is not None:
        failed = {d.filename for d in response.diagnostics if d.filename is not None}
        table = Table(title=f"{len(response.state.files)} file(s)")
        table.add_column("Filename", style="cyan")
        table.add_column("Status")
        for f in response.state.files:
            status = "[red]failed[/]" if f.filename in failed else "[green]written[/]"
            table.add_row(escape(f.filename), status)
        console.print(table)

    for d in response.diagnostics:
        where = f" [dim]{escape(d.filename)}[/]" if d.filename is not None else ""
        console.print(f"[bold red]{d.summary}[/]{where} {escape(d.detail)}")

    if state is not None and response.state is not None:
        try:
            state.write_text(response.state.model_dump_json(indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            console.print(f"[bold red]State error:[/] {escape(str(state))}: {escape(e.strerror or str(e))}")
            raise typer.Exit(1)
        console.print(f"[dim]State written to {escape(str(state))}[/]")

    if response.has_error():
        raise typer.Exit(1)


# ── schema ────────────────────────────────────────────────

@app.command()
def schema() -> None:
    """Print the file data source schema as JSON."""
    provider = _get_provider()
    ds = provider.get_data_source(f"{provider.type_name}_file")
    console.print(JSON(json.dumps(ds.schema())))


# ── info ──────────────────────────────────────────────────

@app.command()
def info() -> None:
    """Show provider metadata and its data sources."""
    provider = _get_provider()
    table = Table(title=f"Provider: {provider.type_name}")
    table.add_column("Data source", style="cyan")
    table.add_column("Version")
    for ds in provider.data_sources():
        table.add_row(ds.type_name(provider.type_name), provider.version)
    console.print(table)


# ── list-materializers ────────────────────────────────────

@app.command(name="list-materializers")
def list_materializers_cmd() -> None:
    """List available materializers."""
    table = Table(title="Materializers")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for name, cls in sorted(list_materializers().items()):
        table.add_row(name, cls.description)
    console.print(table)
