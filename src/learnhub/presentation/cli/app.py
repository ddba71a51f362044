"""LearnHub CLI application using Typer.

This module provides command-line utilities for the LearnHub backend:
database schema management and running the API server.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from learnhub.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    describe_database_url,
    drop_tables,
    reset_tables,
)
from learnhub_config.settings import get_settings

app = typer.Typer(
    name="learnhub",
    help="LearnHub - users, categories and learning content",
    no_args_is_help=True,
)
console = Console()


db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)


def _print_database() -> None:
    url = get_settings().database_url
    console.print(f"Database: [cyan]{describe_database_url(url)}[/cyan]\n")


def _confirm_destructive(force: bool) -> None:
    if force:
        return
    console.print("[yellow]WARNING: This will DELETE ALL DATA in the database![/yellow]")
    if not typer.confirm("Continue?", default=False):
        console.print("Aborted.")
        raise typer.Exit(code=1)


@db_app.command("init")
def db_init() -> None:
    """Create all missing tables (existing data is kept)."""
    _print_database()
    asyncio.run(create_tables())
    console.print("[bold green]Database initialized.[/bold green]")


@db_app.command("drop")
def db_drop(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop all tables."""
    _print_database()
    _confirm_destructive(force)
    asyncio.run(drop_tables())
    console.print("[bold green]Database tables dropped.[/bold green]")


@db_app.command("reset")
def db_reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate all tables."""
    _print_database()
    _confirm_destructive(force)
    asyncio.run(reset_tables())
    console.print("[bold green]Database recreated.[/bold green]")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    host = host or settings.api_host
    port = port or settings.api_port

    console.print(f"[bold green]Serving LearnHub API[/bold green] on {host}:{port}")
    uvicorn.run(
        "learnhub.presentation.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
