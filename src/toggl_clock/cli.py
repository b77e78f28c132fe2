"""Command-line interface for toggl-clock."""

import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, TextIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from toggl_clock import __version__
from toggl_clock.clock import ClockEventSource, ClockInEvent, TogglSession
from toggl_clock.config import Config
from toggl_clock.toggl import Failure, TogglClient
from toggl_clock.utils import get_logger, setup_logging

app = typer.Typer(help="Keep a Toggl Track time entry running in step with clock events")
console = Console()
logger = get_logger(__name__)

CONFIG_DIR_HELP = "Configuration directory. Defaults to ~/.toggl-clock/"


def console_notifier(message: str, level: int) -> None:
    """Print a notification with a colour matching its level."""
    if level >= logging.ERROR:
        style = "red"
    elif level >= logging.WARNING:
        style = "yellow"
    else:
        style = "green"
    console.print(f"[{style}]{message}[/{style}]")


def _build_client(config: Config) -> TogglClient:
    """Build a Toggl client from configuration, exiting if it is incomplete."""
    if not config.is_configured():
        console.print("[yellow]Toggl API token or workspace not configured.[/yellow]")
        console.print("Run: toggl-clock configure")
        raise typer.Exit(code=1)

    return TogglClient(
        api_token=config.api_token,
        workspace_id=config.workspace_id,
        timeout=config.timeout,
        base_url=config.api_url,
    )


def _load_projects(session: TogglSession, config: Config) -> None:
    """Load projects synchronously and restore the configured default project."""
    result = session.projects.refresh(sync=True)
    if isinstance(result, Failure):
        raise typer.Exit(code=1)
    if config.default_project:
        session.projects.select(config.default_project)


def _select_project(session: TogglSession, config: Config) -> str:
    """Ask the user for a project and remember it as the default."""
    names = session.projects.names()
    if not names:
        console.print("[yellow]No projects in this workspace.[/yellow]")
        raise typer.Exit(code=1)

    table = Table(title="Toggl Projects")
    table.add_column("Index", style="cyan")
    table.add_column("Project", style="magenta")
    for idx, name in enumerate(names, 1):
        table.add_row(str(idx), name)
    console.print(table)

    choice = Prompt.ask(
        f"Select project (1-{len(names)})",
        choices=[str(i) for i in range(1, len(names) + 1)],
    )
    name = names[int(choice) - 1]
    config.update(default_project=name)
    session.projects.select(name)
    return name


@app.command()
def configure(
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=CONFIG_DIR_HELP),
) -> None:
    """Configure the Toggl API token, workspace and request timeout."""
    setup_logging(config_dir=config_dir)
    config = Config(config_dir)

    console.print("[bold cyan]Toggl Clock Configuration[/bold cyan]")
    console.print()

    token = Prompt.ask("Enter your Toggl API token", password=True)
    workspace_id = Prompt.ask("Enter your Toggl workspace ID", default=str(config.workspace_id or ""))
    timeout = Prompt.ask("Request timeout in seconds", default=str(config.timeout))

    try:
        config.update(workspace_id=int(workspace_id), timeout=float(timeout))
    except ValueError:
        console.print("[red]Workspace ID must be an integer and timeout a number[/red]")
        raise typer.Exit(code=1)
    config.api_token = token
    console.print("[green]✓ Configuration saved[/green]")

    console.print("[cyan]Testing connection...[/cyan]")
    with _build_client(config) as client:
        session = TogglSession(client, notifier=console_notifier)
        result = session.projects.refresh(sync=True)

    if isinstance(result, Failure):
        console.print(f"[red]✗ Failed to connect to Toggl: {result.error}[/red]")
        raise typer.Exit(code=1)
    console.print("\n[green]Configuration complete![/green]")


@app.command()
def projects(
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=CONFIG_DIR_HELP),
) -> None:
    """List the projects of the configured workspace."""
    setup_logging(config_dir=config_dir)
    config = Config(config_dir)

    with _build_client(config) as client:
        session = TogglSession(client, notifier=console_notifier)
        _load_projects(session, config)

    table = Table(title="Toggl Projects")
    table.add_column("Project", style="cyan")
    table.add_column("ID", style="magenta")
    table.add_column("Default", style="yellow")
    for name in session.projects.names():
        project_id = session.projects.lookup(name)
        is_default = project_id == session.projects.default_project_id
        table.add_row(name, str(project_id), "✓" if is_default else "")
    console.print(table)


@app.command("select-project")
def select_project(
    name: Optional[str] = typer.Argument(None, help="Project name. Prompts when omitted."),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=CONFIG_DIR_HELP),
) -> None:
    """Choose the default project for clock-ins that name none."""
    setup_logging(config_dir=config_dir)
    config = Config(config_dir)

    with _build_client(config) as client:
        session = TogglSession(client, notifier=console_notifier)
        _load_projects(session, config)

    if name is None:
        name = _select_project(session, config)
    elif session.projects.select(name) is None:
        raise typer.Exit(code=1)
    else:
        config.update(default_project=name)

    console.print(f"[green]✓ Default project: {name}[/green]")


def dispatch_event(
    line: str,
    source: ClockEventSource,
    session: TogglSession,
    config: Config,
    interactive: bool = True,
) -> None:
    """Emit the clock event encoded in one JSON line.

    Lines look like ``{"event": "clock-in", "description": "...", "tags": [...],
    "project": "..."}``, ``{"event": "clock-out"}`` or ``{"event": "clock-cancel"}``.

    Args:
        line: JSON-encoded event.
        source: Event source to emit on.
        session: Clock session, used to pick a project interactively.
        config: Configuration the picked project is saved to.
        interactive: Prompt for a project when a clock-in names none and
            no default is selected.
    """
    try:
        payload: dict[str, Any] = json.loads(line)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid event: {e}[/red]")
        return

    event = payload.get("event") if isinstance(payload, dict) else None
    if event == "clock-in":
        try:
            clock_in = ClockInEvent(
                description=payload.get("description", ""),
                tags=payload.get("tags") or [],
                project=payload.get("project"),
            )
        except ValidationError as e:
            console.print(f"[red]Invalid event: {e}[/red]")
            return

        project = clock_in.project
        needs_prompt = (
            project is None
            and interactive
            and session.projects.default_project_id is None
            and session.projects.names()
        )
        if needs_prompt:
            project = _select_project(session, config)
        source.clock_in(description=clock_in.description, tags=clock_in.tags, project=project)
    elif event == "clock-out":
        source.clock_out()
    elif event == "clock-cancel":
        source.clock_cancel()
    else:
        console.print(f"[red]Unknown event: {event!r}[/red]")


async def _follow_events(
    session: TogglSession,
    source: ClockEventSource,
    config: Config,
    interactive: bool,
    stream: TextIO | None = None,
) -> None:
    stream = stream or sys.stdin
    # Prompts read stdin too; with piped events they would consume event lines
    if interactive and not stream.isatty():
        logger.info("Events are piped; not prompting for projects")
        interactive = False

    loop = asyncio.get_running_loop()
    session.enable_integration(source)
    try:
        while True:
            line = await loop.run_in_executor(None, stream.readline)
            if not line:
                break
            if line.strip():
                dispatch_event(line, source, session, config, interactive)
    finally:
        session.disable_integration(source)
        await session.client.wait_pending()


@app.command()
def run(
    interactive: bool = typer.Option(
        True,
        "--interactive/--no-interactive",
        help="Prompt for a project when a clock-in names none. Ignored when stdin is not a terminal.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    config_dir: Optional[Path] = typer.Option(None, "--config-dir", help=CONFIG_DIR_HELP),
) -> None:
    """Read clock events as JSON lines from stdin and mirror them to Toggl."""
    setup_logging(
        log_level=logging.DEBUG if verbose else logging.INFO,
        config_dir=config_dir,
    )
    logger.info(f"Toggl Clock v{__version__}")
    config = Config(config_dir)

    with _build_client(config) as client:
        session = TogglSession(client, notifier=console_notifier)
        _load_projects(session, config)
        asyncio.run(_follow_events(session, ClockEventSource(), config, interactive))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"Toggl Clock v{__version__}")


def main() -> None:
    """Main entry point."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
