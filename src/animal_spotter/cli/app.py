"""
Main CLI application entry point.

This module contains the main Typer application and command handlers
for Animal Spotter.
"""

from typing import Optional, Awaitable
from pathlib import Path
import asyncio
import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from animal_spotter import VERSION
from animal_spotter.config.settings import SpotterSettings, get_settings
from animal_spotter.config.env_loader import EnvFileLoader, load_env_with_hierarchy
from animal_spotter.core.client import SpotterClient, create_spotter_client
from animal_spotter.core.detail import load_animal_detail
from animal_spotter.core.errors import SpotterError, create_user_friendly_message
from animal_spotter.core.models import User
from animal_spotter.cli import views

LOG_FORMAT = "%(name)s:%(levelname)s:%(message)s"

# Create the main Typer application
app = typer.Typer(
    name="animal-spotter",
    help="Animal Spotter - browse animal sightings from the command line",
    add_completion=False,
    rich_markup_mode="rich",
)

# Rich console for output
console = Console()

logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Display version information and exit."""
    if value:
        console.print(f"[bold blue]Animal Spotter[/bold blue] version [green]{VERSION}[/green]")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def _load_settings() -> SpotterSettings:
    try:
        return get_settings()
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """
    Animal Spotter - browse animal sightings from the command line.

    Credentials and the API endpoint are read from ANIMAL_SPOTTER_*
    environment variables or a .env file.
    """
    load_env_with_hierarchy()
    settings = _load_settings()
    configure_logging("DEBUG" if debug else settings.effective_log_level)


def _run(coro: Awaitable[None]) -> None:
    """Run a command coroutine, reporting client errors."""
    try:
        asyncio.run(coro)
    except SpotterError as e:
        logger.debug(f"Command failed: {e.to_dict()}")
        console.print(f"[red]Error:[/red] {escape(create_user_friendly_message(e))}")
        console.print(f"[dim]{escape(str(e))}[/dim]")
        raise typer.Exit(1)


def _resolve_user(
    settings: SpotterSettings,
    username: Optional[str],
    password: Optional[str],
) -> User:
    """Take credentials from options, then settings, then a prompt."""
    username = username or settings.username or typer.prompt("Username")
    password = password or settings.password or typer.prompt("Password", hide_input=True)
    return User(username=username, password=password)


async def _signed_in_client(settings: SpotterSettings, user: User) -> SpotterClient:
    client = create_spotter_client(settings)
    try:
        await client.sign_in(user)
    except SpotterError:
        await client.close()
        raise
    return client


@app.command("signup")
def signup_command(
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Username to register"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password to register"),
) -> None:
    """Register a new account."""
    settings = _load_settings()
    user = _resolve_user(settings, username, password)
    _run(_async_signup(settings, user))


async def _async_signup(settings: SpotterSettings, user: User) -> None:
    async with create_spotter_client(settings) as client:
        await client.sign_up(user)
    console.print(f"[green]Signed up[/green] {escape(user.username)}")


@app.command("login")
def login_command(
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Username"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password"),
) -> None:
    """Check that the credentials can sign in."""
    settings = _load_settings()
    user = _resolve_user(settings, username, password)
    _run(_async_login(settings, user))


async def _async_login(settings: SpotterSettings, user: User) -> None:
    client = await _signed_in_client(settings, user)
    async with client:
        console.print(f"[green]Signed in[/green] as {escape(user.username)} [dim](token: ***masked***)[/dim]")


@app.command("animals")
def animals_command(
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Username"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password"),
) -> None:
    """List the names of all spotted animals."""
    settings = _load_settings()
    user = _resolve_user(settings, username, password)
    _run(_async_animals(settings, user))


async def _async_animals(settings: SpotterSettings, user: User) -> None:
    client = await _signed_in_client(settings, user)
    async with client:
        names = await client.fetch_all_animal_names()

    if not names:
        console.print("[dim]No animals have been spotted yet.[/dim]")
        return
    console.print(views.names_table(names))


@app.command("show")
def show_command(
    name: str = typer.Argument(..., help="Name of the animal to show"),
    save_image: Optional[Path] = typer.Option(None, "--save-image", help="Write the sighting image to this path"),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Username"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password"),
) -> None:
    """Show the sighting details and image for an animal."""
    settings = _load_settings()
    user = _resolve_user(settings, username, password)
    _run(_async_show(settings, user, name, save_image))


async def _async_show(
    settings: SpotterSettings,
    user: User,
    name: str,
    save_image: Optional[Path],
) -> None:
    client = await _signed_in_client(settings, user)
    async with client:
        detail = await load_animal_detail(client, name)

    console.print(views.animal_panel(detail))

    if detail.image is None:
        reason = create_user_friendly_message(detail.image_error) if detail.image_error else "unknown"
        console.print(f"[yellow]Image unavailable:[/yellow] {escape(reason)}")
        return

    console.print(f"[dim]{views.image_summary(detail.image)}[/dim]")
    if save_image:
        saved = detail.image.save(save_image)
        console.print(f"[green]Saved image to[/green] {escape(str(saved))}")


@app.command("config")
def config_command(
    show: bool = typer.Option(False, "--show", "-s", help="Show current configuration"),
    show_sources: bool = typer.Option(False, "--sources", help="Show .env search paths"),
    init: bool = typer.Option(False, "--init", help="Create an example .env file"),
    scope: str = typer.Option("project", "--scope", help="Scope for --init (project, user)"),
) -> None:
    """Inspect or initialize Animal Spotter configuration."""
    if init:
        path = EnvFileLoader().create_example_env_file(scope=scope)
        console.print(f"[green]Created[/green] {escape(str(path))}")
        return

    if show_sources:
        _show_config_sources()
        return

    if show:
        _show_current_config(_load_settings())
        return

    console.print("[yellow]Use one of the following options:[/yellow]")
    console.print("  --show         Show current configuration")
    console.print("  --sources      Show .env search paths")
    console.print("  --init         Create an example .env file")


def _show_current_config(settings: SpotterSettings) -> None:
    """Show current configuration values."""
    table = Table(title="Current Configuration", show_header=True, header_style="bold magenta")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    for key, value in settings.to_dict().items():
        table.add_row(key, "Not set" if value is None else escape(str(value)))

    console.print(table)


def _show_config_sources() -> None:
    loader = EnvFileLoader()
    table = Table(title=".env Search Paths", show_header=True, header_style="bold magenta")
    table.add_column("Path", style="cyan")
    table.add_column("Exists", style="green")

    for path in loader.get_search_paths():
        table.add_row(str(path), "yes" if path.is_file() else "no")

    console.print(table)
