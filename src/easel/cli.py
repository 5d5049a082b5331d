"""easel command line."""

from __future__ import annotations

import asyncio
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from easel.app import EaselApp
from easel.config import load_settings
from easel.dialogs.outcome import Outcome, Resolved
from easel.dialogs.prompts import ConsolePrompter
from easel.errors import EaselError
from easel.logging_utils import configure_logging
from easel.models.geometry import opaque_bounding_rect

app = typer.Typer(name="easel", help="Dialog shell for the easel painting app", add_completion=False)
console = Console()


def _build_app(timeout: float | None = None) -> EaselApp:
    settings = load_settings(dialog_timeout_seconds=timeout)
    configure_logging(profile="console", level=settings.log_level)
    return EaselApp(settings, prompter=ConsolePrompter(console))


def _parse_params(values: list[str]) -> dict[str, str] | None:
    if not values:
        return None
    params: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected key=value, got {item!r}", param_hint="--param")
        params[key.strip()] = value.strip()
    return params


def _render(outcome: Outcome[Any]) -> str:
    if isinstance(outcome, Resolved):
        value = asdict(outcome.value) if is_dataclass(outcome.value) else outcome.value
        return f"resolved: {value}"
    return f"dismissed ({outcome.reason})"


@app.command("dialogs")
def list_dialogs() -> None:
    """List registered dialogs."""
    easel = _build_app()
    for name in easel.registry.names():
        typer.echo(name)


@app.command("actions")
def list_actions() -> None:
    """List registered actions."""
    easel = _build_app()
    for action in easel.actions:
        state = "" if action.enabled else " (disabled)"
        typer.echo(f"{action.id}\t{action.title}{state}")


@app.command("open")
def open_dialog(
    name: str = typer.Argument(..., help="Dialog name"),
    param: list[str] = typer.Option([], "--param", "-p", help="Dialog parameter as key=value"),  # noqa: B008
    timeout: float | None = typer.Option(None, "--timeout", help="Give up after this many seconds"),
) -> None:
    """Open a dialog on the console and print its outcome."""
    params = _parse_params(param)
    try:
        easel = _build_app(timeout)
        outcome = asyncio.run(easel.dialogs.open(name, params))
    except EaselError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc
    typer.echo(_render(outcome))


@app.command("bbox")
def bounding_box(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw RGBA pixel file"),  # noqa: B008
    width: int = typer.Option(..., "--width", "-w", min=0),
    height: int = typer.Option(..., "--height", "-h", min=0),
) -> None:
    """Print the bounding box of the non-transparent pixels of a raw RGBA file."""
    try:
        rect = opaque_bounding_rect(path.read_bytes(), width, height)
    except ValueError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(1) from exc
    if rect is None:
        typer.echo("empty")
        return
    typer.echo(f"{rect.left:g},{rect.top:g} {rect.right:g},{rect.bottom:g}")


if __name__ == "__main__":
    app()
