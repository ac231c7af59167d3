"""Idleview command-line interface.

This module provides the command-line entry point for running the
idleview HTTP server, inspecting and resetting the stored settings, and
previewing the photo context derived from the current time.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Final

import typer
import uvicorn
import yaml

from idleview.api.facade import IdleviewAPI
from idleview.api.http import create_app
from idleview.config import AppConfig
from idleview.context.engine import ContextEngine
from idleview.context.models import WeatherObservation
from idleview.errors import IdleviewError
from idleview.settings.store import SettingsStore

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Idleview display backend", add_completion=False)
settings_app = typer.Typer(help="Settings helpers")
app.add_typer(settings_app, name="settings")

logger: Final = logging.getLogger(__name__)

CONFIG_OPTION = typer.Option(None, "--config", "-c", dir_okay=False, help="config.yaml")
SETTINGS_OPTION = typer.Option(None, "--settings", help="Override settings.json path")
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
HOST_OPTION = typer.Option(None, "--host", help="Interface to bind")
PORT_OPTION = typer.Option(None, "--port", "-p", help="HTTP port")
YAML_OPTION = typer.Option(False, "--yaml", help="Print as YAML instead of JSON")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _load_config(config: Path | None, settings: Path | None) -> AppConfig:
    try:
        cfg = AppConfig.load(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    if settings is not None:
        cfg.settings_path = settings
    return cfg


def _open_store(cfg: AppConfig) -> SettingsStore:
    try:
        store = SettingsStore(cfg.resolve_settings_path())
        store.initialize()
    except IdleviewError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    return store


@app.command()
def serve(
    config: Path | None = CONFIG_OPTION,
    settings: Path | None = SETTINGS_OPTION,
    host: str | None = HOST_OPTION,
    port: int | None = PORT_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Run the HTTP API server."""
    cfg = _load_config(config, settings)
    configure_logging(debug or cfg.debug)

    try:
        api = IdleviewAPI.from_config(cfg)
    except IdleviewError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    web_app = create_app(api, cfg.static_dir)

    bind_host = host or cfg.host
    bind_port = port or cfg.port
    logger.info("Idleview HTTP server listening on http://%s:%d", bind_host, bind_port)
    logger.info("Settings file: %s", api.store.path)

    uvicorn.run(web_app, host=bind_host, port=bind_port)


@app.command()
def context(
    cloudcover: float = typer.Option(0.0, help="Cloud cover percentage"),
    rain: float = typer.Option(0.0, help="Rain (mm)"),
    snowfall: float = typer.Option(0.0, help="Snowfall (cm)"),
    sunrise: str | None = typer.Option(None, help="Sunrise as YYYY-MM-DDTHH:MM"),
    sunset: str | None = typer.Option(None, help="Sunset as YYYY-MM-DDTHH:MM"),
    festive: bool = typer.Option(True, "--festive/--no-festive", help="Allow holiday themes"),
) -> None:
    """Show the season, holiday, time of day and photo query for now."""
    engine = ContextEngine()
    weather = WeatherObservation(cloudcover=cloudcover, rain=rain, snowfall=snowfall)
    tod = engine.time_of_day(sunrise, sunset)

    typer.echo(f"season:      {engine.season().season}")
    typer.echo(f"holiday:     {engine.holiday().holiday or '-'}")
    typer.echo(f"time of day: {tod.time_of_day} ({tod.source})")
    typer.echo(f"photo query: {engine.photo_query(weather, sunrise, sunset, festive).query}")


# ───────────────────────── settings sub-commands ─────────────────────────────
@settings_app.command("show")
def show_settings(
    config: Path | None = CONFIG_OPTION,
    settings: Path | None = SETTINGS_OPTION,
    as_yaml: bool = YAML_OPTION,
) -> None:
    """Print the stored settings (defaults if no file exists)."""
    store = _open_store(_load_config(config, settings))
    data = store.get().to_json_tree()
    if as_yaml:
        typer.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
    else:
        typer.echo(json.dumps(data, indent=2))


@settings_app.command("path")
def settings_path(
    config: Path | None = CONFIG_OPTION,
    settings: Path | None = SETTINGS_OPTION,
) -> None:
    """Print the location of the settings file."""
    cfg = _load_config(config, settings)
    try:
        typer.echo(str(cfg.resolve_settings_path()))
    except IdleviewError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@settings_app.command("reset")
def reset_settings(
    config: Path | None = CONFIG_OPTION,
    settings: Path | None = SETTINGS_OPTION,
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
) -> None:
    """Restore the default settings and write them to disk."""
    store = _open_store(_load_config(config, settings))
    if not yes:
        typer.confirm(f"Reset {store.path} to defaults?", abort=True)
    try:
        store.reset()
    except IdleviewError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    typer.secho(f"Settings reset: {store.path}", fg=typer.colors.GREEN)


@settings_app.command("validate")
def validate_settings(file: Path) -> None:
    """Validate a settings JSON file against the schema."""
    store = SettingsStore(file)
    try:
        if not file.exists():
            raise FileNotFoundError(f"Settings file not found: {file}")
        store.initialize()
        typer.echo("✅ Settings valid")
    except (FileNotFoundError, IdleviewError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
