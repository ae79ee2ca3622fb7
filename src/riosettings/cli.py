"""Settings CLI.

Command-line helpers to list the known writer settings, show the effective
values after file and environment overrides, and validate settings files.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final, Optional

import typer

from riosettings.errors import SettingsError
from riosettings.loader import SettingsFile, load_store
from riosettings.settings import SettingsStore
from riosettings.writer import BASIC_WRITER_SETTINGS

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="RDF writer settings CLI", add_completion=False)
config_app = typer.Typer(help="Settings file helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "riosettings.cli"

CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
FILE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Settings YAML file")


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


@app.command("list")
def list_settings() -> None:
    """List the basic writer settings and their defaults."""
    width = max(len(s.key) for s in BASIC_WRITER_SETTINGS.settings())
    for setting in BASIC_WRITER_SETTINGS.settings():
        typer.echo(
            f"{setting.key:<{width}}  {_format_value(setting.default_value):<5}  "
            f"{setting.display_name}"
        )


@app.command()
def show(
    config: Optional[Path] = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Show effective writer settings after file and environment overrides."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        store = load_store(BASIC_WRITER_SETTINGS, config)
    except (SettingsError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    for setting in BASIC_WRITER_SETTINGS.settings():
        marker = "*" if store.contains(setting) else " "
        typer.echo(f"{marker} {setting.key} = {_format_value(store.get(setting))}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path = FILE_ARGUMENT):
    """Validate a settings YAML file against the writer settings."""
    try:
        settings_file = SettingsFile.load(file)
        # Unknown keys are always errors here, whatever the file says
        settings_file.model_copy(update={"strict": True}).apply(
            SettingsStore(), BASIC_WRITER_SETTINGS
        )
        typer.echo("✅ Settings valid")
    except SettingsError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
