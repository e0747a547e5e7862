"""Command line entry point for Version Hub."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from versionhub.models.state.config_manager import (
    AppSettings,
    ConfigError,
    ConfigManager,
)

app = typer.Typer(
    name="versionhub",
    help="Browse deployed applications per cluster and their available upgrade versions.",
    no_args_is_help=False,
    add_completion=False,
)


def configure_logging(level: str, log_file: Path | None) -> None:
    """Route logs to a file (or nowhere) so they do not draw over the TUI."""
    handlers: list[logging.Handler] = []
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    else:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


@app.command("run")
def run(
    api_url: str | None = typer.Option(
        None, "--api-url", help="Inventory API root, e.g. http://localhost:8082/api/v1."
    ),
    timeout: float | None = typer.Option(
        None, "--timeout", min=1.0, help="Request timeout in seconds."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="Settings file (defaults to ~/.config/versionhub/settings.yaml)."
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level."),
    log_file: Path | None = typer.Option(None, "--log-file", help="Write logs to this file."),
) -> None:
    """Start the interactive inventory."""
    from versionhub.app import VersionHubApp

    configure_logging(log_level, log_file)
    VersionHubApp(api_url=api_url, timeout=timeout, config_path=config).run()


@app.command("init-config")
def init_config(
    config: Path | None = typer.Option(
        None, "--config", help="Where to write the settings file."
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file."),
) -> None:
    """Write a settings file with default values."""
    path = config or ConfigManager.default_path()
    if path.exists() and not force:
        typer.echo(f"{path} already exists (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)
    try:
        ConfigManager.save(AppSettings(), path)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Wrote {path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
