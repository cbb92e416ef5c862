"""Click CLI for storagetui."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from storagetui.constants.defaults import LOG_FORMAT_DEFAULT, LOG_LEVEL_DEFAULT
from storagetui.controllers.catalog import CatalogFormatError, StaticCatalogProvider

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: str, log_file: Path | None) -> None:
    """Send log records to ``log_file``.

    Textual owns the terminal, so without a file nothing is logged.
    """
    root = logging.getLogger("storagetui")
    root.setLevel(level.upper())
    if log_file is None:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DEFAULT))
    root.addHandler(handler)


@click.group(invoke_without_command=True)
@click.version_option(version="0.1.0", prog_name="storagetui")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML catalog to browse (default: bundled sample catalog)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: $STORAGETUI_CONFIG or ~/.config/storagetui/settings.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=LOG_LEVEL_DEFAULT,
    show_default=True,
    help="Minimum level written to the log file",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write logs to this file",
)
@click.pass_context
def main(
    ctx: click.Context,
    catalog_path: Path | None,
    config_path: Path | None,
    log_level: str,
    log_file: Path | None,
) -> None:
    """Storage Explorer - browse subscriptions, accounts, containers and blobs.

    Keyboard shortcuts:
        tab   - Next pane
        enter - Expand / open
        space - Enable or disable a subscription
        /     - Search the preview
        r     - Refresh
        q     - Quit
    """
    configure_logging(log_level, log_file)
    if ctx.invoked_subcommand is not None:
        return

    from storagetui.app import StorageExplorerApp

    try:
        app = StorageExplorerApp(catalog_path=catalog_path, config_path=config_path)
    except CatalogFormatError as exc:
        raise click.ClickException(str(exc)) from exc
    app.run()


@main.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(path: Path) -> None:
    """Check a YAML catalog and print what it contains."""
    try:
        provider = StaticCatalogProvider.from_yaml(path)
    except CatalogFormatError as exc:
        raise click.ClickException(str(exc)) from exc

    catalog = provider.catalog
    accounts = sum(len(items) for items in catalog.accounts.values())
    containers = sum(len(items) for items in catalog.containers.values())
    blobs = sum(len(items) for items in catalog.blobs.values())
    click.echo(f"Subscriptions: {len(catalog.subscriptions)}")
    click.echo(f"Accounts: {accounts}")
    click.echo(f"Containers: {containers}")
    click.echo(f"Blobs: {blobs}")
    for scope, entries in sorted(catalog.failures.items(), key=lambda item: item[0].value):
        for key, message in sorted(entries.items()):
            click.echo(f"Failure {scope.value} {key}: {message}")


__all__ = ["configure_logging", "main"]
