"""CLI entry point for posix-mode.

Invoked as::

    posix-mode [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m posix_mode.cli.main

Commands
--------
- show     Render a mode given in octal (``755``) or symbolic (``rwxr-xr-x``) form
- umask    Apply a umask to a mode
- version  Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from posix_mode.authorization.mode import Mode
from posix_mode.authorization.umask import InvalidUmaskConfiguration, get_umask, parse_umask
from posix_mode.config.loader import Configuration

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = Path("posix_mode.yaml")
_OCTAL_DIGITS = frozenset("01234567")


def _parse_mode(text: str) -> Mode:
    """Accept ``755``/``0755`` or ``rwxr-xr-x``."""
    if text and len(text) <= 4 and set(text) <= _OCTAL_DIGITS:
        return Mode.from_digital_form(int(text, 8))
    try:
        return Mode.from_display_string(text)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="MODE") from exc


def _load_configuration(config_path: str) -> Configuration:
    cfg_path = Path(config_path)
    if not cfg_path.exists():
        return Configuration()
    try:
        return Configuration.from_yaml(cfg_path)
    except ValueError as exc:
        err_console.print(f"[red]Invalid config:[/red] {escape(str(exc))}")
        sys.exit(1)


def _mode_table(mode: Mode, title: str) -> Table:
    table = Table(title=title, box=box.SIMPLE)
    table.add_column("Class", style="cyan")
    table.add_column("Bits", style="bold")
    table.add_column("Read")
    table.add_column("Write")
    table.add_column("Execute")
    for name, bits in (("owner", mode.owner), ("group", mode.group), ("other", mode.other)):
        table.add_row(
            name,
            bits.to_display_string(),
            "yes" if bits.can_read else "no",
            "yes" if bits.can_write else "no",
            "yes" if bits.can_execute else "no",
        )
    return table


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="posix-mode")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """POSIX mode tools: render modes and apply umasks."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from posix_mode import __version__

    console.print(
        Panel(
            f"[bold]posix-mode[/bold]  v[cyan]{__version__}[/cyan]\n"
            "POSIX style file/directory access modes.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.argument("mode_text", metavar="MODE")
def show_command(mode_text: str) -> None:
    """Render MODE in octal and symbolic form."""
    mode = _parse_mode(mode_text)
    console.print(f"{mode.to_digital_form():04o}  {mode.to_display_string()}")
    console.print(_mode_table(mode, "Permissions"))


# ---------------------------------------------------------------------------
# umask
# ---------------------------------------------------------------------------


@cli.command(name="umask")
@click.option(
    "--mode",
    "-m",
    "mode_text",
    default=None,
    help="Starting mode in octal or symbolic form. Defaults to the configured default mode.",
)
@click.option(
    "--umask",
    "-u",
    "umask_text",
    default=None,
    help="Umask text such as 0022. Overrides the configured umask.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    default=str(_DEFAULT_CONFIG),
    show_default=True,
    type=click.Path(),
    help="Path to posix_mode.yaml.",
)
def umask_command(mode_text: str | None, umask_text: str | None, config_path: str) -> None:
    """Apply a umask to a mode and show the result."""
    conf = _load_configuration(config_path)
    mode = _parse_mode(mode_text) if mode_text is not None else Mode.default(conf.default_mode)

    try:
        if umask_text is not None:
            umask = parse_umask(umask_text)
        else:
            umask = get_umask(conf, default_umask=conf.default_umask)
    except InvalidUmaskConfiguration as exc:
        err_console.print(f"[red]Invalid umask:[/red] {escape(str(exc))}")
        sys.exit(1)

    result = mode.apply_umask(umask)

    table = Table(title="Umask Application", box=box.SIMPLE)
    table.add_column("", style="cyan")
    table.add_column("Octal", style="bold")
    table.add_column("Symbolic")
    table.add_row("mode", f"{mode.to_digital_form():04o}", mode.to_display_string())
    table.add_row("umask", f"{umask.to_digital_form():04o}", umask.to_display_string())
    table.add_row("result", f"[green]{result.to_digital_form():04o}[/green]", result.to_display_string())
    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cli()
