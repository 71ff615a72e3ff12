"""Doctor command for environment diagnostics."""

from __future__ import annotations

import os
import shutil

import typer
from rich.console import Console
from rich.table import Table

from zenity_bridge.adapters.subprocess_runner import SubprocessRunner
from zenity_bridge.cli.ui_components import build_settings_table
from zenity_bridge.core.config import ZenitySettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_binary(binary: str) -> tuple[bool, str]:
    path = shutil.which(binary)
    if path is None:
        return False, f"{binary!r} not found on PATH"
    return True, path


def _check_version(binary: str) -> tuple[bool, str]:
    """Ask the program for its version (no dialog is shown)."""

    try:
        outcome = SubprocessRunner().run([binary, "--version"])
    except OSError as exc:
        return False, str(exc)
    if outcome.returncode != 0:
        return False, f"exit code {outcome.returncode}"
    text = outcome.stdout.decode("utf-8", errors="replace").strip()
    return True, text or "unknown"


def _check_display(settings: ZenitySettings) -> tuple[bool, str]:
    display = settings.display or os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
    if not display:
        return False, "Neither DISPLAY nor WAYLAND_DISPLAY is set"
    return True, display


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ZenitySettings()

    table = Table(title="zenity-bridge Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    ok_bin, detail_bin = _check_binary(settings.binary)
    table.add_row("Binary", "OK" if ok_bin else "FAIL", detail_bin)

    if ok_bin:
        ok_ver, detail_ver = _check_version(settings.binary)
        table.add_row("Version", "OK" if ok_ver else "FAIL", detail_ver)

    ok_display, detail_display = _check_display(settings)
    table.add_row("Display", "OK" if ok_display else "WARN", detail_display)

    _console.print(table)
    _console.print(build_settings_table(settings))

    if not ok_bin:
        _console.print(
            "\n[yellow]Note:[/yellow] install zenity with your package manager "
            "or point ZENITY_BRIDGE_BINARY at the executable."
        )
        raise typer.Exit(code=1)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    current = ZenitySettings()

    binary = typer.prompt("Dialog binary", default=current.binary, show_default=True).strip()
    display = typer.prompt("DISPLAY override (empty to inherit)", default="", show_default=False).strip()
    title = typer.prompt("Default title (empty for none)", default="", show_default=False).strip()

    if not binary:
        raise typer.BadParameter("binary is required")

    env_path = write_user_env_vars(
        {
            "ZENITY_BRIDGE_BINARY": binary,
            "ZENITY_BRIDGE_DISPLAY": display or None,
            "ZENITY_BRIDGE_DEFAULT_TITLE": title or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
