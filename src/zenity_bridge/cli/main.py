"""zenity-bridge command line.

One command per dialog type. The process exit code mirrors the result so
shell scripts can branch on it:

- 0 affirmed, 1 rejected, 2 extra button
- the program's own code for unknown outcomes
- 127 when the dialog program is not installed, 70 for other failures

Unknown outcomes pass any code through, so 2 (or 70, 127) can also come from
the program itself. Use ``--json`` and read ``kind`` when that matters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from zenity_bridge.adapters.json_exporter import export_result_json, result_to_json
from zenity_bridge.adapters.subprocess_runner import SubprocessRunner
from zenity_bridge.cli import doctor
from zenity_bridge.cli.ui_components import build_result_panel
from zenity_bridge.core.config import ZenitySettings
from zenity_bridge.core.domain.applications import (
    Calendar,
    DialogApplication,
    Entry,
    ErrorMessage,
    InfoMessage,
    Question,
    WarningMessage,
)
from zenity_bridge.core.domain.arg import Arg
from zenity_bridge.core.domain.dialog import ZenityDialog
from zenity_bridge.core.domain.icon import Icon
from zenity_bridge.core.domain.month import Month
from zenity_bridge.core.domain.outputs import Affirmed, ExtraButton, Rejected, Unknown
from zenity_bridge.core.errors import ZenityError, ZenityNotInstalledError
from zenity_bridge.core.services.dialog_service import show_dialog

app = typer.Typer(
    no_args_is_help=True,
    help="Show zenity dialogs from the shell and get structured results back.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

EXIT_EXTRA_BUTTON = 2
EXIT_NOT_INSTALLED = 127
EXIT_FAILURE = 70

TextOpt = Annotated[Optional[str], typer.Option("--text", help="Body text.")]
Title = Annotated[Optional[str], typer.Option("--title", help="Window title.")]
IconOpt = Annotated[
    Optional[str],
    typer.Option("--icon", help="error, info, question, warning or a path to an image."),
]
Width = Annotated[Optional[int], typer.Option("--width", min=1, help="Window width.")]
Height = Annotated[Optional[int], typer.Option("--height", min=1, help="Window height.")]
Timeout = Annotated[
    Optional[int],
    typer.Option("--timeout", min=1, help="Close the dialog after this many seconds."),
]
ModalHint = Annotated[Optional[str], typer.Option("--modal-hint", help="Value passed to --modal.")]
ExtraButtonOpt = Annotated[
    Optional[str],
    typer.Option("--extra-button", help="Label of an extra button (exit code 2 when pressed)."),
]
ExtraArgs = Annotated[
    Optional[List[str]],
    typer.Option("--arg", help="Extra option NAME[=VALUE] passed through as --NAME[=VALUE]. Repeatable."),
]
AsJson = Annotated[bool, typer.Option("--json", help="Print the result as JSON.")]
OutputOpt = Annotated[Optional[Path], typer.Option("--output", "-o", help="Also write the JSON result to this file.")]
OkLabel = Annotated[Optional[str], typer.Option("--ok-label", help="Custom label for the OK button.")]
NoWrap = Annotated[bool, typer.Option("--no-wrap", help="Do not wrap the body text.")]
NoMarkup = Annotated[bool, typer.Option("--no-markup", help="Disable Pango markup.")]
Ellipsize = Annotated[bool, typer.Option("--ellipsize", help="Ellipsize text that is too long.")]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _exit_code(result: Affirmed | Rejected | ExtraButton | Unknown) -> int:
    if isinstance(result, Affirmed):
        return 0
    if isinstance(result, Rejected):
        return 1
    if isinstance(result, ExtraButton):
        return EXIT_EXTRA_BUTTON
    return result.exit_code


def _show(
    application: DialogApplication,
    *,
    title: str | None,
    icon: str | None,
    width: int | None,
    height: int | None,
    timeout: int | None,
    modal_hint: str | None,
    extra_button: str | None,
    extra_args: list[str] | None,
    as_json: bool,
    output: Path | None,
) -> None:
    """Build the dialog, show it and exit with the mapped code."""

    settings = ZenitySettings()

    dialog = ZenityDialog(
        application=application,
        title=title,
        icon=Icon.resolve(icon) if icon else None,
        width=width,
        height=height,
        timeout=timeout,
        modal_hint=modal_hint,
        extra_button=extra_button,
        additional_args=tuple(Arg.parse(raw) for raw in extra_args or ()),
    )

    try:
        result = show_dialog(dialog, runner=SubprocessRunner(), settings=settings)
    except ZenityNotInstalledError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        _err_console.print("Run [bold]zenity-bridge doctor run[/bold] for details.")
        raise typer.Exit(code=EXIT_NOT_INSTALLED) from exc
    except ZenityError as exc:
        _err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=EXIT_FAILURE) from exc

    if output is not None:
        export_result_json(result=result, output_path=output)

    if as_json:
        typer.echo(result_to_json(result))
    else:
        _console.print(build_result_panel(result))

    raise typer.Exit(code=_exit_code(result))


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging.")] = False,
) -> None:
    """Configure logging before any command runs."""

    _configure_logging("DEBUG" if verbose else ZenitySettings().log_level)


@app.command()
def info(
    text: TextOpt = None,
    ok_label: OkLabel = None,
    no_wrap: NoWrap = False,
    no_markup: NoMarkup = False,
    ellipsize: Ellipsize = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Show an informational message."""

    application = InfoMessage(
        text=text, ok_label=ok_label, no_wrap=no_wrap, no_markup=no_markup, ellipsize=ellipsize
    )
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


@app.command()
def warning(
    text: TextOpt = None,
    ok_label: OkLabel = None,
    no_wrap: NoWrap = False,
    no_markup: NoMarkup = False,
    ellipsize: Ellipsize = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Show a warning message."""

    application = WarningMessage(
        text=text, ok_label=ok_label, no_wrap=no_wrap, no_markup=no_markup, ellipsize=ellipsize
    )
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


@app.command()
def error(
    text: TextOpt = None,
    no_wrap: NoWrap = False,
    no_markup: NoMarkup = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Show an error message."""

    application = ErrorMessage(text=text, no_wrap=no_wrap, no_markup=no_markup)
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


@app.command()
def question(
    text: TextOpt = None,
    ok_label: OkLabel = None,
    cancel_label: Annotated[
        Optional[str], typer.Option("--cancel-label", help="Custom label for the Cancel button.")
    ] = None,
    no_wrap: NoWrap = False,
    no_markup: NoMarkup = False,
    ellipsize: Ellipsize = False,
    default_cancel: Annotated[
        bool, typer.Option("--default-cancel", help="Focus the Cancel button.")
    ] = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Ask a yes/no question (exit code 0 for yes, 1 for no)."""

    application = Question(
        text=text,
        ok_label=ok_label,
        cancel_label=cancel_label,
        no_wrap=no_wrap,
        no_markup=no_markup,
        ellipsize=ellipsize,
        default_cancel=default_cancel,
    )
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


@app.command()
def entry(
    text: TextOpt = None,
    entry_text: Annotated[
        Optional[str], typer.Option("--entry-text", help="Text prefilled in the input.")
    ] = None,
    hide_text: Annotated[bool, typer.Option("--hide-text", help="Mask the input.")] = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Ask for a line of text."""

    application = Entry(text=text, entry_text=entry_text, hide_text=hide_text)
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


@app.command()
def calendar(
    text: TextOpt = None,
    day: Annotated[Optional[int], typer.Option("--day", min=1, max=31, help="Preselected day.")] = None,
    month: Annotated[
        Optional[int], typer.Option("--month", min=1, max=12, help="Preselected month (1-12).")
    ] = None,
    year: Annotated[Optional[int], typer.Option("--year", help="Preselected year.")] = None,
    date_format: Annotated[
        Optional[str], typer.Option("--date-format", help="strftime-style output format.")
    ] = None,
    parse_date: Annotated[
        bool, typer.Option("--parse-date", help="Return the date in ISO format.")
    ] = False,
    title: Title = None,
    icon: IconOpt = None,
    width: Width = None,
    height: Height = None,
    timeout: Timeout = None,
    modal_hint: ModalHint = None,
    extra_button: ExtraButtonOpt = None,
    extra_args: ExtraArgs = None,
    as_json: AsJson = False,
    output: OutputOpt = None,
) -> None:
    """Pick a date."""

    application = Calendar(
        text=text,
        day=day,
        month=Month(month) if month is not None else None,
        year=year,
        format=date_format,
        parse_date=parse_date,
    )
    _show(
        application,
        title=title, icon=icon, width=width, height=height, timeout=timeout,
        modal_hint=modal_hint, extra_button=extra_button, extra_args=extra_args,
        as_json=as_json, output=output,
    )


def run() -> None:
    app()
