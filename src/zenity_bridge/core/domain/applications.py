"""Dialog types ("applications") and their option sets.

Each application renders its mode flag (``--info``, ``--calendar``...) and
its own options, and knows how to turn the program's stdout into a value
once the user affirmed the dialog.

The models are frozen: the ``with_*`` / ``set_*`` helpers return updated
copies so a base configuration can be reused across invocations.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from zenity_bridge.core.domain.month import Month
from zenity_bridge.core.errors import ParseResultError

_A = TypeVar("_A", bound="DialogApplication")

DEFAULT_DATE_FORMAT = "%d/%m/%y"


class DialogApplication(BaseModel):
    """Base class: a dialog type with its mode flag and options."""

    model_config = ConfigDict(frozen=True)

    mode: ClassVar[str]

    text: str | None = Field(default=None, description="Body text.")

    def _with(self: _A, **changes: Any) -> _A:
        return self.model_copy(update=changes)

    def with_text(self: _A, text: str) -> _A:
        return self._with(text=text)

    def options(self) -> list[str]:
        """Options rendered after the mode flag."""

        args: list[str] = []
        if self.text is not None:
            args.append(f"--text={self.text}")
        return args

    def to_argv(self) -> list[str]:
        return [f"--{self.mode}", *self.options()]

    def parse(self, stdout: str) -> Any:
        """Convert non-empty affirmed stdout into the application's return value."""

        return stdout


class _MessageApplication(DialogApplication):
    """Shared options of the message-box style dialogs."""

    ok_label: str | None = Field(default=None, description="Custom label for the OK button.")
    no_wrap: bool = Field(default=False, description="Do not wrap the body text.")
    no_markup: bool = Field(default=False, description="Disable Pango markup in the body text.")
    ellipsize: bool = Field(default=False, description="Ellipsize text that is too long to display.")

    def with_ok_label(self: _A, ok_label: str) -> _A:
        return self._with(ok_label=ok_label)

    def set_no_wrap(self: _A) -> _A:
        return self._with(no_wrap=True)

    def set_no_markup(self: _A) -> _A:
        return self._with(no_markup=True)

    def set_ellipsize(self: _A) -> _A:
        return self._with(ellipsize=True)

    def _flags(self) -> list[str]:
        args: list[str] = []
        if self.no_wrap:
            args.append("--no-wrap")
        if self.no_markup:
            args.append("--no-markup")
        if self.ellipsize:
            args.append("--ellipsize")
        return args

    def options(self) -> list[str]:
        args = super().options()
        if self.ok_label is not None:
            args.append(f"--ok-label={self.ok_label}")
        return args + self._flags()


class InfoMessage(_MessageApplication):
    """An informational message."""

    mode: ClassVar[str] = "info"


class WarningMessage(_MessageApplication):
    """A warning message."""

    mode: ClassVar[str] = "warning"


class ErrorMessage(DialogApplication):
    """A message that warns the user about an error."""

    mode: ClassVar[str] = "error"

    no_wrap: bool = Field(default=False, description="Do not wrap the body text.")
    no_markup: bool = Field(default=False, description="Disable Pango markup in the body text.")

    def set_no_wrap(self) -> "ErrorMessage":
        return self._with(no_wrap=True)

    def set_no_markup(self) -> "ErrorMessage":
        return self._with(no_markup=True)

    def options(self) -> list[str]:
        args = super().options()
        if self.no_wrap:
            args.append("--no-wrap")
        if self.no_markup:
            args.append("--no-markup")
        return args


class Question(_MessageApplication):
    """A yes/no question. Affirmed means the OK button was pressed."""

    mode: ClassVar[str] = "question"

    cancel_label: str | None = Field(default=None, description="Custom label for the Cancel button.")
    default_cancel: bool = Field(default=False, description="Give the Cancel button the initial focus.")

    def with_cancel_label(self, cancel_label: str) -> "Question":
        return self._with(cancel_label=cancel_label)

    def set_default_cancel(self) -> "Question":
        return self._with(default_cancel=True)

    def options(self) -> list[str]:
        args = DialogApplication.options(self)
        if self.ok_label is not None:
            args.append(f"--ok-label={self.ok_label}")
        if self.cancel_label is not None:
            args.append(f"--cancel-label={self.cancel_label}")
        args += self._flags()
        if self.default_cancel:
            args.append("--default-cancel")
        return args


class Entry(DialogApplication):
    """A single-line text input."""

    mode: ClassVar[str] = "entry"

    entry_text: str | None = Field(default=None, description="Text prefilled in the input.")
    hide_text: bool = Field(default=False, description="Mask the input, as for a password.")

    def with_entry_text(self, entry_text: str) -> "Entry":
        return self._with(entry_text=entry_text)

    def set_hide_text(self) -> "Entry":
        return self._with(hide_text=True)

    def options(self) -> list[str]:
        args = super().options()
        if self.entry_text is not None:
            args.append(f"--entry-text={self.entry_text}")
        if self.hide_text:
            args.append("--hide-text")
        return args


class Calendar(DialogApplication):
    """A date picker.

    With ``parse_date`` enabled the affirmed content is a `datetime.date`
    and the date format is always passed to the program (``format`` or
    ``%d/%m/%y``), otherwise the raw text is returned as printed.
    """

    mode: ClassVar[str] = "calendar"

    day: int | None = Field(
        default=None,
        ge=1,
        le=31,
        description="Preselected day; ignored by the program if the month is shorter.",
    )
    month: Month | None = Field(default=None, description="Preselected month.")
    year: int | None = Field(default=None, description="Preselected year.")
    format: str | None = Field(default=None, min_length=1, description="strftime-style output format.")
    parse_date: bool = Field(default=False, description="Return a date instead of the raw text.")

    def with_day(self, day: int) -> "Calendar":
        return self._with(day=day)

    def with_month(self, month: Month | int) -> "Calendar":
        return self._with(month=Month(month))

    def with_year(self, year: int) -> "Calendar":
        return self._with(year=year)

    def with_format(self, date_format: str) -> "Calendar":
        return self._with(format=date_format)

    def set_parse_date(self) -> "Calendar":
        return self._with(parse_date=True)

    @property
    def effective_format(self) -> str | None:
        if self.parse_date:
            return self.format or DEFAULT_DATE_FORMAT
        return self.format

    def options(self) -> list[str]:
        args = super().options()
        if self.day is not None:
            args.append(f"--day={self.day}")
        if self.month is not None:
            args.append(f"--month={self.month.value}")
        if self.year is not None:
            args.append(f"--year={self.year}")
        date_format = self.effective_format
        if date_format is not None:
            args.append(f"--date-format={date_format}")
        return args

    def parse(self, stdout: str) -> date | str:
        if not self.parse_date:
            return stdout
        date_format = self.effective_format or DEFAULT_DATE_FORMAT
        try:
            return datetime.strptime(stdout.strip(), date_format).date()
        except ValueError as exc:
            raise ParseResultError(stdout, str(exc)) from exc
