"""Dialog configuration.

`ZenityDialog` combines one application (the dialog type) with the window
options every dialog accepts, and renders the full argument vector.
"""

from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator

from zenity_bridge.core.domain.applications import DialogApplication, InfoMessage
from zenity_bridge.core.domain.arg import Arg
from zenity_bridge.core.domain.icon import Icon, render_icon


class ZenityDialog(BaseModel):
    """A dialog ready to be shown.

    Example::

        dialog = (
            ZenityDialog(application=Question(text="Overwrite the file?"))
            .with_title("Save")
            .with_extra_button("Save as...")
        )
    """

    model_config = ConfigDict(frozen=True)

    application: SerializeAsAny[DialogApplication] = Field(
        default_factory=InfoMessage,
        description="Dialog type and its own options.",
    )
    title: str | None = Field(default=None, description="Window title.")
    icon: Icon | Path | None = Field(default=None, description="Standard icon or path to a custom one.")
    width: int | None = Field(default=None, gt=0, description="Window width.")
    height: int | None = Field(default=None, gt=0, description="Window height.")
    timeout: timedelta | None = Field(
        default=None,
        description="Close the dialog automatically after this long (whole seconds).",
    )
    modal_hint: str | None = Field(default=None, description="Value passed to --modal.")
    extra_button: str | None = Field(
        default=None,
        min_length=1,
        description="Label of an extra button; pressing it yields ExtraButton.",
    )
    additional_args: tuple[Arg, ...] = Field(
        default=(),
        description="Options not modelled statically, appended last.",
    )

    @field_validator("timeout")
    @classmethod
    def _whole_seconds(cls, value: timedelta | None) -> timedelta | None:
        # The program reads 0 as "never time out".
        if value is not None and value < timedelta(seconds=1):
            raise ValueError("timeout must be at least one second")
        return value

    def _with(self, **changes: Any) -> "ZenityDialog":
        return self.model_validate({**self.__dict__, **changes})

    def with_title(self, title: str) -> "ZenityDialog":
        return self._with(title=title)

    def with_icon(self, icon: Icon | Path | str) -> "ZenityDialog":
        return self._with(icon=Icon.resolve(icon))

    def with_width(self, width: int) -> "ZenityDialog":
        return self._with(width=width)

    def with_height(self, height: int) -> "ZenityDialog":
        return self._with(height=height)

    def with_timeout(self, timeout: timedelta | float) -> "ZenityDialog":
        return self._with(timeout=timeout)

    def with_modal_hint(self, modal_hint: str) -> "ZenityDialog":
        return self._with(modal_hint=modal_hint)

    def with_extra_button(self, label: str) -> "ZenityDialog":
        return self._with(extra_button=label)

    def with_additional_arg(self, arg: Arg | str | tuple[str, str]) -> "ZenityDialog":
        """Attach an option that is not modelled statically.

        The leading ``--`` is optional; it is added when missing.
        """

        return self._with(additional_args=(*self.additional_args, Arg.coerce(arg)))

    def with_additional_args(self, args: Iterable[Arg | str | tuple[str, str]]) -> "ZenityDialog":
        return self._with(additional_args=(*self.additional_args, *(Arg.coerce(a) for a in args)))

    def to_argv(self) -> list[str]:
        """Argument vector passed to the dialog program (without the binary)."""

        args = self.application.to_argv()

        if self.title is not None:
            args.append(f"--title={self.title}")
        if self.icon is not None:
            args.append(f"--icon-name={render_icon(self.icon)}")
        if self.width is not None:
            args.append(f"--width={self.width}")
        if self.height is not None:
            args.append(f"--height={self.height}")
        if self.timeout is not None:
            args.append(f"--timeout={int(self.timeout.total_seconds())}")
        if self.modal_hint is not None:
            args.append(f"--modal={self.modal_hint}")
        if self.extra_button is not None:
            args.append(f"--extra-button={self.extra_button}")

        args.extend(arg.render() for arg in self.additional_args)
        return args
