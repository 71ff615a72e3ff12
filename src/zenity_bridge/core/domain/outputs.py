"""Dialog results (Pydantic v2).

A dialog always produces one of these; a non-zero exit code is a result,
not an error. The ``kind`` field discriminates the variants once they are
serialized.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Output(BaseModel):
    model_config = ConfigDict(frozen=True)


class Affirmed(_Output):
    """The user pressed the affirmative button (exit code 0)."""

    kind: Literal["affirmed"] = "affirmed"
    content: Any = Field(
        default=None,
        description="Parsed stdout (entry text, selected date...), None when nothing was printed.",
    )


class Rejected(_Output):
    """The user pressed a negative button or closed the dialog (exit code 1)."""

    kind: Literal["rejected"] = "rejected"
    content: str | None = Field(
        default=None,
        description="Label printed by the program for custom buttons, None for the defaults.",
    )


class ExtraButton(_Output):
    """The user pressed the configured extra button."""

    kind: Literal["extra_button"] = "extra_button"
    content: str = Field(..., description="Label of the extra button.")


class Unknown(_Output):
    """The program exited with a code this library does not interpret."""

    kind: Literal["unknown"] = "unknown"
    exit_code: int = Field(..., description="Exit code returned by the program.")
    stdout: str = Field(default="", description="Everything the program wrote to stdout.")
    stderr: str = Field(default="", description="Everything the program wrote to stderr.")


DialogResult = Annotated[
    Union[Affirmed, Rejected, ExtraButton, Unknown],
    Field(discriminator="kind"),
]
