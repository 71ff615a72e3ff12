"""Free-form command-line arguments.

Used for options the dialog program supports but that are not modelled
statically by the application classes.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Arg(BaseModel):
    """A single ``--name[=value]`` argument."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Option name, with or without the leading '--'.")
    value: str | None = Field(default=None, description="Option value; None renders a bare flag.")

    @classmethod
    def coerce(cls, raw: "Arg | str | tuple[str, str]") -> "Arg":
        """Build an `Arg` from a bare name or a ``(name, value)`` pair."""

        if isinstance(raw, Arg):
            return raw
        if isinstance(raw, tuple):
            name, value = raw
            return cls(name=name, value=str(value))
        return cls(name=raw)

    @classmethod
    def parse(cls, text: str) -> "Arg":
        """Parse ``name=value`` (or a bare ``name``) as typed on a command line."""

        if "=" in text:
            name, value = text.split("=", 1)
            return cls(name=name, value=value)
        return cls(name=text)

    def render(self) -> str:
        name = self.name[2:] if self.name.startswith("--") else self.name
        if self.value is None:
            return f"--{name}"
        return f"--{name}={self.value}"

    def __str__(self) -> str:
        return self.render()
