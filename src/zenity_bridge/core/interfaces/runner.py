"""Process runner contract.

`ProcessRunner` is a structural contract: the service depends on it and
the subprocess adapter (or a fake in tests) implements it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ProcessOutcome:
    """What a finished process left behind, undecoded."""

    returncode: int
    stdout: bytes
    stderr: bytes


@runtime_checkable
class ProcessRunner(Protocol):
    """Minimal contract for running the dialog program.

    Rules:
    - `run` blocks until the process exits.
    - A missing executable raises `FileNotFoundError`; other spawn failures
      raise `OSError`. Non-zero exit codes are returned, never raised.
    """

    def run(self, argv: Sequence[str], *, env: Mapping[str, str] | None = None) -> ProcessOutcome:
        """Run ``argv`` (binary first) and return its exit code and output."""

        ...
