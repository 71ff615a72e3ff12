"""`subprocess` implementation of `ProcessRunner`.

Runs the dialog program synchronously with stdout and stderr captured as
bytes. Spawn failures (`FileNotFoundError`, `OSError`) propagate to the
service, which maps them to library errors.
"""

from __future__ import annotations

import logging
import subprocess
from typing import Mapping, Sequence

from zenity_bridge.core.interfaces.runner import ProcessOutcome, ProcessRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunner):
    """Blocking runner backed by `subprocess.run`."""

    def run(self, argv: Sequence[str], *, env: Mapping[str, str] | None = None) -> ProcessOutcome:
        logger.debug("Running %s", list(argv))
        proc = subprocess.run(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
            env=dict(env) if env is not None else None,
        )
        logger.debug("Command %s exited with code %s", argv[0], proc.returncode)
        return ProcessOutcome(
            returncode=proc.returncode,
            stdout=proc.stdout or b"",
            stderr=proc.stderr or b"",
        )
