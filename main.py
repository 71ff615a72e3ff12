"""Development entry point (no install).

Lets you run the CLI with `python main.py ...` from a checkout: the code
lives under `src/`, so without an editable install Python cannot find
`zenity_bridge`.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from zenity_bridge.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
