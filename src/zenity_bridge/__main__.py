"""Run the CLI with `python -m zenity_bridge`."""

from __future__ import annotations

from zenity_bridge.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
