"""Adapters to the outside world (processes, files)."""

from zenity_bridge.adapters.json_exporter import export_result_json, result_to_json
from zenity_bridge.adapters.subprocess_runner import SubprocessRunner

__all__ = [
    "SubprocessRunner",
    "export_result_json",
    "result_to_json",
]
