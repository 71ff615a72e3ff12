"""JSON serialization of results."""

from __future__ import annotations

import json
from datetime import date

from zenity_bridge.adapters.json_exporter import export_result_json, result_to_json
from zenity_bridge.core.domain.outputs import Affirmed, Unknown


def test_result_is_tagged_with_its_kind():
    payload = json.loads(result_to_json(Unknown(exit_code=5, stdout="", stderr="timeout")))
    assert payload == {"kind": "unknown", "exit_code": 5, "stdout": "", "stderr": "timeout"}


def test_dates_are_iso_formatted():
    payload = json.loads(result_to_json(Affirmed(content=date(2026, 10, 17))))
    assert payload == {"kind": "affirmed", "content": "2026-10-17"}


def test_export_writes_file(tmp_path):
    path = export_result_json(result=Affirmed(content="ñandú"), output_path=tmp_path / "out" / "r.json")
    text = path.read_text(encoding="utf-8")
    assert "ñandú" in text
    assert json.loads(text)["content"] == "ñandú"
