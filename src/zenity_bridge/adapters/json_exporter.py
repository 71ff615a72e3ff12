"""JSON export of dialog results.

- Lets shell scripts consume a result without parsing Rich output.
- Key order is stable so the output can be diffed or snapshotted.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def result_to_json(result: BaseModel) -> str:
    """Serialize a result (`Affirmed`, `Rejected`...) as UTF-8 friendly JSON."""

    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def export_result_json(*, result: BaseModel, output_path: Path) -> Path:
    """Write a result to ``output_path`` as JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(result_to_json(result) + "\n", encoding="utf-8")
    return output_path
