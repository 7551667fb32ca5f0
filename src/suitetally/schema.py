"""Generate JSON Schema for the outcome tree YAML format."""

from __future__ import annotations

import json
from pathlib import Path

from suitetally.config import ResultConfig


def generate_json_schema() -> dict:
    return ResultConfig.model_json_schema()


def write_json_schema(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")
    return path
