"""Generate JSON Schema and docs for the aver YAML config."""

from __future__ import annotations

import json
from pathlib import Path

from aver.config import AverConfig, ReporterType


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def generate_json_schema() -> dict:
    return AverConfig.model_json_schema()


def write_json_schema(path: Path) -> None:
    _ensure_parent(path)
    schema = generate_json_schema()
    path.write_text(json.dumps(schema, indent=2) + "\n")


def generate_schema_doc() -> str:
    schema = generate_json_schema()
    props = schema.get("properties", {})
    reporters = ", ".join(r.value for r in ReporterType)

    lines: list[str] = []
    lines.append("# aver YAML Schema")
    lines.append("")
    lines.append("This doc is generated from the Pydantic models.")
    lines.append("")
    lines.append("## Top-level keys")
    for key in props:
        if key == "reporter":
            lines.append(f"- `reporter`: string (optional) - one of: {reporters}")
        elif key == "debug_log":
            lines.append(
                "- `debug_log`: string (optional) - debug log path, ${VAR} expanded"
            )
        elif key == "verbose":
            lines.append("- `verbose`: boolean (optional) - also log to stderr")
        else:
            lines.append(f"- `{key}`")
    lines.append("")
    return "\n".join(lines)


def write_schema_doc(path: Path) -> None:
    _ensure_parent(path)
    path.write_text(generate_schema_doc())
