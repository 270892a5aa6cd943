"""Schema check for the edge-assoc YAML config file (apiVersion edgeassoc/v1)."""

from functools import lru_cache
import json
from pathlib import Path
from typing import Any

import jsonschema

from edgeassoc.errors import InvalidConfiguration

SCHEMA_PATH = Path(__file__).resolve().parent.parent / "schema" / "edge-assoc-v1.json"
MAX_REPORTED_ERRORS = 10


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


def schema_errors(data: Any) -> list[str]:
    """One 'key: message' line per violation, ordered by key path."""
    validator = jsonschema.Draft202012Validator(load_schema())
    lines = []
    for err in sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path))):
        where = ".".join(str(p) for p in err.absolute_path) or "(root)"
        lines.append(f"{where}: {err.message}")
    return lines


def validate_config_file(data: Any, field: str, source: str) -> None:
    """Raise InvalidConfiguration(field) listing what is wrong with the config loaded from source."""
    lines = schema_errors(data)
    if not lines:
        return
    shown = [f"  {i}. {line}" for i, line in enumerate(lines[:MAX_REPORTED_ERRORS], 1)]
    if len(lines) > MAX_REPORTED_ERRORS:
        shown.append(f"  ... and {len(lines) - MAX_REPORTED_ERRORS} more errors")
    raise InvalidConfiguration(field, "\n".join([f"{source} failed validation:", *shown]))
