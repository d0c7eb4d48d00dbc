"""Utility functions for the application."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, Union

import orjson

from .candidates import MalformedSchemaError, coerce_schema
from .schemas import SourceSchema


class SchemaFileError(MalformedSchemaError):
    """Raised when a schema file does not contain valid JSON."""


def timestamp() -> str:
    """Return an ISO 8601 timestamp in UTC."""

    return datetime.now(timezone.utc).isoformat()


def append_jsonl(path: Path, record: Dict[str, Any]) -> None:
    """Append a dictionary as JSON to a JSONL file."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("ab") as fh:
        fh.write(orjson.dumps(record))
        fh.write(b"\n")


def load_jsonl(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield JSON objects from a JSONL file."""

    if not path.exists():
        return
    with path.open("rb") as fh:
        for line in fh:
            if not line.strip():
                continue
            yield orjson.loads(line)


def parse_schema(raw: Union[str, bytes]) -> SourceSchema:
    """Parse schema JSON text into a :class:`SourceSchema`."""

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise SchemaFileError(f"Schema is not valid JSON: {exc}") from exc
    return coerce_schema(data)


def load_schema(path: Union[str, Path]) -> SourceSchema:
    """Read and validate a schema JSON file."""

    return parse_schema(Path(path).read_bytes())


__all__ = [
    "SchemaFileError",
    "timestamp",
    "append_jsonl",
    "load_jsonl",
    "parse_schema",
    "load_schema",
]
