# deezer_metadata/io/jsonl.py

"""JSONL append helpers for fetched records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def append_jsonl_line(path: Path, obj: dict[str, Any]) -> None:
    """Append a single JSON object as one line to a JSONL file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, ensure_ascii=False) + "\n")


def append_record(path: Path, record: BaseModel) -> None:
    """Append a record, keyed by its wire names, as one JSON line."""
    append_jsonl_line(path, record.model_dump(mode="json", by_alias=True))
