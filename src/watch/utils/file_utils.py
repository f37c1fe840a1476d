# -*- coding: utf-8 -*-
"""JSON documents on disk: catalogs and settings files."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON object from ``path``.

    A missing or unreadable file raises ``OSError``. Content that is not a
    JSON object raises ``ValueError`` naming the file and the position of the
    syntax error.
    """
    file_path = Path(path)
    text = file_path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{file_path}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: expected a JSON object, got {type(data).__name__}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write ``data`` as indented UTF-8 JSON.

    The document is written to a sibling temp file first and moved into place,
    so a repository reading the same file never sees half a catalog.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = file_path.with_name(f".{file_path.name}.tmp")
    with tmp_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=False)
        handle.write("\n")
    os.replace(tmp_path, file_path)
    return file_path
