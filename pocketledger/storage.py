"""Reading and writing JSON data files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def load_json(path: str | Path) -> Any:
    """Parse the JSON document stored at ``path``.

    Raises ``FileNotFoundError`` when the file is missing and
    ``json.JSONDecodeError`` when its content is not valid JSON.
    """
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def save_json(path: str | Path, data: Any) -> None:
    """Write ``data`` to ``path`` as JSON indented by two spaces."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    Path(path).write_text(text, encoding="utf-8")