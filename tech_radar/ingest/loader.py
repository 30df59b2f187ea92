from __future__ import annotations

import json
from pathlib import Path
from typing import List

from tech_radar.models.document import RadarDocument
from tech_radar.models.profile import DEFAULT_RADAR_FILENAME
from tech_radar.validation.errors import ParseError

KNOWN_TOP_LEVEL_KEYS = {"quadrants", "entries", "rings", "title", "$schema"}


def find_radar_file(start_dir: str | Path, filename: str = DEFAULT_RADAR_FILENAME, max_up: int = 2) -> Path:
    """
    Search ``filename`` in start_dir or up to max_up parent levels.
    Returns the first match (nearest to start_dir).
    """
    p = Path(start_dir).expanduser().resolve()
    for _ in range(max_up + 1):
        cand = p / filename
        if cand.exists() and cand.is_file():
            return cand
        if p.parent == p:
            break
        p = p.parent
    raise FileNotFoundError(f"{filename} not found in '{start_dir}' or up to {max_up} parent levels.")


def load_radar_json(path: str | Path) -> RadarDocument:
    """
    Read and parse the radar file.

    Raises FileNotFoundError if the file does not exist and ParseError if the
    content is not JSON or its top level is not an object. Nothing else is
    checked here; unknown top-level keys only produce document warnings.
    """
    path = Path(path).expanduser().resolve()
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"Radar file not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path.name}: not valid UTF-8: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{path.name}: invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}") from exc

    if not isinstance(data, dict):
        raise ParseError(f"{path.name}: top-level JSON value must be an object, got {type(data).__name__}")

    warnings: List[str] = []
    extras = sorted(k for k in data if k not in KNOWN_TOP_LEVEL_KEYS)
    if extras:
        warnings.append(f"Unknown top-level key(s) ignored: {extras}")

    return RadarDocument(source_path=path, data=data, warnings=tuple(warnings))
