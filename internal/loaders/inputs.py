# internal/loaders/inputs.py

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from internal.models.errors import ConfigError, SerializationError


def read_image_names(path: Path) -> list[str]:
    """One image name per line. Empty lines are skipped; nothing else is trimmed."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Error reading images: {e}")
    return [line for line in text.splitlines() if line]


def read_drop_files(path: Path) -> dict[str, str]:
    try:
        d = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise ConfigError(f"Error reading files list: {e}")

    if not isinstance(d, dict):
        raise ConfigError(f"Error reading files list: {path}: root must be a JSON object.")
    bad = [k for k, v in d.items() if not isinstance(v, str)]
    if bad:
        raise ConfigError(f"Error reading files list: {path}: non-string values for {', '.join(sorted(bad))}")
    return d


def dump_json(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2, sort_keys=False) + "\n"
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Error marshalling JSON: {e}")


def write_json(path: Path, payload: Any) -> Path:
    text = dump_json(payload)
    out_path = Path(path).expanduser()
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        os.chmod(out_path, 0o644)
    except OSError as e:
        raise SerializationError(f"Error writing JSON file: {e}")
    return out_path
