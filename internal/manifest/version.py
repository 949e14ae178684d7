# internal/manifest/version.py

from __future__ import annotations

from internal.models.schema import VersionRecord

# Marker line prefix -> VersionRecord field.
_MARKERS = {
    "App-Version: ": "app_version",
    "Git-Ref: ": "git_ref",
    "Built-By: ": "built_by",
}


def extract_version(output: str, image_id: str) -> VersionRecord:
    """
    Parse the text printed by `<image> --version` into a VersionRecord.

    Lines without a recognised prefix are ignored. When a prefix repeats, the
    last line wins. `image_id` comes from a separate inspect call and is never
    read from the output.
    """
    found: dict[str, str] = {}
    for line in output.splitlines():
        for prefix, key in _MARKERS.items():
            if line.startswith(prefix):
                found[key] = line[len(prefix):].strip()
    return VersionRecord(image_id=image_id, **found)
