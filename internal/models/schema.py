# internal/models/schema.py

from __future__ import annotations

from dataclasses import dataclass, field

from internal.models.image_ref import ImageReference

BASE_SNAPSHOT_SCHEMA = {
    "hostname": None,
    # RFC3339/ISO8601 UTC with Z suffix
    "date": None,
    "images": [],
    "containers": [],
}


@dataclass(frozen=True)
class VersionRecord:
    app_version: str = ""
    git_ref: str = ""
    built_by: str = ""
    image_id: str = ""

    def to_dict(self) -> dict:
        return {
            "app_version": self.app_version,
            "git_ref": self.git_ref,
            "built_by": self.built_by,
            "image_id": self.image_id,
        }


@dataclass
class ManifestDocument:
    """
    Aggregate output of one build run.

    `docker_images` maps canonical image strings to the records collected for
    them, in processing order. A name requested twice gets two records.
    """

    drop_files: dict[str, str] = field(default_factory=dict)
    docker_images: dict[str, list[VersionRecord]] = field(default_factory=dict)

    def add(self, ref: ImageReference, record: VersionRecord) -> None:
        self.docker_images.setdefault(ref.canonical(), []).append(record)

    def to_dict(self) -> dict:
        return {
            "drop_files": dict(self.drop_files),
            "docker_images": {
                key: [r.to_dict() for r in records]
                for key, records in self.docker_images.items()
            },
        }
