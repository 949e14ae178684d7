# internal/models/image_ref.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageReference:
    registry: str
    name: str
    tag: str

    def canonical(self) -> str:
        # Engine argument and aggregation key.
        return f"{self.registry}/{self.name}:{self.tag}"

    def __str__(self) -> str:
        return self.canonical()
