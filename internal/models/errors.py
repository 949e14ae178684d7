# internal/models/errors.py

from __future__ import annotations


class DropManifestError(RuntimeError):
    exit_code = 1


class ConfigError(DropManifestError):
    """Required input missing, unreadable or malformed."""

    exit_code = 2


class EngineError(DropManifestError):
    """A pull/run/inspect call against the container engine failed."""

    def __init__(self, stage: str, image: str, cause: object) -> None:
        self.stage = stage
        self.image = image
        self.cause = cause
        target = f" {image}" if image else ""
        super().__init__(f"Error during {stage}{target}: {cause}")


class SerializationError(DropManifestError):
    pass
