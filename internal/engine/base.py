# internal/engine/base.py

from __future__ import annotations

from typing import Protocol

from internal.models.image_ref import ImageReference


class EngineAdapter(Protocol):
    """
    The three engine capabilities a manifest build needs.

    Implementations block until the engine answers and raise EngineError on
    failure.
    """

    def pull(self, ref: ImageReference) -> None:
        ...

    def run_for_version_output(self, ref: ImageReference) -> str:
        ...

    def inspect_id(self, ref: ImageReference) -> str:
        ...
