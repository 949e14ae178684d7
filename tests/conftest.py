from __future__ import annotations

from typing import Callable, Optional

import pytest

from internal.models.errors import EngineError
from internal.models.image_ref import ImageReference


class FakeEngine:
    """Deterministic engine keyed by image name; records every call."""

    def __init__(self, outputs: dict[str, tuple[str, str]], fail: Optional[tuple[str, str]] = None) -> None:
        self.outputs = outputs
        self.fail = fail
        self.calls: list[tuple[str, str]] = []

    def _call(self, stage: str, ref: ImageReference) -> None:
        self.calls.append((stage, str(ref)))
        if self.fail == (stage, ref.name):
            raise EngineError(stage, str(ref), "boom")

    def pull(self, ref: ImageReference) -> None:
        self._call("pull", ref)

    def run_for_version_output(self, ref: ImageReference) -> str:
        self._call("version", ref)
        return self.outputs[ref.name][0]

    def inspect_id(self, ref: ImageReference) -> str:
        self._call("inspect", ref)
        return self.outputs[ref.name][1]


@pytest.fixture
def fake_engine() -> Callable[..., FakeEngine]:
    """Build a FakeEngine from {name: (version_text, image_id)}."""
    return FakeEngine


@pytest.fixture
def tool_outputs() -> dict[str, tuple[str, str]]:
    return {
        "toolA": ("App-Version: 0.1.0\n", "sha:111"),
        "toolB": ("App-Version: 0.2.0\nGit-Ref: deadbeef\n", "sha:222"),
    }
