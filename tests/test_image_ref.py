"""Image reference formatting."""

from __future__ import annotations

import dataclasses

import pytest

from internal.models.image_ref import ImageReference


def test_canonical_form() -> None:
    ref = ImageReference("reg.example.com", "team/tool", "v1.2")
    assert ref.canonical() == "reg.example.com/team/tool:v1.2"
    assert str(ref) == ref.canonical()


def test_empty_fields_are_allowed() -> None:
    assert ImageReference("", "tool", "").canonical() == "/tool:"


def test_reference_is_immutable() -> None:
    ref = ImageReference("reg", "tool", "dev")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ref.tag = "prod"  # type: ignore[misc]


def test_equal_references_hash_alike() -> None:
    assert len({ImageReference("reg", "a", "dev"), ImageReference("reg", "a", "dev")}) == 1
