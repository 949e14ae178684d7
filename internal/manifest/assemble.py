# internal/manifest/assemble.py

from __future__ import annotations

from typing import Callable, Iterable, Optional

from internal.engine.base import EngineAdapter
from internal.manifest.version import extract_version
from internal.models.image_ref import ImageReference
from internal.models.schema import ManifestDocument


def assemble_manifest(
    image_names: Iterable[str],
    registry: str,
    tag: str,
    engine: EngineAdapter,
    drop_files: Optional[dict[str, str]] = None,
    progress: Optional[Callable[[ImageReference], None]] = None,
) -> ManifestDocument:
    """
    Pull, run and inspect every image in order and collect its version record.

    Any EngineError aborts the whole run: a manifest missing one of the
    requested images is not returned at all.
    """
    doc = ManifestDocument(drop_files=dict(drop_files or {}))

    for name in image_names:
        ref = ImageReference(registry=registry, name=name, tag=tag)
        if progress is not None:
            progress(ref)

        engine.pull(ref)
        output = engine.run_for_version_output(ref)
        image_id = engine.inspect_id(ref)

        doc.add(ref, extract_version(output, image_id))

    return doc
