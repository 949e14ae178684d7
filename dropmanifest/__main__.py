#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import Any

from dropmanifest.config import (
    BuildConfig,
    SnapshotConfig,
    default_docker_binary,
    default_engine,
    default_host,
)
from internal.engine.api import connect
from internal.engine.factory import ENGINES, make_engine
from internal.loaders.inputs import dump_json, read_drop_files, read_image_names, write_json
from internal.manifest.assemble import assemble_manifest
from internal.models.errors import DropManifestError
from internal.models.image_ref import ImageReference
from internal.scanner.docker_scan import scan_engine_state


def _safe_print_json(obj: Any) -> None:
    """
    Prevent BrokenPipeError when piping JSON to tools like `head`.
    """
    text = dump_json(obj)
    try:
        sys.stdout.write(text)
        sys.stdout.flush()
    except BrokenPipeError:
        try:
            sys.stdout.close()
        except Exception:
            pass
        raise SystemExit(0)


def _report_progress(ref: ImageReference) -> None:
    print(f"Pulling {ref}", file=sys.stderr)


def cmd_build(args: argparse.Namespace) -> int:
    cfg = BuildConfig.from_args(args)

    images = read_image_names(cfg.images)
    drop_files = read_drop_files(cfg.files) if cfg.files else {}

    engine = make_engine(cfg.engine, docker_binary=cfg.docker_binary, host=cfg.host, timeout=cfg.timeout)
    doc = assemble_manifest(
        images,
        cfg.registry,
        cfg.tag,
        engine,
        drop_files=drop_files,
        progress=_report_progress,
    )

    out_path = write_json(cfg.output, doc.to_dict())
    print(
        f"Wrote manifest: {out_path} ({len(images)} images processed, {len(doc.docker_images)} distinct)",
        file=sys.stderr,
    )
    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    cfg = SnapshotConfig.from_args(args)

    client = connect(cfg.host, cfg.timeout)
    payload = scan_engine_state(client)

    if cfg.output is None:
        _safe_print_json(payload)
        return 0

    out_path = write_json(cfg.output, payload)
    print(f"Wrote snapshot: {out_path}", file=sys.stderr)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="dropmanifest",
        description="Build a version manifest for a set of container images, or snapshot engine state.",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    build = sub.add_parser("build", help="Pull each image, record its --version output and image ID.")
    build.add_argument("--images", default="", help="Path to a new-line delimited list of image names.")
    build.add_argument("--registry", default="", help="The registry to pull from.")
    build.add_argument("--tag", default="", help="The tag to pull.")
    build.add_argument("--output", default="", help="The file to write the JSON to.")
    build.add_argument(
        "--files",
        default="",
        help="JSON object of files to include in the manifest (drop_files). Empty if omitted.",
    )
    build.add_argument(
        "--engine",
        choices=list(ENGINES),
        default=default_engine(),
        help="Engine backend: the docker binary (cli) or the engine API (api).",
    )
    build.add_argument("--docker-binary", default=default_docker_binary(), help="docker executable for the cli backend.")
    build.add_argument("--host", default=default_host(), help="Engine address, e.g. unix:///var/run/docker.sock.")
    build.add_argument("--timeout", type=float, default=None, help="Per engine call timeout in seconds.")
    build.set_defaults(func=cmd_build)

    snapshot = sub.add_parser("snapshot", help="Dump all images and containers known to the engine.")
    snapshot.add_argument("--host", default=default_host(), help="Engine address. Defaults to the environment.")
    snapshot.add_argument("--output", default="", help="Write the snapshot here instead of stdout.")
    snapshot.add_argument("--timeout", type=float, default=None, help="Engine API timeout in seconds.")
    snapshot.set_defaults(func=cmd_snapshot)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except DropManifestError as e:
        print(str(e), file=sys.stderr)
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
