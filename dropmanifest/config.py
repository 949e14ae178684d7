# dropmanifest/config.py

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from internal.engine.factory import ENGINES
from internal.models.errors import ConfigError


def default_engine() -> str:
    return os.environ.get("DROPMANIFEST_ENGINE") or "cli"


def default_docker_binary() -> str:
    return os.environ.get("DROPMANIFEST_DOCKER_BINARY") or "docker"


def default_host() -> str:
    return os.environ.get("DOCKER_HOST", "")


def _path_or_none(value: str) -> Optional[Path]:
    value = (value or "").strip()
    return Path(value).expanduser() if value else None


def _timeout(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if value <= 0:
        raise ConfigError(f"--timeout must be positive, got {value}")
    return value


@dataclass(frozen=True)
class BuildConfig:
    images: Path
    registry: str
    tag: str
    output: Path
    files: Optional[Path]
    engine: str
    docker_binary: str
    host: Optional[str]
    timeout: Optional[float]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "BuildConfig":
        for flag in ("images", "registry", "tag", "output"):
            if not (getattr(args, flag, "") or "").strip():
                raise ConfigError(f"--{flag} must be set")
        if args.engine not in ENGINES:
            raise ConfigError(f"--engine must be one of {', '.join(ENGINES)}, got {args.engine!r}")

        return cls(
            images=Path(args.images).expanduser(),
            registry=args.registry,
            tag=args.tag,
            output=Path(args.output).expanduser(),
            files=_path_or_none(args.files),
            engine=args.engine,
            docker_binary=args.docker_binary,
            host=args.host or None,
            timeout=_timeout(args.timeout),
        )


@dataclass(frozen=True)
class SnapshotConfig:
    host: Optional[str]
    output: Optional[Path]
    timeout: Optional[float]

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "SnapshotConfig":
        return cls(
            host=args.host or None,
            output=_path_or_none(args.output),
            timeout=_timeout(args.timeout),
        )
