# internal/engine/factory.py

from __future__ import annotations

from typing import Optional

from internal.engine.api import DockerAPIEngine
from internal.engine.base import EngineAdapter
from internal.engine.cli import DockerCLIEngine
from internal.models.errors import ConfigError

ENGINES = ("cli", "api")


def make_engine(
    kind: str,
    docker_binary: str = "docker",
    host: Optional[str] = None,
    timeout: Optional[float] = None,
) -> EngineAdapter:
    if kind == "cli":
        return DockerCLIEngine(binary=docker_binary, host=host, timeout=timeout)
    if kind == "api":
        return DockerAPIEngine.from_config(host, timeout)
    raise ConfigError(f"Unknown engine backend: {kind!r} (expected one of {', '.join(ENGINES)})")
