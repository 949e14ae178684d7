# internal/scanner/docker_scan.py

from __future__ import annotations

import copy
import socket
from datetime import datetime, timezone
from typing import Optional

import docker

from internal.engine.api import ENGINE_FAILURES
from internal.models.errors import EngineError
from internal.models.schema import BASE_SNAPSHOT_SCHEMA


def _iso_utc_z(now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def scan_engine_state(
    client: docker.DockerClient,
    hostname: Optional[str] = None,
    now: Optional[datetime] = None,
) -> dict:
    """
    List every image and container the engine knows about.

    Records are the engine's own list-API summaries, passed through as-is.
    """
    payload = copy.deepcopy(BASE_SNAPSHOT_SCHEMA)
    payload["hostname"] = hostname if hostname is not None else socket.gethostname()
    payload["date"] = _iso_utc_z(now)

    try:
        payload["images"] = client.api.images()
        payload["containers"] = client.api.containers(all=True)
    except ENGINE_FAILURES as e:
        raise EngineError("snapshot", "", e)

    return payload
