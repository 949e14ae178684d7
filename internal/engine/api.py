# internal/engine/api.py

from __future__ import annotations

from typing import Optional

import docker
from docker.errors import DockerException
from requests.exceptions import RequestException

from internal.models.errors import EngineError
from internal.models.image_ref import ImageReference

# The SDK lets transport errors from requests (timeouts, dropped sockets) through unwrapped.
ENGINE_FAILURES = (DockerException, RequestException)


def connect(base_url: Optional[str] = None, timeout: Optional[float] = None) -> docker.DockerClient:
    kwargs = {"timeout": timeout} if timeout is not None else {}
    try:
        if base_url:
            client = docker.DockerClient(base_url=base_url, **kwargs)
        else:
            client = docker.from_env(**kwargs)
        client.ping()
    except ENGINE_FAILURES as e:
        raise EngineError("connect", base_url or "", f"Docker is not accessible from this host: {e}")
    return client


class DockerAPIEngine:
    """Drives the engine through its HTTP API via the docker SDK."""

    def __init__(self, client: docker.DockerClient) -> None:
        self.client = client

    @classmethod
    def from_config(cls, base_url: Optional[str] = None, timeout: Optional[float] = None) -> "DockerAPIEngine":
        return cls(connect(base_url, timeout))

    def pull(self, ref: ImageReference) -> None:
        try:
            self.client.images.pull(f"{ref.registry}/{ref.name}", tag=ref.tag)
        except ENGINE_FAILURES as e:
            raise EngineError("pull", str(ref), e)

    def run_for_version_output(self, ref: ImageReference) -> str:
        try:
            out = self.client.containers.run(
                str(ref),
                ["--version"],
                remove=True,
                stdout=True,
                stderr=False,
            )
        except ENGINE_FAILURES as e:
            raise EngineError("version", str(ref), e)
        if isinstance(out, bytes):
            return out.decode(errors="replace")
        return str(out or "")

    def inspect_id(self, ref: ImageReference) -> str:
        try:
            return self.client.images.get(str(ref)).id
        except ENGINE_FAILURES as e:
            raise EngineError("inspect", str(ref), e)
