# internal/engine/cli.py

from __future__ import annotations

import subprocess
from typing import Optional

from internal.models.errors import EngineError
from internal.models.image_ref import ImageReference


class DockerCLIEngine:
    """Drives the engine through the `docker` binary."""

    def __init__(
        self,
        binary: str = "docker",
        host: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.binary = binary
        self.host = host
        self.timeout = timeout

    def _run(self, stage: str, ref: ImageReference, args: list[str], capture: bool) -> str:
        cmd = [self.binary, *(["-H", self.host] if self.host else []), *args]
        try:
            result = subprocess.run(
                cmd,
                check=True,
                timeout=self.timeout,
                # pull progress goes straight to the user's terminal
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.PIPE if capture else None,
            )
        except FileNotFoundError:
            raise EngineError(stage, str(ref), f"{self.binary!r} not found on PATH")
        except subprocess.TimeoutExpired:
            raise EngineError(stage, str(ref), f"timed out after {self.timeout}s")
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or b"").decode(errors="replace").strip()
            msg = f"exit status {e.returncode}"
            raise EngineError(stage, str(ref), f"{msg}: {detail}" if detail else msg)

        if not capture:
            return ""
        return result.stdout.decode(errors="replace")

    def pull(self, ref: ImageReference) -> None:
        self._run("pull", ref, ["pull", str(ref)], capture=False)

    def run_for_version_output(self, ref: ImageReference) -> str:
        return self._run("version", ref, ["run", "--rm", str(ref), "--version"], capture=True)

    def inspect_id(self, ref: ImageReference) -> str:
        out = self._run("inspect", ref, ["inspect", "--format", "{{.Id}}", str(ref)], capture=True)
        return out.strip()
