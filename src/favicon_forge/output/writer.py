from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from favicon_forge.data.artifacts import Artifact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteRecord:
    artifact_name: str
    elapsed_ms: float


class ArtifactWriteError(RuntimeError):
    def __init__(self, artifact_name: str, path: Path) -> None:
        super().__init__(f"failed to write {artifact_name} to {path}")
        self.artifact_name = artifact_name
        self.path = path


async def _write_one(dest: Path, artifact: Artifact) -> WriteRecord:
    target = dest / artifact.name
    start = time.perf_counter()
    try:
        await asyncio.to_thread(target.write_bytes, artifact.contents)
    except OSError as exc:
        raise ArtifactWriteError(artifact.name, target) from exc
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return WriteRecord(artifact_name=artifact.name, elapsed_ms=round(elapsed_ms, 3))


async def write_artifacts(artifacts: Iterable[Artifact], destination: str | Path) -> list[WriteRecord]:
    """
    Write all artifacts under `destination` concurrently.

    The directory is created if missing. One failed write fails the whole
    batch and cancels the writes still in flight; files that already landed
    are left on disk.
    """
    dest = Path(destination)
    await asyncio.to_thread(dest.mkdir, parents=True, exist_ok=True)

    try:
        async with asyncio.TaskGroup() as tg:
            tasks = [tg.create_task(_write_one(dest, artifact)) for artifact in artifacts]
    except ExceptionGroup as group:
        # Surface one error to the caller instead of the task group wrapper.
        failed = group.exceptions[0]
        logger.error("artifact batch aborted: %s", failed)
        raise failed

    return [task.result() for task in tasks]
