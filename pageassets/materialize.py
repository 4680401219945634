"""Writing exported resources to disk."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import Optional, Protocol

from .encoding import content_bytes
from .logging import get_logger

logger = get_logger("materialize")


class Downloadable(Protocol):
    """What a materializer needs to know about a resource."""

    filename: str
    relative_path: str
    content: str | bytes
    modified_time: float


class Materializer(Protocol):
    """Capability that physically writes a resource below a target directory."""

    async def materialize(self, resource: Downloadable, target_directory: Path) -> Optional[Path]:
        """Write ``resource`` and return the written path (None when skipped)."""


class FileMaterializer:
    """Writes resource bytes to ``target_directory / relative_path``.

    Files whose on-disk modification time is not older than the resource's
    ``modified_time`` are left alone unless ``overwrite`` is set.
    """

    def __init__(self, *, overwrite: bool = False) -> None:
        self.overwrite = overwrite

    async def materialize(self, resource: Downloadable, target_directory: Path) -> Optional[Path]:
        destination = Path(target_directory) / resource.relative_path
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._write, resource, destination)

    def _write(self, resource: Downloadable, destination: Path) -> Optional[Path]:
        if not self.overwrite and destination.exists():
            if destination.stat().st_mtime >= resource.modified_time:
                logger.debug("Skipping unchanged %s", destination)
                return None
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(content_bytes(resource.content))
        os.utime(destination, (resource.modified_time, resource.modified_time))
        logger.debug("Wrote %s", destination)
        return destination


__all__ = ["Downloadable", "FileMaterializer", "Materializer"]
