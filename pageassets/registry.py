"""Destination directories and the lifecycle registry of exported resources."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol

from .logging import get_logger
from .models import Mutability, ResourceCategory

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .resource import Resource

logger = get_logger("registry")


class DirectoryProvider(Protocol):
    """Supplies one destination directory per resource category."""

    def directory_for(self, category: ResourceCategory) -> str:
        """Return the export-relative directory for ``category``."""


@dataclass(frozen=True)
class DirectoryLayout:
    """Default export layout; every category maps to a non-empty directory."""

    library: str = "lib"
    styles: str = "lib/styles"
    scripts: str = "lib/scripts"
    media: str = "lib/media"
    html: str = "lib/html"
    fonts: str = "lib/fonts"

    def directory_for(self, category: ResourceCategory) -> str:
        field_name = _CATEGORY_DIRECTORIES[category]
        return getattr(self, field_name)


_CATEGORY_DIRECTORIES: Dict[ResourceCategory, str] = {
    ResourceCategory.STYLE: "styles",
    ResourceCategory.SCRIPT: "scripts",
    ResourceCategory.MEDIA: "media",
    ResourceCategory.HTML_FRAGMENT: "html",
    ResourceCategory.FONT: "fonts",
    ResourceCategory.OTHER: "library",
}


class ResourceRegistry:
    """Partitions registered resources by mutability.

    Child resources are never stored here; they live only in their parent's
    ``children`` list. Every other resource sits in exactly one mutability
    bucket and in :attr:`all`.
    """

    def __init__(
        self,
        layout: DirectoryProvider | None = None,
        *,
        reference_time: Optional[float] = None,
    ) -> None:
        self.layout: DirectoryProvider = layout or DirectoryLayout()
        self.reference_time = reference_time if reference_time is not None else time.time()
        self.durable: List["Resource"] = []
        self.mutable: List["Resource"] = []
        self.ephemeral: List["Resource"] = []
        self.all: List["Resource"] = []

    def directory_for(self, category: ResourceCategory) -> str:
        return self.layout.directory_for(category)

    def register(self, resource: "Resource") -> None:
        """Add ``resource`` to its mutability bucket; children are ignored."""
        bucket = self._bucket(resource.mutability)
        if bucket is None:
            return
        bucket.append(resource)
        self.all.append(resource)
        logger.debug("Registered %s resource %s", resource.mutability.value, resource.relative_path)

    def by_priority(self) -> List["Resource"]:
        """Return all resources ordered by load priority (lower loads first)."""
        return sorted(self.all, key=lambda resource: resource.load_priority)

    def discard_ephemeral(self) -> List["Resource"]:
        """Forget resources that only exist for the current export and return them."""
        removed = list(self.ephemeral)
        self.ephemeral.clear()
        removed_ids = {id(resource) for resource in removed}
        self.all = [resource for resource in self.all if id(resource) not in removed_ids]
        return removed

    def _bucket(self, mutability: Mutability) -> Optional[List["Resource"]]:
        if mutability is Mutability.DURABLE:
            return self.durable
        if mutability is Mutability.MUTABLE:
            return self.mutable
        if mutability is Mutability.EPHEMERAL:
            return self.ephemeral
        return None


__all__ = ["DirectoryLayout", "DirectoryProvider", "ResourceRegistry"]
