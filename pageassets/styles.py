"""Discovery of files referenced from style sheets via ``url(...)``."""

from __future__ import annotations

import asyncio
import re
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Protocol
from urllib.parse import unquote

from .classifier import classify
from .logging import get_logger
from .models import InlinePolicy, LoadTiming, RenderMode
from .paths import extension_of, relative_between

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .resource import Resource

logger = get_logger("styles")

CSS_URL_RE = re.compile(r"url\(\s*([\"']?)([^)\"']+)\1\s*\)", re.IGNORECASE)
_NON_LOCAL_PREFIXES = ("http:", "https:", "//", "data:", "blob:", "about:", "#", "mailto:")


class StyleResolver(Protocol):
    """Resolves the child resources of a style sheet during ``load()``."""

    async def resolve(self, resource: "Resource") -> str:
        """Populate ``resource.children`` and return the rewritten style text."""


def is_local_reference(reference: str) -> bool:
    reference = reference.strip()
    if not reference:
        return False
    return not reference.lower().startswith(_NON_LOCAL_PREFIXES)


class StyleDependencyResolver:
    """Turns local ``url(...)`` references into child resources.

    References are looked up next to the style's ``source_path`` or, when the
    style has none, below ``source_root``. Inline styles embed their children
    as data URIs; referenced styles point at the exported child files.
    """

    def __init__(self, source_root: Path | None = None) -> None:
        self.source_root = source_root

    async def resolve(self, resource: "Resource") -> str:
        text = resource.content
        if not isinstance(text, str):
            return text

        base = self._base_directory(resource)
        if base is None:
            return text

        references = {
            match.group(2).strip()
            for match in CSS_URL_RE.finditer(text)
            if is_local_reference(match.group(2))
        }
        if not references:
            return text

        loop = asyncio.get_running_loop()
        inline = resource.mode() is RenderMode.INLINE
        replacements: Dict[str, str] = {}
        for reference in sorted(references):
            candidate = base / unquote(reference.split("#", 1)[0].split("?", 1)[0])
            try:
                payload = await loop.run_in_executor(None, candidate.read_bytes)
            except OSError as exc:
                logger.debug("Skipping style reference %s: %s", reference, exc)
                continue
            child = resource.spawn_child(
                candidate.name,
                payload,
                classify(extension_of(candidate.name)),
                InlinePolicy.INLINE if inline else InlinePolicy.DOWNLOAD,
                load_timing=LoadTiming.DEFAULT,
                source_path=candidate,
            )
            if inline:
                replacements[reference] = child.data_uri()
            else:
                replacements[reference] = relative_between(
                    resource.directory, child.relative_path
                )

        if not replacements:
            return text

        def _rewrite(match: "re.Match[str]") -> str:
            reference = match.group(2).strip()
            replacement = replacements.get(reference)
            if replacement is None:
                return match.group(0)
            return f"url(\"{replacement}\")"

        return CSS_URL_RE.sub(_rewrite, text)

    def _base_directory(self, resource: "Resource") -> Optional[Path]:
        if resource.source_path is not None:
            return Path(resource.source_path).parent
        return self.source_root


__all__ = ["CSS_URL_RE", "StyleDependencyResolver", "StyleResolver", "is_local_reference"]
