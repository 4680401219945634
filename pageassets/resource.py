"""The exported resource entity."""

from __future__ import annotations

import posixpath
import time
from pathlib import Path
from typing import Callable, List, Optional

from .config import ExportOptions
from .encoding import content_text, data_uri
from .logging import get_logger
from .materialize import FileMaterializer, Materializer
from .minify import HtmlMinifier, Minifier, minify_content
from .models import InlinePolicy, LoadTiming, Mutability, RenderMode, ResourceCategory
from .paths import extension_of, join_from_anchor, to_unix_style, to_web_style
from .policy import is_inline, is_reference, resolve_mode
from .registry import ResourceRegistry
from .render import render_markup
from .styles import StyleDependencyResolver, StyleResolver

logger = get_logger("resource")

DEFAULT_LOAD_PRIORITY = 100


class Resource:
    """A single style, script, media file, HTML fragment, font or other file.

    Construction registers the resource with ``registry`` (child resources
    excepted). ``load()`` resolves style children and minifies; ``render()``
    produces page markup without touching the content; ``materialize()``
    writes the file unless it resolves to inline markup.

    ``load_priority`` is an ordering hint for callers: lower values load first.
    """

    def __init__(
        self,
        filename: str,
        content: str | bytes,
        category: ResourceCategory,
        inline_policy: InlinePolicy,
        minify: bool,
        mutability: Mutability,
        *,
        registry: ResourceRegistry,
        load_timing: LoadTiming = LoadTiming.DEFAULT,
        load_priority: int = DEFAULT_LOAD_PRIORITY,
        online_url: Optional[str] = None,
        options: ExportOptions | None = None,
        source_path: Path | None = None,
        minifier: Minifier | None = None,
        materializer: Materializer | None = None,
        style_resolver: StyleResolver | None = None,
        warn: Callable[[str], None] | None = None,
    ) -> None:
        self.options = options or ExportOptions()
        if self.options.web_style_paths:
            filename = to_web_style(filename)
        self.filename = to_unix_style(filename)
        self.content = content
        # Untouched payload; every load() resolves and minifies from this.
        self._source_content = content
        self.category = category
        self.inline_policy = inline_policy
        self.mutability = mutability
        self.minify = minify
        self.load_timing = load_timing
        self.load_priority = load_priority
        self.online_url = online_url
        self.source_path = source_path
        self.children: List[Resource] = []
        self.registry = registry
        self.directory = registry.directory_for(category)
        self._minifier = minifier
        self._materializer = materializer
        self._style_resolver = style_resolver
        self._warn = warn

        if mutability is Mutability.DURABLE:
            self.modified_time = registry.reference_time
        else:
            self.modified_time = time.time()

        registry.register(self)

    def __repr__(self) -> str:
        return (
            f"Resource({self.relative_path!r}, category={self.category.value!r}, "
            f"policy={self.inline_policy.value!r}, mutability={self.mutability.value!r})"
        )

    @property
    def relative_path(self) -> str:
        """Export-relative location of the materialized file."""
        return posixpath.join(self.directory, self.filename)

    @property
    def extension(self) -> str:
        return extension_of(self.filename)

    def text(self) -> str:
        return content_text(self.content)

    def data_uri(self) -> str:
        return data_uri(self.filename, self.content)

    # ------------------------------------------------------------------
    # Policy resolution

    def mode(self, options: ExportOptions | None = None) -> RenderMode:
        return resolve_mode(self.inline_policy, self.category, options or self.options)

    def is_inline(self, options: ExportOptions | None = None) -> bool:
        return is_inline(self.inline_policy, self.category, options or self.options)

    def is_reference(self, options: ExportOptions | None = None) -> bool:
        return is_reference(self.inline_policy, self.category, options or self.options)

    # ------------------------------------------------------------------
    # Rendering

    def asset_path(self, anchor: str | None = None) -> str:
        """Return the path used to reference this resource from ``anchor``.

        Inline resources have no path. The result walks from ``anchor`` up to
        the export root and down to :attr:`relative_path`.
        """
        if self.is_inline():
            return ""
        path = join_from_anchor(anchor, self.relative_path)
        if self.options.web_style_paths:
            path = to_web_style(path)
        return path

    def reference_path(self, anchor: str | None = None) -> str:
        """Like :meth:`asset_path`, substituting the online URL when offline copies are off."""
        if self.options.offline_resources is False and self.online_url:
            return self.online_url
        return self.asset_path(anchor)

    def render(self, options: ExportOptions | None = None, *, anchor: str | None = None) -> str:
        """Return the page markup for this resource; content is not modified."""
        if options is not None:
            self.options = options
        mode = self.mode()
        path = self.reference_path(anchor) if mode is RenderMode.REFERENCE else ""
        return render_markup(self, mode, path)

    # ------------------------------------------------------------------
    # Load phase

    async def load(self, options: ExportOptions | None = None) -> None:
        """Resolve style children and minify.

        Calling this twice re-resolves children and minifies again, starting
        from the content the resource was constructed with.
        """
        if options is not None:
            self.options = options

        self.content = self._source_content
        if self.category is ResourceCategory.STYLE and isinstance(self.content, str):
            self.children = []
            resolver = self._style_resolver or StyleDependencyResolver()
            self.content = await resolver.resolve(self)

        if self.minify:
            await self.minify_content()

    async def minify_content(self) -> None:
        """Minify style or script content in place; HTML fragments are never minified."""
        if self.category is ResourceCategory.HTML_FRAGMENT:
            return
        minifier = self._minifier or HtmlMinifier()
        self.content = await minify_content(
            self.content, self.category, minifier, warn=self._warn
        )

    def spawn_child(
        self,
        filename: str,
        content: str | bytes,
        category: ResourceCategory,
        inline_policy: InlinePolicy,
        *,
        load_timing: LoadTiming = LoadTiming.DEFAULT,
        source_path: Path | None = None,
    ) -> "Resource":
        """Create a child resource owned by this one; it is not registered globally."""
        child = Resource(
            filename,
            content,
            category,
            inline_policy,
            False,
            Mutability.CHILD,
            registry=self.registry,
            load_timing=load_timing,
            load_priority=self.load_priority,
            options=self.options,
            source_path=source_path,
            materializer=self._materializer,
            warn=self._warn,
        )
        self.children.append(child)
        return child

    # ------------------------------------------------------------------
    # Materialization

    async def materialize(self, target_directory: Path) -> List[Path]:
        """Write this resource and its children below ``target_directory``.

        Inline resources are skipped. Returns the paths actually written.
        """
        written: List[Path] = []
        if not self.is_inline():
            materializer = self._materializer or FileMaterializer()
            path = await materializer.materialize(self, Path(target_directory))
            if path is not None:
                written.append(path)
        for child in self.children:
            written.extend(await child.materialize(target_directory))
        return written


__all__ = ["DEFAULT_LOAD_PRIORITY", "Resource"]
