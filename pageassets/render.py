"""Markup templates for resolved resources.

The emitted strings are consumed verbatim by page scripts (the ``loaded``
attribute on scripts, the preload-and-swap pattern on styles), so tag names,
attribute names and punctuation must not drift.
"""

from __future__ import annotations

from typing import Callable, Dict, Protocol

from .encoding import content_text, data_uri
from .models import LoadTiming, RenderMode, ResourceCategory
from .paths import extension_of, stem_of

_MEDIA_TAGS: Dict[str, str] = {
    "png": "img",
    "jpg": "img",
    "jpeg": "img",
    "tiff": "img",
    "bmp": "img",
    "avif": "img",
    "apng": "img",
    "gif": "img",
    "svg": "img",
    "webp": "img",
    "ico": "img",
    "mp4": "video",
    "webm": "video",
    "ogg": "video",
    "3gp": "video",
    "mov": "video",
    "mpeg": "video",
    "mp3": "audio",
    "wav": "audio",
    "flac": "audio",
    "aac": "audio",
    "m4a": "audio",
    "opus": "audio",
}

SCRIPT_ONLOAD = "this.onload=null;this.setAttribute(\"loaded\", \"true\")"
STYLE_SWAP_ONLOAD = "this.onload=null;this.rel='stylesheet'"


class Renderable(Protocol):
    filename: str
    relative_path: str
    content: str | bytes
    category: ResourceCategory
    load_timing: LoadTiming


def media_tag(filename: str) -> str:
    """Return the HTML element used to embed a media file."""
    return _MEDIA_TAGS.get(extension_of(filename).lower(), "img")


def loading_attribute(timing: LoadTiming) -> str:
    if timing is LoadTiming.DEFAULT:
        return ""
    return "loading='eager'" if timing is LoadTiming.DEFER else "loading='lazy'"


def _font_face(family: str, source: str) -> str:
    return f"<style>@font-face{{font-family:'{family}';src:url({source}) format('woff2');}}</style>"


def _inline_style(resource: Renderable) -> str:
    return f"<style>{content_text(resource.content)}</style>"


def _inline_script(resource: Renderable) -> str:
    return f"<script {resource.load_timing.value}>{content_text(resource.content)}</script>"


def _inline_media(resource: Renderable) -> str:
    return f'<{media_tag(resource.filename)} src="{data_uri(resource.filename, resource.content)}"/>'


def _inline_html(resource: Renderable) -> str:
    return content_text(resource.content)


def _inline_font(resource: Renderable) -> str:
    return _font_face(resource.filename, data_uri(resource.filename, resource.content))


def _reference_style(resource: Renderable, path: str) -> str:
    if resource.load_timing is LoadTiming.ASYNC:
        return (
            f'<link rel="preload" href="{path}" as="style" onload="{STYLE_SWAP_ONLOAD}">'
            f'<noscript><link rel="stylesheet" href="{path}"></noscript>'
        )
    return f'<link rel="stylesheet" href="{path}">'


def _reference_script(resource: Renderable, path: str) -> str:
    script_id = f"{stem_of(resource.relative_path)}-script"
    return (
        f'<script {resource.load_timing.value} id="{script_id}" src="{path}" '
        f"onload='{SCRIPT_ONLOAD}'></script>"
    )


def _reference_media(resource: Renderable, path: str) -> str:
    attribute = loading_attribute(resource.load_timing)
    suffix = f" {attribute}" if attribute else ""
    return f'<{media_tag(resource.filename)} src="{path}"{suffix}/>'


def _reference_html(resource: Renderable, path: str) -> str:
    return f'<include src="{path}"></include>'


def _reference_font(resource: Renderable, path: str) -> str:
    return _font_face(resource.filename, f"'{path}'")


_INLINE_RENDERERS: Dict[ResourceCategory, Callable[[Renderable], str]] = {
    ResourceCategory.STYLE: _inline_style,
    ResourceCategory.SCRIPT: _inline_script,
    ResourceCategory.MEDIA: _inline_media,
    ResourceCategory.HTML_FRAGMENT: _inline_html,
    ResourceCategory.FONT: _inline_font,
}

_REFERENCE_RENDERERS: Dict[ResourceCategory, Callable[[Renderable, str], str]] = {
    ResourceCategory.STYLE: _reference_style,
    ResourceCategory.SCRIPT: _reference_script,
    ResourceCategory.MEDIA: _reference_media,
    ResourceCategory.HTML_FRAGMENT: _reference_html,
    ResourceCategory.FONT: _reference_font,
}


def render_markup(resource: Renderable, mode: RenderMode, path: str = "") -> str:
    """Return the markup for ``resource`` in ``mode``.

    ``path`` is only used in reference mode. OTHER resources and suppressed
    resources render as an empty string.
    """
    if mode is RenderMode.INLINE:
        inline_renderer = _INLINE_RENDERERS.get(resource.category)
        return inline_renderer(resource) if inline_renderer else ""
    if mode is RenderMode.REFERENCE:
        reference_renderer = _REFERENCE_RENDERERS.get(resource.category)
        return reference_renderer(resource, path) if reference_renderer else ""
    return ""


__all__ = ["loading_attribute", "media_tag", "render_markup"]
