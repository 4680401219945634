"""Best-effort minification of style and script resources."""

from __future__ import annotations

import asyncio
import re
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

import csscompressor
import htmlmin
import jsmin

from .logging import get_logger
from .models import ResourceCategory

logger = get_logger("minify")

_NEWLINES_RE = re.compile(r"[\n\r]+")
_STYLE_BODY_RE = re.compile(r"(<style[^>]*>)(.*?)(</style>)", re.IGNORECASE | re.DOTALL)
_SCRIPT_BODY_RE = re.compile(r"(<script[^>]*>)(.*?)(</script>)", re.IGNORECASE | re.DOTALL)

_WRAPPER_TAGS = {
    ResourceCategory.STYLE: ("<style>", "</style>"),
    ResourceCategory.SCRIPT: ("<script>", "</script>"),
}

_CATEGORY_LABELS = {
    ResourceCategory.STYLE: "CSS",
    ResourceCategory.SCRIPT: "JS",
}


@dataclass(frozen=True)
class MinifyResult:
    """Outcome of a minifier call: either ``content`` or an ``error`` reason."""

    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None

    @classmethod
    def success(cls, content: str) -> "MinifyResult":
        return cls(content=content)

    @classmethod
    def failure(cls, reason: str) -> "MinifyResult":
        return cls(error=reason)


class Minifier(Protocol):
    """Minifies an HTML snippet, optionally including its inline CSS/JS."""

    async def minify(self, markup: str, *, minify_css: bool, minify_js: bool) -> MinifyResult:
        """Return the minified markup or the reason minification failed."""


class HtmlMinifier:
    """Minifier backed by htmlmin, csscompressor and jsmin."""

    def __init__(self, *, remove_comments: bool = True, collapse_whitespace: bool = True) -> None:
        self.remove_comments = remove_comments
        self.collapse_whitespace = collapse_whitespace

    async def minify(self, markup: str, *, minify_css: bool, minify_js: bool) -> MinifyResult:
        loop = asyncio.get_running_loop()
        try:
            minified = await loop.run_in_executor(
                None, self._minify_sync, markup, minify_css, minify_js
            )
        except Exception as exc:
            return MinifyResult.failure(f"{type(exc).__name__}: {exc}")
        return MinifyResult.success(minified)

    def _minify_sync(self, markup: str, minify_css: bool, minify_js: bool) -> str:
        if minify_css:
            markup = _STYLE_BODY_RE.sub(
                lambda match: match.group(1) + csscompressor.compress(match.group(2)) + match.group(3),
                markup,
            )
        if minify_js:
            markup = _SCRIPT_BODY_RE.sub(
                lambda match: match.group(1)
                + jsmin.jsmin(match.group(2), quote_chars="'\"`")
                + match.group(3),
                markup,
            )
        return htmlmin.minify(
            markup,
            remove_comments=self.remove_comments,
            remove_empty_space=self.collapse_whitespace,
        )


def strip_newlines(content: str) -> str:
    """Fallback transform: delete every run of newline/carriage-return characters."""
    return _NEWLINES_RE.sub("", content)


async def minify_content(
    content: str | bytes,
    category: ResourceCategory,
    minifier: Minifier,
    *,
    warn: Callable[[str], None] | None = None,
) -> str | bytes:
    """Minify style or script ``content``; anything else is returned untouched.

    The content is wrapped in a throwaway ``<style>``/``<script>`` tag, passed
    through ``minifier`` and unwrapped again. When the minifier fails, a
    warning is emitted once and newlines are stripped instead.
    """
    wrapper = _WRAPPER_TAGS.get(category)
    if wrapper is None or not isinstance(content, str):
        return content

    open_tag, close_tag = wrapper
    is_script = category is ResourceCategory.SCRIPT
    result = await minifier.minify(
        f"{open_tag}{content}{close_tag}",
        minify_css=not is_script,
        minify_js=is_script,
    )
    if result.ok:
        return result.content.replace(open_tag, "", 1).replace(close_tag, "", 1)

    (warn or logger.warning)(f"Unable to minify {_CATEGORY_LABELS[category]} file.")
    logger.debug("Minifier failure: %s", result.error)
    return strip_newlines(content)


__all__ = ["HtmlMinifier", "MinifyResult", "Minifier", "minify_content", "strip_newlines"]
