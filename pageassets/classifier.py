"""Extension-based resource classification."""

from __future__ import annotations

from typing import Dict, FrozenSet

from .mime import normalise_extension
from .models import ResourceCategory
from .registry import DirectoryLayout, DirectoryProvider

_MEDIA_EXTENSIONS: FrozenSet[str] = frozenset(
    {
        "png",
        "jpg",
        "jpeg",
        "gif",
        "svg",
        "webp",
        "ico",
        "mp4",
        "webm",
        "ogg",
        "mp3",
        "wav",
        "flac",
        "aac",
        "m4a",
        "opus",
    }
)
_SCRIPT_EXTENSIONS: FrozenSet[str] = frozenset({"js", "ts"})
_STYLE_EXTENSIONS: FrozenSet[str] = frozenset({"css", "scss", "sass", "less"})
_HTML_EXTENSIONS: FrozenSet[str] = frozenset({"html", "htm"})
_FONT_EXTENSIONS: FrozenSet[str] = frozenset({"ttf", "woff", "woff2", "eot", "otf"})

_EXTENSION_CATEGORIES: Dict[str, ResourceCategory] = {}
for _extensions, _category in (
    (_MEDIA_EXTENSIONS, ResourceCategory.MEDIA),
    (_SCRIPT_EXTENSIONS, ResourceCategory.SCRIPT),
    (_STYLE_EXTENSIONS, ResourceCategory.STYLE),
    (_HTML_EXTENSIONS, ResourceCategory.HTML_FRAGMENT),
    (_FONT_EXTENSIONS, ResourceCategory.FONT),
):
    for _extension in _extensions:
        _EXTENSION_CATEGORIES[_extension] = _category

_DEFAULT_LAYOUT = DirectoryLayout()


def classify(extension: str) -> ResourceCategory:
    """Return the category for ``extension``; unknown extensions are OTHER."""
    return _EXTENSION_CATEGORIES.get(normalise_extension(extension), ResourceCategory.OTHER)


def category_to_directory(
    category: ResourceCategory, provider: DirectoryProvider | None = None
) -> str:
    """Return the destination directory for ``category``."""
    return (provider or _DEFAULT_LAYOUT).directory_for(category)


__all__ = ["category_to_directory", "classify"]
