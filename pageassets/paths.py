"""Path helpers for export-relative resource locations.

All paths handled here are POSIX-style and relative to the export root. The
root itself is represented by :data:`ROOT`.
"""

from __future__ import annotations

import posixpath
import re
from pathlib import PurePosixPath
from typing import List

ROOT = "."

_WHITESPACE_RE = re.compile(r"\s+")


def to_unix_style(path: str) -> str:
    """Replace Windows separators with forward slashes."""
    return path.replace("\\", "/")


def to_web_style(path: str) -> str:
    """Return a lowercase, forward-slash path with whitespace replaced by dashes."""
    return _WHITESPACE_RE.sub("-", to_unix_style(path).strip()).lower()


def extension_of(filename: str) -> str:
    """Return the extension of ``filename`` without the dot ("" when absent)."""
    return PurePosixPath(to_unix_style(filename)).suffix.lstrip(".")


def stem_of(filename: str) -> str:
    """Return the final path component without its extension."""
    return PurePosixPath(to_unix_style(filename)).stem


def _normalised_parts(path: str) -> List[str]:
    stack: List[str] = []
    for part in PurePosixPath(to_unix_style(path)).parts:
        if part in ("", ".", "/"):
            continue
        if part == "..":
            if stack:
                stack.pop()
            continue
        stack.append(part)
    return stack


def relative_to_root(anchor: str | None) -> str:
    """Return the walk from ``anchor`` (a directory) back to the export root."""
    if not anchor:
        return ""
    return "/".join([".."] * len(_normalised_parts(anchor)))


def join_from_anchor(anchor: str | None, relative_path: str) -> str:
    """Return ``relative_path`` as seen from the ``anchor`` directory."""
    target = "/".join(_normalised_parts(relative_path))
    to_root = relative_to_root(anchor)
    if not to_root:
        return target
    return posixpath.join(to_root, target)


def relative_between(from_directory: str, to_path: str) -> str:
    """Return ``to_path`` relative to ``from_directory``; both are root-relative."""
    source = _normalised_parts(from_directory)
    target = _normalised_parts(to_path)
    common = 0
    while common < len(source) and common < len(target) and source[common] == target[common]:
        common += 1
    parts = [".."] * (len(source) - common) + target[common:]
    return "/".join(parts) or ROOT


__all__ = [
    "ROOT",
    "extension_of",
    "join_from_anchor",
    "relative_between",
    "relative_to_root",
    "stem_of",
    "to_unix_style",
    "to_web_style",
]
