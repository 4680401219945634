"""Core vocabularies shared across pageassets components."""

from __future__ import annotations

from enum import Enum


class ResourceCategory(str, Enum):
    """Semantic type of an exported resource."""

    STYLE = "style"
    SCRIPT = "script"
    MEDIA = "media"
    HTML_FRAGMENT = "html"
    FONT = "font"
    OTHER = "other"


class InlinePolicy(str, Enum):
    """How a resource prefers to be embedded into generated pages."""

    AUTO_HEAD = "autohead"
    AUTO = "auto"
    INLINE = "inline"
    DOWNLOAD = "download"
    DOWNLOAD_HEAD = "downloadhead"
    INLINE_HEAD = "inlinehead"
    NONE = "none"

    @property
    def hoists_to_head(self) -> bool:
        """True when the markup belongs in the document head."""
        return self in (InlinePolicy.AUTO_HEAD, InlinePolicy.DOWNLOAD_HEAD, InlinePolicy.INLINE_HEAD)


class Mutability(str, Enum):
    """Lifecycle bucket of a resource across export runs."""

    DURABLE = "durable"
    MUTABLE = "mutable"
    EPHEMERAL = "ephemeral"
    CHILD = "child"


class LoadTiming(str, Enum):
    """Loading attribute applied to rendered markup."""

    DEFAULT = ""
    ASYNC = "async"
    DEFER = "defer"


class RenderMode(str, Enum):
    """Outcome of policy resolution for a single render."""

    INLINE = "inline"
    REFERENCE = "reference"
    SUPPRESSED = "suppressed"


def parse_enum(enum_type, value, default=None):
    """Look up an enum member by value or name, case-insensitively.

    Returns ``default`` when ``value`` is None or unknown.
    """
    if isinstance(value, enum_type):
        return value
    if value is None:
        return default
    lowered = str(value).strip().lower()
    key = lowered.replace("-", "").replace("_", "")
    for member in enum_type:
        if member.value == lowered or member.name.lower().replace("_", "") == key:
            return member
    return default


__all__ = [
    "InlinePolicy",
    "LoadTiming",
    "Mutability",
    "RenderMode",
    "ResourceCategory",
    "parse_enum",
]
