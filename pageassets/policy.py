"""Inline/reference resolution for resource policies.

:func:`is_inline` and :func:`is_reference` are the only place the rendering
mode is decided. For every policy except ``none`` exactly one of them holds;
for ``none`` neither does and the resource is suppressed.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet

from .config import ExportOptions
from .models import InlinePolicy, RenderMode, ResourceCategory

_ALWAYS_INLINE: FrozenSet[InlinePolicy] = frozenset({InlinePolicy.INLINE, InlinePolicy.INLINE_HEAD})
_ALWAYS_REFERENCE: FrozenSet[InlinePolicy] = frozenset(
    {InlinePolicy.DOWNLOAD, InlinePolicy.DOWNLOAD_HEAD}
)
_OPTION_DRIVEN: FrozenSet[InlinePolicy] = frozenset({InlinePolicy.AUTO, InlinePolicy.AUTO_HEAD})

# OTHER has no inline flag, so auto-policy OTHER resources are always referenced.
_CATEGORY_FLAGS: Dict[ResourceCategory, Callable[[ExportOptions], bool]] = {
    ResourceCategory.STYLE: lambda options: options.inline_style,
    ResourceCategory.SCRIPT: lambda options: options.inline_script,
    ResourceCategory.MEDIA: lambda options: options.inline_media,
    ResourceCategory.HTML_FRAGMENT: lambda options: options.inline_html,
    ResourceCategory.FONT: lambda options: options.inline_font,
}


def prefers_inline(category: ResourceCategory, options: ExportOptions) -> bool:
    """Return the per-category inline flag from ``options``."""
    flag = _CATEGORY_FLAGS.get(category)
    return bool(flag(options)) if flag is not None else False


def is_inline(policy: InlinePolicy, category: ResourceCategory, options: ExportOptions) -> bool:
    if policy in _ALWAYS_INLINE:
        return True
    if policy in _OPTION_DRIVEN:
        return prefers_inline(category, options)
    return False


def is_reference(policy: InlinePolicy, category: ResourceCategory, options: ExportOptions) -> bool:
    if policy in _ALWAYS_REFERENCE:
        return True
    if policy in _OPTION_DRIVEN:
        return not prefers_inline(category, options)
    return False


def resolve_mode(
    policy: InlinePolicy, category: ResourceCategory, options: ExportOptions
) -> RenderMode:
    """Return the single rendering mode selected for this combination."""
    inline = is_inline(policy, category, options)
    reference = is_reference(policy, category, options)
    if inline and reference:
        raise RuntimeError(
            f"Policy {policy.value!r} resolved to both inline and reference for {category.value!r}"
        )
    if inline:
        return RenderMode.INLINE
    if reference:
        return RenderMode.REFERENCE
    return RenderMode.SUPPRESSED


__all__ = ["is_inline", "is_reference", "prefers_inline", "resolve_mode"]
