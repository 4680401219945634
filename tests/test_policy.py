"""Tests for pageassets.policy."""

from __future__ import annotations

import itertools

import pytest

from pageassets.config import ExportOptions
from pageassets.models import InlinePolicy, RenderMode, ResourceCategory
from pageassets.policy import is_inline, is_reference, resolve_mode

_FLAG_NAMES = ("inline_style", "inline_script", "inline_media", "inline_html", "inline_font")


def _all_options() -> list[ExportOptions]:
    combos = []
    for values in itertools.product([False, True], repeat=len(_FLAG_NAMES)):
        combos.append(ExportOptions(**dict(zip(_FLAG_NAMES, values))))
    return combos


def test_exactly_one_mode_for_every_combination() -> None:
    for options in _all_options():
        for policy in InlinePolicy:
            for category in ResourceCategory:
                inline = is_inline(policy, category, options)
                reference = is_reference(policy, category, options)
                mode = resolve_mode(policy, category, options)
                if policy is InlinePolicy.NONE:
                    assert not inline and not reference
                    assert mode is RenderMode.SUPPRESSED
                else:
                    assert inline != reference
                    assert mode is not RenderMode.SUPPRESSED


@pytest.mark.parametrize("policy", [InlinePolicy.INLINE, InlinePolicy.INLINE_HEAD])
def test_inline_policies_ignore_options(policy: InlinePolicy) -> None:
    assert resolve_mode(policy, ResourceCategory.STYLE, ExportOptions()) is RenderMode.INLINE


@pytest.mark.parametrize("policy", [InlinePolicy.DOWNLOAD, InlinePolicy.DOWNLOAD_HEAD])
def test_download_policies_ignore_options(policy: InlinePolicy) -> None:
    options = ExportOptions(inline_style=True)
    assert resolve_mode(policy, ResourceCategory.STYLE, options) is RenderMode.REFERENCE


@pytest.mark.parametrize(
    ("category", "flag"),
    [
        (ResourceCategory.STYLE, "inline_style"),
        (ResourceCategory.SCRIPT, "inline_script"),
        (ResourceCategory.MEDIA, "inline_media"),
        (ResourceCategory.HTML_FRAGMENT, "inline_html"),
        (ResourceCategory.FONT, "inline_font"),
    ],
)
def test_auto_policy_follows_category_flag(category: ResourceCategory, flag: str) -> None:
    enabled = ExportOptions(**{flag: True})
    assert resolve_mode(InlinePolicy.AUTO, category, enabled) is RenderMode.INLINE
    assert resolve_mode(InlinePolicy.AUTO_HEAD, category, enabled) is RenderMode.INLINE
    assert resolve_mode(InlinePolicy.AUTO, category, ExportOptions()) is RenderMode.REFERENCE


def test_auto_policy_ignores_other_categories_flags() -> None:
    options = ExportOptions(inline_script=True)
    assert resolve_mode(InlinePolicy.AUTO, ResourceCategory.STYLE, options) is RenderMode.REFERENCE


def test_other_category_with_auto_is_reference() -> None:
    options = ExportOptions(
        inline_style=True, inline_script=True, inline_media=True, inline_html=True, inline_font=True
    )
    assert resolve_mode(InlinePolicy.AUTO, ResourceCategory.OTHER, options) is RenderMode.REFERENCE


def test_head_policies_are_distinguishable() -> None:
    assert InlinePolicy.AUTO_HEAD.hoists_to_head
    assert InlinePolicy.DOWNLOAD_HEAD.hoists_to_head
    assert InlinePolicy.INLINE_HEAD.hoists_to_head
    assert not InlinePolicy.AUTO.hoists_to_head
    assert not InlinePolicy.NONE.hoists_to_head
