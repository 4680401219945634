"""Tests for pageassets.classifier and the directory layout."""

from __future__ import annotations

import pytest

from pageassets.classifier import category_to_directory, classify
from pageassets.models import ResourceCategory
from pageassets.registry import DirectoryLayout


@pytest.mark.parametrize(
    ("extension", "expected"),
    [
        ("PNG", ResourceCategory.MEDIA),
        (".mp4", ResourceCategory.MEDIA),
        ("opus", ResourceCategory.MEDIA),
        ("js", ResourceCategory.SCRIPT),
        ("TS", ResourceCategory.SCRIPT),
        ("css", ResourceCategory.STYLE),
        (".scss", ResourceCategory.STYLE),
        ("htm", ResourceCategory.HTML_FRAGMENT),
        ("woff2", ResourceCategory.FONT),
        ("unknownext", ResourceCategory.OTHER),
        ("", ResourceCategory.OTHER),
    ],
)
def test_classify(extension: str, expected: ResourceCategory) -> None:
    assert classify(extension) is expected


def test_category_to_directory_defaults() -> None:
    assert category_to_directory(ResourceCategory.STYLE) == "lib/styles"
    assert category_to_directory(ResourceCategory.SCRIPT) == "lib/scripts"
    assert category_to_directory(ResourceCategory.MEDIA) == "lib/media"
    assert category_to_directory(ResourceCategory.HTML_FRAGMENT) == "lib/html"
    assert category_to_directory(ResourceCategory.FONT) == "lib/fonts"
    assert category_to_directory(ResourceCategory.OTHER) == "lib"


def test_category_to_directory_is_total_and_non_empty() -> None:
    for category in ResourceCategory:
        assert category_to_directory(category)


def test_category_to_directory_uses_provider() -> None:
    layout = DirectoryLayout(styles="assets/css")
    assert category_to_directory(ResourceCategory.STYLE, layout) == "assets/css"
    assert category_to_directory(ResourceCategory.FONT, layout) == "lib/fonts"
