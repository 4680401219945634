"""Helpers for building resources against a throwaway registry in tests."""

from __future__ import annotations

from typing import List

from pageassets.classifier import classify
from pageassets.config import ExportOptions
from pageassets.minify import MinifyResult
from pageassets.models import InlinePolicy, LoadTiming, Mutability, ResourceCategory
from pageassets.paths import extension_of
from pageassets.registry import ResourceRegistry
from pageassets.resource import Resource


class ResourceFactory:
    """Builds resources with sensible defaults, all sharing one registry."""

    def __init__(self, registry: ResourceRegistry) -> None:
        self.registry = registry
        self.warnings: List[str] = []

    def make(
        self,
        filename: str,
        content: str | bytes = "",
        category: ResourceCategory | None = None,
        policy: InlinePolicy = InlinePolicy.AUTO,
        *,
        minify: bool = False,
        mutability: Mutability = Mutability.MUTABLE,
        timing: LoadTiming = LoadTiming.DEFAULT,
        options: ExportOptions | None = None,
        **kwargs: object,
    ) -> Resource:
        if category is None:
            category = classify(extension_of(filename))
        return Resource(
            filename,
            content,
            category,
            policy,
            minify,
            mutability,
            registry=self.registry,
            load_timing=timing,
            options=options,
            warn=self.warnings.append,
            **kwargs,  # type: ignore[arg-type]
        )


class StubMinifier:
    """Minifier double that records calls and returns a canned result."""

    def __init__(self, result: MinifyResult | None = None) -> None:
        self.result = result
        self.calls: List[dict[str, object]] = []

    async def minify(self, markup: str, *, minify_css: bool, minify_js: bool) -> MinifyResult:
        self.calls.append({"markup": markup, "minify_css": minify_css, "minify_js": minify_js})
        if self.result is not None:
            return self.result
        return MinifyResult.success(markup.replace(" ", ""))


class FailingMinifier:
    async def minify(self, markup: str, *, minify_css: bool, minify_js: bool) -> MinifyResult:
        return MinifyResult.failure("parse error")


__all__ = ["FailingMinifier", "ResourceFactory", "StubMinifier"]
