from __future__ import annotations

import pytest

from pageassets.registry import ResourceRegistry
from tests._fixtures.resources import ResourceFactory


@pytest.fixture
def registry() -> ResourceRegistry:
    """Provide an empty registry with a fixed reference time."""
    return ResourceRegistry(reference_time=1_700_000_000.0)


@pytest.fixture
def factory(registry: ResourceRegistry) -> ResourceFactory:
    return ResourceFactory(registry)
