"""Shared pytest fixtures for row-transform tests."""

from __future__ import annotations

import itertools
import os
from typing import Iterator

import pytest

# Keep settings independent of the developer's environment
for _name in ("RT_DEFAULT_TIMEZONE", "RT_TEMPLATES_DIR"):
    os.environ.pop(_name, None)

from row_transform.config import get_settings  # noqa: E402
from row_transform.infrastructure.transformations import (  # noqa: E402
    FieldPipeline,
    TransformContext,
    Transformation,
)


class SequenceIdentifierProvider:
    """Deterministic identifier source: v1-1, v4-2, v4-3..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def time_ordered(self) -> str:
        return f"v1-{next(self._counter)}"

    def random(self) -> str:
        return f"v4-{next(self._counter)}"


class FailingIdentifierProvider:
    """Identifier source whose generators always raise."""

    def time_ordered(self) -> str:
        raise RuntimeError("clock unavailable")

    def random(self) -> str:
        raise RuntimeError("entropy unavailable")


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def identifier_provider() -> SequenceIdentifierProvider:
    return SequenceIdentifierProvider()


@pytest.fixture
def transform_context(identifier_provider: SequenceIdentifierProvider) -> TransformContext:
    """Context with deterministic identifiers and UTC as default zone."""
    return TransformContext(identifiers=identifier_provider, default_zone="UTC")


@pytest.fixture
def pipeline(transform_context: TransformContext) -> FieldPipeline:
    return FieldPipeline(context=transform_context)


@pytest.fixture
def make_transformation():
    """Factory building a Transformation from flat configuration keys."""

    def _make(**config: object) -> Transformation:
        return Transformation.model_validate(config)

    return _make


@pytest.fixture
def failing_context() -> TransformContext:
    """Context whose identifier provider always raises."""
    return TransformContext(identifiers=FailingIdentifierProvider(), default_zone="UTC")
