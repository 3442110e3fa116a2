"""Left-to-right application of a field's transformation chain."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from row_transform.infrastructure.transformations import handlers  # noqa: F401
from row_transform.infrastructure.transformations.context import TransformContext
from row_transform.infrastructure.transformations.models import Transformation
from row_transform.infrastructure.transformations.registry import (
    TransformationRegistry,
    get_transformation_registry,
)


class FieldPipeline:
    """
    Fold a transformation chain over a field value.

    Each step receives the previous step's output, never the raw value.

    Example:
        >>> pipeline = FieldPipeline()
        >>> chain = [
        ...     Transformation.model_validate({"type": "find-replace", "find": "-", "replace": ""}),
        ...     Transformation.model_validate({"type": "string", "prepend": "#"}),
        ... ]
        >>> pipeline.apply(chain, "123-456")
        '#123456'
    """

    def __init__(
        self,
        registry: Optional[TransformationRegistry] = None,
        context: Optional[TransformContext] = None,
    ) -> None:
        self.registry = registry or get_transformation_registry()
        self.context = context or TransformContext()

    def apply(self, chain: Optional[Sequence[Transformation]], value: Any) -> Any:
        """
        Apply ``chain`` to ``value``.

        An empty or missing chain returns ``value`` unchanged, None included.

        Raises:
            TransformationError: If a step is misconfigured or not implemented
        """
        if not chain:
            return value

        result = value
        for transformation in chain:
            result = self.registry.dispatch(transformation, result, self.context)
        return result
