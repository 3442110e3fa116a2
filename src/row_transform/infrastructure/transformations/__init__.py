"""
Field transformation engine.

Components:
- FieldConfig / Transformation: configuration models
- TransformationRegistry: variant -> handler dispatch (unknown tags pass through)
- FieldPipeline: left-to-right fold of a chain over one value
- FieldConfigRegistry: lookup tables built once from a template
- RowTransformer: assembles output rows

Example:
    >>> from row_transform.infrastructure.transformations import RowTransformer
    >>> transformer = RowTransformer([
    ...     {"field": "dob", "name": "DateOfBirth", "transformations": [
    ...         {"type": "date", "inputFormat": "yyyy-MM-dd", "outputFormat": "MM/dd/yyyy"},
    ...     ]},
    ... ])
    >>> transformer.transform([{"dob": "2024-01-05"}])
    [{'DateOfBirth': '01/05/2024'}]
"""

from row_transform.infrastructure.transformations import handlers  # noqa: F401
from row_transform.infrastructure.transformations.context import TransformContext
from row_transform.infrastructure.transformations.errors import (
    GENERATION_FAILED_VALUE,
    INVALID_VALUE,
    TransformationConfigError,
    TransformationError,
    TransformationNotImplementedError,
)
from row_transform.infrastructure.transformations.field_registry import (
    FieldConfigRegistry,
)
from row_transform.infrastructure.transformations.models import (
    TYPE_ALIASES,
    FieldConfig,
    Transformation,
    TransformationType,
    resolve_type,
)
from row_transform.infrastructure.transformations.pipeline import FieldPipeline
from row_transform.infrastructure.transformations.registry import (
    TransformationHandler,
    TransformationRegistry,
    get_transformation_registry,
    handler,
    registry,
)
from row_transform.infrastructure.transformations.row_transformer import (
    FieldTransformResult,
    RowTransformer,
    RowTransformResult,
)

__all__ = [
    # Models
    "FieldConfig",
    "Transformation",
    "TransformationType",
    "TYPE_ALIASES",
    "resolve_type",
    # Errors and sentinels
    "TransformationError",
    "TransformationConfigError",
    "TransformationNotImplementedError",
    "INVALID_VALUE",
    "GENERATION_FAILED_VALUE",
    # Dispatch
    "TransformationHandler",
    "TransformationRegistry",
    "get_transformation_registry",
    "handler",
    "registry",
    "TransformContext",
    # Engine
    "FieldPipeline",
    "FieldConfigRegistry",
    "RowTransformer",
    "RowTransformResult",
    "FieldTransformResult",
]
