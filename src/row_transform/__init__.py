"""
row-transform - declarative row reshaping for import/export pipelines.

Maps heterogeneous source columns onto a normalized output schema and
normalizes value content (casing, phone numbers, dates, identifiers,
substitution maps) through ordered per-field transformation chains.

Usage:
    >>> from row_transform import RowTransformer
    >>> transformer = RowTransformer([
    ...     {"field": "id", "name": "ID", "transformations": []},
    ...     {"field": "name", "name": "Name",
    ...      "transformations": [{"type": "string", "changeCase": "capitalCase"}]},
    ... ])
    >>> transformer.transform([{"id": "1", "name": "john"}])
    [{'ID': '1', 'Name': 'John'}]
"""

from row_transform.infrastructure.transformations import (
    FieldConfig,
    FieldConfigRegistry,
    FieldPipeline,
    RowTransformer,
    Transformation,
    TransformationConfigError,
    TransformationError,
    TransformationNotImplementedError,
    TransformationType,
)

__version__ = "0.1.0"

__all__ = [
    "FieldConfig",
    "FieldConfigRegistry",
    "FieldPipeline",
    "RowTransformer",
    "Transformation",
    "TransformationType",
    "TransformationError",
    "TransformationConfigError",
    "TransformationNotImplementedError",
]
