"""
Pipeline Transformation Steps

Components:
- TransformStep: Abstract base class for all steps
- Pipeline: Compose multiple steps into a pipeline
- PipelineContext: Execution context handed to each step
- RowTransformStep: Apply an export template to a DataFrame

Example:
    >>> from row_transform.infrastructure.transforms import Pipeline, RowTransformStep
    >>> pipeline = Pipeline([RowTransformStep(template)])
    >>> result = pipeline.execute(df, context)
"""

from .base import Pipeline, PipelineContext, TransformStep
from .row_transform_step import RowTransformStep

__all__ = [
    "TransformStep",
    "Pipeline",
    "PipelineContext",
    "RowTransformStep",
]
