"""
Base classes for data-frame transformation steps.

Steps are composed into a ``Pipeline`` which runs them in order, passing each
step's output to the next. Steps return new DataFrames and never mutate
their input.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, MutableMapping

import pandas as pd


@dataclass
class PipelineContext:
    """
    Context shared with every pipeline step invocation.

    Attributes:
        pipeline_name: Logical name of the pipeline being executed
        execution_id: Unique identifier (uuid/slug) for this execution
        timestamp: UTC timestamp when the run started
        config: Serialized pipeline configuration for reference in steps
        metadata: Mutable map for steps to stash scratchpad data
    """

    pipeline_name: str
    execution_id: str
    timestamp: datetime
    config: Mapping[str, Any]
    metadata: MutableMapping[str, Any] = field(default_factory=dict)


class TransformStep(ABC):
    """
    Abstract base class for all pipeline transformation steps.

    Example:
        >>> class MyStep(TransformStep):
        ...     @property
        ...     def name(self) -> str:
        ...         return "MyStep"
        ...
        ...     def apply(self, df, context):
        ...         return df.copy()
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return human-friendly step name used for logging."""
        pass

    @abstractmethod
    def apply(self, df: pd.DataFrame, context: PipelineContext) -> pd.DataFrame:
        """
        Apply transformation to DataFrame.

        Args:
            df: Input DataFrame (should not be mutated)
            context: Pipeline execution context

        Returns:
            Transformed DataFrame (new copy)
        """
        pass


class Pipeline:
    """
    Compose multiple TransformSteps into a sequential pipeline.

    Example:
        >>> pipeline = Pipeline([RowTransformStep(template)])
        >>> result = pipeline.execute(df, context)
    """

    def __init__(self, steps: List[TransformStep]) -> None:
        self.steps = steps

    def execute(self, df: pd.DataFrame, context: PipelineContext) -> pd.DataFrame:
        """Execute all steps in sequence on a copy of ``df``."""
        result = df.copy()
        for step in self.steps:
            result = step.apply(result, context)
        return result
