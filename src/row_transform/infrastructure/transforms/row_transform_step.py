"""
Data-frame step running an export template over every row.

Bridges ``RowTransformer`` (row dictionaries) and pandas pipelines: missing
cells (NaN/NaT) become None before the chains run, and the output frame's
columns follow the template's output names.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

import pandas as pd
import structlog

from row_transform.infrastructure.transformations import (
    FieldConfigRegistry,
    RowTransformer,
    TransformContext,
)
from row_transform.infrastructure.transformations.field_registry import (
    FieldConfigSpec,
)

from .base import PipelineContext, TransformStep

logger = structlog.get_logger(__name__)


class RowTransformStep(TransformStep):
    """
    Reshape a DataFrame with an export template.

    Example:
        >>> step = RowTransformStep([
        ...     {"field": "customer", "name": "CustomerName"},
        ...     {"field": "phone", "name": "Phone", "transformations": [
        ...         {"type": "phone-number", "countryCode": "US",
        ...          "outputFormat": "international"},
        ...     ]},
        ... ])
        >>> df_out = step.apply(df_in, context)
    """

    def __init__(
        self,
        field_configs: Union[
            RowTransformer, FieldConfigRegistry, Iterable[FieldConfigSpec]
        ],
        context: Optional[TransformContext] = None,
    ) -> None:
        if isinstance(field_configs, RowTransformer):
            self._transformer = field_configs
        else:
            self._transformer = RowTransformer(field_configs, context=context)

    @property
    def name(self) -> str:
        """Return human-friendly step name used for logging."""
        return "RowTransformStep"

    def apply(self, df: pd.DataFrame, context: PipelineContext) -> pd.DataFrame:
        """Transform every row; raises on misconfigured transformations."""
        log = logger.bind(step=self.name, pipeline=context.pipeline_name)

        records = df.astype(object).where(pd.notna(df), None).to_dict(orient="records")
        rows = self._transformer.transform(records)

        columns = list(dict.fromkeys(self._transformer.field_names))
        result = pd.DataFrame(rows, columns=columns, index=df.index)

        log.info(
            "rows_transformed",
            rows=len(result),
            input_columns=len(df.columns),
            output_columns=len(columns),
        )
        return result
