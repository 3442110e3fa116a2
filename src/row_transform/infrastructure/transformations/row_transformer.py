"""
Row transformation entry point.

``RowTransformer`` reshapes each input row into an output row keyed by the
template's output names, running every configured field through its
transformation chain.

Two error modes are available:
- ``transform`` propagates ``TransformationError`` from misconfigured steps.
- ``transform_with_report`` records those errors per field and keeps going.

Unparseable data never raises in either mode; handlers return sentinel
strings ("Invalid", "-") instead.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from row_transform.infrastructure.transformations.context import TransformContext
from row_transform.infrastructure.transformations.errors import TransformationError
from row_transform.infrastructure.transformations.field_registry import (
    FieldConfigRegistry,
    FieldConfigSpec,
)
from row_transform.infrastructure.transformations.pipeline import FieldPipeline
from row_transform.infrastructure.transformations.registry import (
    TransformationRegistry,
)
from row_transform.utils.logging import get_logger

logger = get_logger(__name__)

Row = Mapping[str, Any]


@dataclass
class FieldTransformResult:
    """
    Result of transforming a single field.

    Attributes:
        field_name: Input key
        output_name: Output key
        original_value: Raw value read from the row (None when absent)
        transformed_value: Value written to the output row
        success: Whether the chain completed
        error: Error message if the chain failed
    """

    field_name: str
    output_name: str
    original_value: Any
    transformed_value: Any
    success: bool = True
    error: Optional[str] = None


@dataclass
class RowTransformResult:
    """
    Result of transforming one row in report mode.

    Attributes:
        row: Output row; failed fields hold None
        field_results: Per-field outcomes in template order
    """

    row: Dict[str, Any] = field(default_factory=dict)
    field_results: List[FieldTransformResult] = field(default_factory=list)

    @property
    def fields_transformed(self) -> int:
        return sum(1 for result in self.field_results if result.success)

    @property
    def fields_failed(self) -> int:
        return sum(1 for result in self.field_results if not result.success)

    @property
    def success(self) -> bool:
        return self.fields_failed == 0

    @property
    def status(self) -> Dict[str, Any]:
        """JSON-compatible summary of the row's outcome."""
        return {
            "fields_transformed": self.fields_transformed,
            "fields_failed": self.fields_failed,
            "failed_fields": [
                {
                    "field": result.field_name,
                    "name": result.output_name,
                    "error": result.error,
                }
                for result in self.field_results
                if not result.success
            ],
        }


class RowTransformer:
    """
    Apply an export template to rows.

    Only configured fields appear in the output; configured fields missing
    from a row start their chain from None. Input rows are never mutated.

    Example:
        >>> transformer = RowTransformer([
        ...     {"field": "id", "name": "ID", "transformations": []},
        ...     {"field": "name", "name": "Name",
        ...      "transformations": [{"type": "string", "changeCase": "capitalCase"}]},
        ... ])
        >>> transformer.transform([{"id": "1", "name": "john", "extra": True}])
        [{'ID': '1', 'Name': 'John'}]
    """

    def __init__(
        self,
        field_configs: Union[FieldConfigRegistry, Iterable[FieldConfigSpec]],
        registry: Optional[TransformationRegistry] = None,
        context: Optional[TransformContext] = None,
    ) -> None:
        """
        Initialize RowTransformer.

        Args:
            field_configs: Export template, raw or already built
            registry: Handler registry (defaults to the global registry)
            context: Handler collaborators (defaults to settings-derived context)
        """
        if isinstance(field_configs, FieldConfigRegistry):
            self.fields = field_configs
        else:
            self.fields = FieldConfigRegistry(field_configs)
        self.pipeline = FieldPipeline(
            registry=registry, context=context or TransformContext.from_settings()
        )

    @property
    def field_names(self) -> List[str]:
        """Output names in template order."""
        return self.fields.output_names()

    def transform_row(self, row: Optional[Row]) -> Dict[str, Any]:
        """
        Transform a single row.

        Raises:
            TransformationError: If a configured step is misconfigured or not implemented
        """
        source = row or {}
        output: Dict[str, Any] = {}
        for input_key in self.fields.input_keys():
            output[self.fields.output_key_for(input_key)] = self.pipeline.apply(
                self.fields.chain_for(input_key), source.get(input_key)
            )
        return output

    def transform(self, rows: Iterable[Optional[Row]]) -> List[Dict[str, Any]]:
        """
        Transform rows one-to-one, preserving order.

        Raises:
            TransformationError: On the first misconfigured or unimplemented step
        """
        results = [self.transform_row(row) for row in rows]
        logger.debug(
            "row_transformer.batch_transformed",
            rows_count=len(results),
            fields_count=len(self.fields),
        )
        return results

    def transform_row_with_report(self, row: Optional[Row]) -> RowTransformResult:
        """Transform a single row, recording field failures instead of raising."""
        source = row or {}
        result = RowTransformResult()
        for input_key in self.fields.input_keys():
            name = self.fields.output_key_for(input_key)
            original = source.get(input_key)
            try:
                value = self.pipeline.apply(self.fields.chain_for(input_key), original)
                field_result = FieldTransformResult(
                    field_name=input_key,
                    output_name=name,
                    original_value=original,
                    transformed_value=value,
                )
            except TransformationError as e:
                logger.warning(
                    "row_transformer.field_transform_failed",
                    field=input_key,
                    name=name,
                    error=str(e),
                )
                field_result = FieldTransformResult(
                    field_name=input_key,
                    output_name=name,
                    original_value=original,
                    transformed_value=None,
                    success=False,
                    error=str(e),
                )

            result.row[name] = field_result.transformed_value
            result.field_results.append(field_result)

        return result

    def transform_with_report(
        self, rows: Iterable[Optional[Row]]
    ) -> List[RowTransformResult]:
        """
        Transform rows, collecting per-field errors.

        Returns:
            One RowTransformResult per input row, in order
        """
        results = [self.transform_row_with_report(row) for row in rows]

        logger.info(
            "row_transformer.batch_reported",
            rows_count=len(results),
            total_fields_transformed=sum(r.fields_transformed for r in results),
            total_fields_failed=sum(r.fields_failed for r in results),
        )
        return results
