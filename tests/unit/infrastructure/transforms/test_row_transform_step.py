"""Tests for RowTransformStep and Pipeline composition."""

import pandas as pd
import pytest

from row_transform.infrastructure.transformations import (
    RowTransformer,
    TransformationNotImplementedError,
)
from row_transform.infrastructure.transforms import (
    Pipeline,
    RowTransformStep,
    TransformStep,
)


class TestRowTransformStep:
    """Tests for RowTransformStep."""

    def test_name(self, customer_template, transform_context):
        step = RowTransformStep(customer_template, context=transform_context)
        assert step.name == "RowTransformStep"

    def test_columns_follow_template(
        self, customers_frame, customer_template, transform_context, pipeline_context
    ):
        step = RowTransformStep(customer_template, context=transform_context)

        result = step.apply(customers_frame, pipeline_context)

        assert list(result.columns) == ["Name", "Gender", "Phone", "CustomerId"]
        assert list(result.index) == [10, 11, 12]

    def test_values_transformed(
        self, customers_frame, customer_template, transform_context, pipeline_context
    ):
        step = RowTransformStep(customer_template, context=transform_context)

        result = step.apply(customers_frame, pipeline_context)

        assert result.loc[10].to_dict() == {
            "Name": "Ada Lovelace",
            "Gender": "Female",
            "Phone": "(213) 373-4253",
            "CustomerId": "1",
        }
        assert result.loc[11, "Phone"] == "Invalid"
        assert result.loc[12, "Gender"] == "X"

    def test_missing_cells_become_none(
        self, customers_frame, customer_template, transform_context, pipeline_context
    ):
        step = RowTransformStep(customer_template, context=transform_context)

        result = step.apply(customers_frame, pipeline_context)

        # string-format renders None as "", find-replace short-circuits blanks
        assert result.loc[12, "Name"] == ""
        assert result.loc[12, "Phone"] == ""

    def test_numeric_columns_keep_values(self, transform_context, pipeline_context):
        df = pd.DataFrame({"qty": [1, 2], "price": [1.5, float("nan")]})
        step = RowTransformStep(
            [{"field": "qty", "name": "Quantity"}, {"field": "price", "name": "Price"}],
            context=transform_context,
        )

        result = step.apply(df, pipeline_context)

        assert result["Quantity"].tolist() == [1, 2]
        assert result.loc[0, "Price"] == 1.5
        assert pd.isna(result.loc[1, "Price"])

    def test_input_not_mutated(
        self, customers_frame, customer_template, transform_context, pipeline_context
    ):
        original = customers_frame.copy()

        RowTransformStep(customer_template, context=transform_context).apply(
            customers_frame, pipeline_context
        )

        pd.testing.assert_frame_equal(customers_frame, original)

    def test_empty_frame(self, customer_template, transform_context, pipeline_context):
        df = pd.DataFrame({"id": [], "full_name": []})
        step = RowTransformStep(customer_template, context=transform_context)

        result = step.apply(df, pipeline_context)

        assert result.empty
        assert list(result.columns) == ["Name", "Gender", "Phone", "CustomerId"]

    def test_duplicate_output_names_collapse_to_one_column(
        self, transform_context, pipeline_context
    ):
        df = pd.DataFrame({"a": [1], "b": [2]})
        step = RowTransformStep(
            [{"field": "a", "name": "X"}, {"field": "b", "name": "X"}],
            context=transform_context,
        )

        result = step.apply(df, pipeline_context)

        assert list(result.columns) == ["X"]
        assert result.loc[0, "X"] == 2

    def test_accepts_prebuilt_transformer(self, transform_context, pipeline_context):
        transformer = RowTransformer(
            [{"field": "id", "name": "ID", "transformations": [{"type": "generate-uuid"}]}],
            context=transform_context,
        )
        step = RowTransformStep(transformer)

        result = step.apply(pd.DataFrame({"id": ["a", "b"]}), pipeline_context)

        assert result["ID"].tolist() == ["v4-1", "v4-2"]

    def test_config_errors_propagate(self, transform_context, pipeline_context):
        step = RowTransformStep(
            [{"field": "id", "name": "ID", "transformations": [{"type": "api-lookup"}]}],
            context=transform_context,
        )
        with pytest.raises(TransformationNotImplementedError):
            step.apply(pd.DataFrame({"id": ["a"]}), pipeline_context)


class TestPipeline:
    """Tests for Pipeline composition."""

    def test_runs_steps_in_order(
        self, customers_frame, customer_template, transform_context, pipeline_context
    ):
        class UpperNames(TransformStep):
            @property
            def name(self) -> str:
                return "UpperNames"

            def apply(self, df, context):
                result = df.copy()
                result["Name"] = result["Name"].str.upper()
                return result

        pipeline = Pipeline(
            [RowTransformStep(customer_template, context=transform_context), UpperNames()]
        )

        result = pipeline.execute(customers_frame, pipeline_context)

        assert result.loc[10, "Name"] == "ADA LOVELACE"
        assert "notes" not in result.columns

    def test_empty_pipeline_returns_copy(self, customers_frame, pipeline_context):
        result = Pipeline([]).execute(customers_frame, pipeline_context)

        assert result is not customers_frame
        pd.testing.assert_frame_equal(result, customers_frame)
