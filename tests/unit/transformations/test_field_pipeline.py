"""Unit tests for FieldPipeline chain application."""

import pytest

from row_transform.infrastructure.transformations import (
    FieldPipeline,
    TransformationConfigError,
    TransformationHandler,
    TransformationRegistry,
    TransformationType,
)


@pytest.mark.unit
class TestFieldPipeline:
    @pytest.mark.parametrize("chain", [None, [], ()])
    def test_empty_chain_returns_value(self, pipeline, chain) -> None:
        assert pipeline.apply(chain, "raw") == "raw"
        assert pipeline.apply(chain, None) is None

    def test_steps_run_left_to_right(self, pipeline, make_transformation) -> None:
        chain = [
            make_transformation(type="find-replace", find="-", replace=""),
            make_transformation(type="string", prepend="#"),
        ]
        assert pipeline.apply(chain, "123-456") == "#123456"

    def test_each_step_sees_previous_output(self, pipeline, make_transformation) -> None:
        chain = [
            make_transformation(type="overwrite", value="M"),
            make_transformation(type="substitution", mapping={"M": "Male"}),
        ]
        assert pipeline.apply(chain, "F") == "Male"

    def test_unknown_step_is_identity(self, pipeline, make_transformation) -> None:
        chain = [
            make_transformation(type="string", append="!"),
            make_transformation(type="mystery"),
            make_transformation(type="string", changeCase="upperCase"),
        ]
        assert pipeline.apply(chain, "hi") == "HI!"

    def test_error_stops_the_chain(self, pipeline, make_transformation) -> None:
        chain = [
            make_transformation(type="find-replace", find="-"),
            make_transformation(type="overwrite", value="never"),
        ]
        with pytest.raises(TransformationConfigError):
            pipeline.apply(chain, "a-b")

    def test_uses_supplied_registry_and_context(
        self, transform_context, make_transformation
    ) -> None:
        custom = TransformationRegistry()
        custom.register(
            TransformationHandler(
                variant=TransformationType.OVERWRITE,
                func=lambda value, transformation, context: context.default_zone,
                description="zone",
            )
        )
        pipeline = FieldPipeline(registry=custom, context=transform_context)

        assert pipeline.apply([make_transformation(type="overwrite")], "a") == "UTC"
        assert pipeline.apply([make_transformation(type="string", append="!")], "a") == "a"
