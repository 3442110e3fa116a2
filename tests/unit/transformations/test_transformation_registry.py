"""Unit tests for TransformationRegistry dispatch and introspection."""

import pytest

from row_transform.infrastructure.transformations import (
    TYPE_ALIASES,
    Transformation,
    TransformationHandler,
    TransformationRegistry,
    TransformationType,
    get_transformation_registry,
    handler,
    registry,
)


@pytest.mark.unit
class TestTransformationRegistry:
    def setup_method(self):
        self.registry = TransformationRegistry()

    def test_dispatch_calls_registered_handler(self, transform_context) -> None:
        calls = []

        def shout(value, transformation, context):
            calls.append((value, transformation.param("suffix"), context))
            return f"{value}{transformation.param('suffix')}"

        self.registry.register(
            TransformationHandler(
                variant=TransformationType.STRING_FORMAT,
                func=shout,
                description="shout",
            )
        )
        transformation = Transformation.model_validate({"type": "string", "suffix": "!"})

        assert self.registry.dispatch(transformation, "hi", transform_context) == "hi!"
        assert calls == [("hi", "!", transform_context)]

    def test_dispatch_without_handler_returns_value(self, transform_context) -> None:
        transformation = Transformation.model_validate({"type": "overwrite", "value": "X"})
        assert self.registry.dispatch(transformation, "a", transform_context) == "a"

    def test_register_replaces_existing_handler(self, transform_context) -> None:
        for result in ("first", "second"):
            self.registry.register(
                TransformationHandler(
                    variant=TransformationType.OVERWRITE,
                    func=lambda value, transformation, context, result=result: result,
                    description=result,
                )
            )

        transformation = Transformation.model_validate({"type": "overwrite"})
        assert self.registry.dispatch(transformation, "a", transform_context) == "second"
        assert len(self.registry.list_handlers()) == 1

    def test_get_handler(self) -> None:
        assert self.registry.get_handler(TransformationType.OVERWRITE) is None

    def test_resolve_type_uses_aliases(self) -> None:
        assert self.registry.resolve_type("date@v1") is TransformationType.DATE_REFORMAT
        assert self.registry.resolve_type("nope") is TransformationType.UNKNOWN

    def test_empty_registry_statistics(self) -> None:
        stats = self.registry.get_statistics()

        assert stats["total_handlers"] == 0
        assert stats["total_aliases"] == len(TYPE_ALIASES)
        assert "unknown" not in stats["unhandled_variants"]
        assert len(stats["unhandled_variants"]) == len(TransformationType) - 1


@pytest.mark.unit
class TestTransformationHandler:
    def test_rejects_non_callable(self) -> None:
        with pytest.raises(ValueError, match="callable"):
            TransformationHandler(
                variant=TransformationType.OVERWRITE,
                func="not callable",
                description="bad",
            )

    def test_rejects_unknown_variant(self) -> None:
        with pytest.raises(ValueError, match="UNKNOWN"):
            TransformationHandler(
                variant=TransformationType.UNKNOWN,
                func=lambda value, transformation, context: value,
                description="bad",
            )


@pytest.mark.unit
class TestGlobalRegistry:
    def test_every_variant_has_a_handler(self) -> None:
        stats = registry.get_statistics()

        assert stats["total_handlers"] == 8
        assert stats["unhandled_variants"] == []

    def test_aliases_by_variant(self) -> None:
        aliases = registry.get_statistics()["aliases_by_variant"]

        assert aliases["find-replace"] == 4
        assert aliases["overwrite"] == 2
        assert sum(aliases.values()) == len(TYPE_ALIASES)

    def test_dependency_injection_helper(self) -> None:
        assert get_transformation_registry() is registry

    def test_unknown_tag_passes_value_through(self, transform_context) -> None:
        transformation = Transformation.model_validate({"type": "uppercase"})
        assert registry.dispatch(transformation, "abc", transform_context) == "abc"
        assert registry.dispatch(transformation, None, transform_context) is None


@pytest.mark.unit
class TestHandlerDecorator:
    def test_rejects_wrong_signature_before_registering(self) -> None:
        before = len(registry.list_handlers())

        with pytest.raises(ValueError, match="must accept"):

            @handler(TransformationType.OVERWRITE, "two-argument handler")
            def bad_handler(value, transformation):
                return value

        assert len(registry.list_handlers()) == before
        assert registry.get_handler(TransformationType.OVERWRITE).func.__name__ == "overwrite"

    def test_registered_handlers_carry_metadata(self) -> None:
        overwrite = registry.get_handler(TransformationType.OVERWRITE)

        assert overwrite.variant is TransformationType.OVERWRITE
        assert overwrite.description
        assert overwrite.func._transformation_handler is overwrite
