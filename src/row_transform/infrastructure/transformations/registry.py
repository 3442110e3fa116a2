"""
Transformation handler registry and dispatch.

Handlers register against a ``TransformationType`` with the ``@handler``
decorator. Dispatch selects the handler for a transformation's resolved
variant; variants without a handler (``UNKNOWN``) pass the incoming value
through unchanged.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import structlog

from row_transform.infrastructure.transformations.context import TransformContext
from row_transform.infrastructure.transformations.models import (
    TYPE_ALIASES,
    Transformation,
    TransformationType,
    resolve_type,
)

logger = structlog.get_logger(__name__)

HandlerFunc = Callable[[Any, Transformation, TransformContext], Any]


@dataclass
class TransformationHandler:
    """Handler metadata."""

    variant: TransformationType
    func: HandlerFunc
    description: str

    def __post_init__(self) -> None:
        if not callable(self.func):
            raise ValueError(
                f"Handler for {self.variant.value} must be a callable function"
            )
        if self.variant is TransformationType.UNKNOWN:
            raise ValueError("UNKNOWN transformations cannot have a handler")


class TransformationRegistry:
    """
    Maps transformation variants to their handlers.

    Example:
        >>> registry = TransformationRegistry()
        >>> registry.register(TransformationHandler(
        ...     variant=TransformationType.OVERWRITE,
        ...     func=lambda value, transformation, context: "X",
        ...     description="always X",
        ... ))
        >>> registry.dispatch(Transformation(type="overwrite"), "a", TransformContext())
        'X'
    """

    def __init__(self) -> None:
        self._handlers: Dict[TransformationType, TransformationHandler] = {}

    # --- Handler registration ---------------------------------------------------
    def register(self, handler: TransformationHandler) -> None:
        """Register a handler, replacing any existing one for its variant."""
        if handler.variant in self._handlers:
            logger.warning(
                "transformation_registry.handler_overridden",
                variant=handler.variant.value,
            )
        self._handlers[handler.variant] = handler
        logger.debug(
            "transformation_registry.handler_registered",
            variant=handler.variant.value,
            func=getattr(handler.func, "__name__", repr(handler.func)),
        )

    def get_handler(self, variant: TransformationType) -> Optional[TransformationHandler]:
        return self._handlers.get(variant)

    def list_handlers(self) -> List[TransformationHandler]:
        return list(self._handlers.values())

    def resolve_type(self, tag: Optional[str]) -> TransformationType:
        """Resolve a configured tag, including legacy aliases."""
        return resolve_type(tag)

    def get_statistics(self) -> Dict[str, Any]:
        """Return handler and alias counts per variant."""
        aliases_by_variant: Dict[str, int] = {}
        for variant in TYPE_ALIASES.values():
            aliases_by_variant[variant.value] = aliases_by_variant.get(variant.value, 0) + 1

        return {
            "total_handlers": len(self._handlers),
            "total_aliases": len(TYPE_ALIASES),
            "aliases_by_variant": aliases_by_variant,
            "unhandled_variants": [
                variant.value
                for variant in TransformationType
                if variant is not TransformationType.UNKNOWN
                and variant not in self._handlers
            ],
        }

    # --- Dispatch -----------------------------------------------------------------
    def dispatch(
        self,
        transformation: Transformation,
        value: Any,
        context: TransformContext,
    ) -> Any:
        """
        Apply one transformation step to ``value``.

        Returns the incoming value unchanged when no handler exists for the
        transformation's variant. Handler exceptions propagate.
        """
        handler = self._handlers.get(transformation.variant)
        if handler is None:
            return value
        return handler.func(value, transformation, context)


# Global registry instance
registry = TransformationRegistry()


def handler(variant: TransformationType, description: str):
    """
    Handler registration decorator.

    Args:
        variant: Variant handled by the decorated function
        description: Human-readable description

    Example:
        @handler(TransformationType.OVERWRITE, "Replace the value with a constant")
        def overwrite(value, transformation, context):
            return transformation.param("value")
    """

    def decorator(func: HandlerFunc) -> HandlerFunc:
        if len(inspect.signature(func).parameters) != 3:
            raise ValueError(
                f"Handler {func.__name__} must accept (value, transformation, context)"
            )

        handler_obj = TransformationHandler(
            variant=variant, func=func, description=description
        )
        registry.register(handler_obj)
        func._transformation_handler = handler_obj  # type: ignore[attr-defined]
        return func

    return decorator


def get_transformation_registry() -> TransformationRegistry:
    """Return the global registry (dependency injection helper)."""
    return registry


__all__ = [
    "HandlerFunc",
    "TransformationHandler",
    "TransformationRegistry",
    "get_transformation_registry",
    "handler",
    "registry",
]
