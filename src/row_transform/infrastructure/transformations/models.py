"""
Configuration models for field transformations.

An export template is an ordered list of ``FieldConfig`` entries. Each entry
binds an input key (``field``) to an output key (``name``) and carries an
ordered chain of ``Transformation`` steps.

Transformation tags are resolved to a ``TransformationType`` once, when the
model is built, so legacy spellings (``findreplace``, ``date@v1``...) never
reach the dispatcher.

Example:
    >>> config = FieldConfig.model_validate({
    ...     "field": "phone",
    ...     "name": "Phone",
    ...     "transformations": [
    ...         {"type": "phone-number", "countryCode": "US",
    ...          "outputFormat": "national"},
    ...     ],
    ... })
    >>> config.transformations[0].variant
    <TransformationType.PHONE_REFORMAT: 'phone-reformat'>
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from row_transform.utils.values import to_text


class TransformationType(str, Enum):
    """Closed set of transformation variants."""

    GENERATE_IDENTIFIER = "generate-identifier"
    STRING_FORMAT = "string-format"
    SUBSTITUTION = "substitution"
    FIND_REPLACE = "find-replace"
    OVERWRITE = "overwrite"
    DATE_REFORMAT = "date-reformat"
    PHONE_REFORMAT = "phone-reformat"
    API_LOOKUP = "api-lookup"
    UNKNOWN = "unknown"


def _with_versions(*tags: str) -> List[str]:
    return [spelling for tag in tags for spelling in (tag, f"{tag}@v1")]


# Tag spellings accepted in configuration, including legacy aliases.
TYPE_ALIASES: Dict[str, TransformationType] = {
    **{
        tag: TransformationType.GENERATE_IDENTIFIER
        for tag in _with_versions("generate-uuid", "generate-identifier")
    },
    **{
        tag: TransformationType.STRING_FORMAT
        for tag in _with_versions("string", "string-format")
    },
    **{tag: TransformationType.SUBSTITUTION for tag in _with_versions("substitution")},
    **{
        tag: TransformationType.FIND_REPLACE
        for tag in _with_versions("find-replace", "findreplace")
    },
    **{tag: TransformationType.OVERWRITE for tag in _with_versions("overwrite")},
    **{
        tag: TransformationType.DATE_REFORMAT
        for tag in _with_versions("date", "date-reformat")
    },
    **{
        tag: TransformationType.PHONE_REFORMAT
        for tag in _with_versions("phone-number", "phone-reformat")
    },
    **{tag: TransformationType.API_LOOKUP for tag in _with_versions("api-lookup")},
}


def resolve_type(tag: Optional[str]) -> TransformationType:
    """Map a configured tag to its variant; unknown or missing tags map to UNKNOWN."""
    if tag is None:
        return TransformationType.UNKNOWN
    return TYPE_ALIASES.get(tag, TransformationType.UNKNOWN)


class Transformation(BaseModel):
    """
    One step of a field's transformation chain.

    Built from a flat configuration mapping: ``type`` selects the variant and
    every other key becomes a parameter, keeping the configuration's own
    spelling (``changeCase``, ``inputFormat``, ``countryCode``...).

    Attributes:
        type: Tag as written in the configuration (None when absent)
        variant: Variant resolved from ``type``
        params: Remaining configuration keys
    """

    model_config = ConfigDict(frozen=True)

    type: Optional[str] = None
    variant: TransformationType = TransformationType.UNKNOWN
    params: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _split_params(cls, data: Any) -> Any:
        if isinstance(data, Transformation):
            return data
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Transformation must be a mapping, got {type(data).__name__}"
            )

        raw = dict(data)
        tag = raw.pop("type", None)
        tag = None if tag is None else str(tag)
        raw.pop("variant", None)

        # Structured form: Transformation(type=..., params={...})
        if set(raw) == {"params"} and isinstance(raw["params"], Mapping):
            params = dict(raw["params"])
        else:
            params = raw

        return {"type": tag, "variant": resolve_type(tag), "params": params}

    def param(self, key: str, default: Any = None) -> Any:
        """Return a parameter value, treating an explicit None as unset."""
        value = self.params.get(key)
        return default if value is None else value


class FieldConfig(BaseModel):
    """
    Declarative binding of one input key to one output key.

    Attributes:
        field: Key read from each input row
        name: Key written to each output row
        transformations: Ordered transformation chain
    """

    model_config = ConfigDict(frozen=True)

    field: str
    name: str
    transformations: List[Transformation] = Field(default_factory=list)

    @field_validator("field", "name", mode="before")
    @classmethod
    def _scalar_as_text(cls, value: Any) -> Any:
        # YAML reads ``name: 2024`` as an int; keys are always text
        if value is None or isinstance(value, (str, Mapping, list, tuple, set)):
            return value
        return to_text(value)

    @field_validator("transformations", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


__all__ = [
    "TransformationType",
    "TYPE_ALIASES",
    "resolve_type",
    "Transformation",
    "FieldConfig",
]
