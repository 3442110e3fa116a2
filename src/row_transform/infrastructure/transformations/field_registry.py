"""
Lookup tables built once from an export template.

``FieldConfigRegistry`` turns the ordered list of field configurations into
input-key -> output-key and input-key -> chain mappings. Duplicate input
keys keep the last entry; the output name list keeps every entry in
configuration order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

import structlog

from row_transform.infrastructure.transformations.models import (
    FieldConfig,
    Transformation,
)

logger = structlog.get_logger(__name__)

FieldConfigSpec = Union[FieldConfig, Mapping[str, Any]]


class FieldConfigRegistry:
    """
    Read-only view of an export template.

    Example:
        >>> fields = FieldConfigRegistry([
        ...     {"field": "id", "name": "ID"},
        ...     {"field": "name", "name": "Name"},
        ... ])
        >>> fields.output_names()
        ['ID', 'Name']
        >>> fields.output_key_for("name")
        'Name'
    """

    def __init__(self, field_configs: Iterable[FieldConfigSpec]) -> None:
        configs = [
            config
            if isinstance(config, FieldConfig)
            else FieldConfig.model_validate(config)
            for config in field_configs
        ]

        output_keys: Dict[str, str] = {}
        chains: Dict[str, Tuple[Transformation, ...]] = {}
        for config in configs:
            if config.field in output_keys:
                logger.warning(
                    "field_registry.duplicate_field",
                    field=config.field,
                    previous_name=output_keys[config.field],
                    name=config.name,
                )
            output_keys[config.field] = config.name
            chains[config.field] = tuple(config.transformations)

        self._configs: Tuple[FieldConfig, ...] = tuple(configs)
        self._output_names: Tuple[str, ...] = tuple(config.name for config in configs)
        self._output_keys = MappingProxyType(output_keys)
        self._chains = MappingProxyType(chains)

        logger.debug(
            "field_registry.built",
            fields=len(self._configs),
            input_keys=len(self._output_keys),
        )

    @property
    def configs(self) -> Tuple[FieldConfig, ...]:
        return self._configs

    def output_names(self) -> List[str]:
        """Output names in configuration order, duplicates included."""
        return list(self._output_names)

    def input_keys(self) -> List[str]:
        """Distinct configured input keys in first-seen order."""
        return list(self._output_keys)

    def output_key_for(self, input_key: str) -> Optional[str]:
        return self._output_keys.get(input_key)

    def chain_for(self, input_key: str) -> Optional[Tuple[Transformation, ...]]:
        return self._chains.get(input_key)

    def __len__(self) -> int:
        return len(self._configs)

    def __contains__(self, input_key: object) -> bool:
        return input_key in self._output_keys
