"""
YAML loader for export templates.

An export template is the ordered list of field configurations a
``RowTransformer`` is built from. Two layouts are accepted:

    # bare list
    - field: id
      name: ID
    - field: name
      name: Name
      transformations:
        - type: string
          changeCase: capitalCase

    # mapping with a ``fields`` list
    fields:
      - field: id
        name: ID

Named templates live in ``<templates_dir>/<name>.yml``; the directory comes
from RT_TEMPLATES_DIR (see ``Settings.templates_dir``).
"""

from pathlib import Path
from typing import Any, List, Union

import structlog
import yaml
from pydantic import ValidationError

from row_transform.config.settings import get_settings
from row_transform.infrastructure.transformations.models import FieldConfig

logger = structlog.get_logger(__name__)

TEMPLATE_SUFFIXES = (".yml", ".yaml")


def get_templates_dir() -> Path:
    """Return the configured directory for named templates."""
    return Path(get_settings().templates_dir)


def parse_export_template(content: Any, source: str = "<memory>") -> List[FieldConfig]:
    """
    Validate an already-loaded template document.

    Args:
        content: Parsed YAML/JSON document
        source: Label used in error messages

    Returns:
        Field configurations in document order

    Raises:
        ValueError: If the document shape or an entry is invalid
    """
    if content is None:
        return []

    if isinstance(content, dict):
        if "fields" not in content:
            raise ValueError(f"Invalid template in {source}: missing 'fields' list")
        content = content["fields"] or []

    if not isinstance(content, list):
        error_msg = (
            f"Invalid template format in {source}: "
            f"expected list, got {type(content).__name__}"
        )
        logger.error(
            "template_loader.invalid_format",
            source=source,
            actual_type=type(content).__name__,
        )
        raise ValueError(error_msg)

    configs: List[FieldConfig] = []
    for index, entry in enumerate(content):
        try:
            configs.append(FieldConfig.model_validate(entry))
        except ValidationError as e:
            logger.error(
                "template_loader.invalid_entry",
                source=source,
                index=index,
                error=str(e),
            )
            raise ValueError(
                f"Invalid field configuration #{index} in {source}: {e}"
            ) from e

    return configs


def load_export_template(path: Union[str, Path]) -> List[FieldConfig]:
    """
    Load an export template from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the YAML is invalid or the template malformed
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Template not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(
            "template_loader.yaml_parse_error",
            file_path=str(file_path),
            error=str(e),
        )
        raise ValueError(f"Invalid YAML in {file_path}: {e}") from e

    configs = parse_export_template(content, source=str(file_path))
    logger.debug(
        "template_loader.file_loaded",
        file_path=str(file_path),
        fields=len(configs),
    )
    return configs


def load_named_template(name: str) -> List[FieldConfig]:
    """
    Load ``<templates_dir>/<name>.yml`` (or ``.yaml``).

    Raises:
        FileNotFoundError: If no matching file exists
        ValueError: If the template is malformed
    """
    templates_dir = get_templates_dir()
    for suffix in TEMPLATE_SUFFIXES:
        candidate = templates_dir / f"{name}{suffix}"
        if candidate.exists():
            return load_export_template(candidate)

    raise FileNotFoundError(f"Template '{name}' not found in {templates_dir}")


__all__ = [
    "TEMPLATE_SUFFIXES",
    "get_templates_dir",
    "load_export_template",
    "load_named_template",
    "parse_export_template",
]
