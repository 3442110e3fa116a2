"""
Transformation handlers, one per variant.

Every handler receives the value produced by the previous chain step, the
transformation being applied and the shared ``TransformContext``.

Failure policy:
- Missing required parameters raise ``TransformationConfigError``.
- Unimplemented options raise ``TransformationNotImplementedError``.
- Unparseable dates and phone numbers return ``"Invalid"``; identifier
  generation failures return ``"-"``.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

import structlog

from row_transform.infrastructure.transformations.context import TransformContext
from row_transform.infrastructure.transformations.errors import (
    GENERATION_FAILED_VALUE,
    INVALID_VALUE,
    TransformationConfigError,
    TransformationNotImplementedError,
)
from row_transform.infrastructure.transformations.models import (
    Transformation,
    TransformationType,
)
from row_transform.infrastructure.transformations.registry import handler
from row_transform.utils.case_styles import change_case
from row_transform.utils.date_formats import format_datetime, parse_datetime
from row_transform.utils.phone_numbers import (
    is_valid_phone_number,
    parse_phone_number,
    render_phone_number,
)
from row_transform.utils.values import is_blank, to_text

logger = structlog.get_logger(__name__)

# $$, $&, $1..$99 and $<name> references in replacement text
_REPLACEMENT_REFERENCE = re.compile(r"\$(\$|&|<([^>]*)>|(\d{1,2}))")
_NAMED_GROUP = re.compile(r"\(\?<(?=[A-Za-z_])")


@handler(TransformationType.GENERATE_IDENTIFIER, "Replace the value with a fresh UUID")
def generate_identifier(
    value: Any, transformation: Transformation, context: TransformContext
) -> str:
    version = transformation.param("version", "v4")
    try:
        if version == "v1":
            return context.identifiers.time_ordered()
        return context.identifiers.random()
    except Exception as exc:  # noqa: BLE001
        logger.warning(
            "transformation.identifier_generation_failed",
            version=version,
            error=str(exc),
        )
        return GENERATION_FAILED_VALUE


@handler(TransformationType.STRING_FORMAT, "Prepend, append and re-case text")
def format_string(
    value: Any, transformation: Transformation, context: TransformContext
) -> str:
    text = to_text(value)

    prepend = transformation.param("prepend")
    if prepend:
        text = f"{prepend}{text}"

    append = transformation.param("append")
    if append:
        text = f"{text}{append}"

    style = transformation.param("changeCase")
    if style:
        text = change_case(style, text)

    return text


@handler(TransformationType.SUBSTITUTION, "Look the value up in a substitution map")
def substitute(
    value: Any, transformation: Transformation, context: TransformContext
) -> Any:
    if transformation.param("caseSensitive"):
        raise TransformationNotImplementedError(
            "Substitution transformation - caseSensitive=true - not implemented"
        )

    mapping = transformation.param("mapping")
    if not isinstance(mapping, Mapping):
        return value

    try:
        substituted = mapping.get(value)
    except TypeError:  # unhashable value
        substituted = None

    # Keys compare as text: YAML turns ``1: Male`` into an int key
    if substituted is None:
        text = to_text(value)
        substituted = next(
            (mapped for key, mapped in mapping.items() if to_text(key) == text), None
        )

    return value if substituted is None else substituted


def _expand_replacement(template: str, match: "re.Match[str]") -> str:
    def expand(reference: "re.Match[str]") -> str:
        token = reference.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return match.group(0)
        if reference.group(2) is not None:
            try:
                return match.group(reference.group(2)) or ""
            except IndexError:
                return reference.group(0)
        digits = reference.group(3)
        index = int(digits)
        if 0 < index <= match.re.groups:
            return match.group(index) or ""
        # $10 with fewer than ten groups is group 1 followed by "0"
        if len(digits) == 2 and 0 < int(digits[0]) <= match.re.groups:
            return (match.group(int(digits[0])) or "") + digits[1]
        return reference.group(0)

    return _REPLACEMENT_REFERENCE.sub(expand, template)


@handler(TransformationType.FIND_REPLACE, "Replace every regex match in the value")
def find_replace(
    value: Any, transformation: Transformation, context: TransformContext
) -> str:
    if is_blank(value):
        return ""

    find = transformation.param("find")
    replace = transformation.param("replace")
    if not find or replace is None:
        raise TransformationConfigError("Invalid find-replace transformation config")

    try:
        pattern = re.compile(_NAMED_GROUP.sub("(?P<", str(find)))
    except re.error as exc:
        raise TransformationConfigError(
            f"Invalid find-replace pattern {find!r}: {exc}"
        ) from exc

    template = str(replace)
    return pattern.sub(lambda match: _expand_replacement(template, match), to_text(value))


@handler(TransformationType.OVERWRITE, "Replace the value with a constant")
def overwrite(
    value: Any, transformation: Transformation, context: TransformContext
) -> Any:
    return transformation.param("value")


@handler(TransformationType.DATE_REFORMAT, "Re-render a date in another format")
def reformat_date(
    value: Any, transformation: Transformation, context: TransformContext
) -> str:
    if is_blank(value):
        return ""

    input_format = transformation.param("inputFormat")
    output_format = transformation.param("outputFormat")
    if not input_format or not output_format:
        raise TransformationConfigError("Invalid date transformation config")

    zone = transformation.param(
        "zone", transformation.param("timezone", context.default_zone)
    )
    try:
        parsed = parse_datetime(to_text(value), str(input_format), zone)
        return format_datetime(parsed, str(output_format), zone_name=str(zone))
    except Exception as exc:  # noqa: BLE001
        logger.debug(
            "transformation.date_reformat_failed",
            input_format=input_format,
            zone=zone,
            error=str(exc),
        )
        return INVALID_VALUE


@handler(TransformationType.PHONE_REFORMAT, "Re-render a phone number")
def reformat_phone_number(
    value: Any, transformation: Transformation, context: TransformContext
) -> str:
    if is_blank(value):
        return ""

    output_format = transformation.param("outputFormat")
    if not output_format:
        raise TransformationConfigError("Invalid phone number transformation config")

    country_code = transformation.param("countryCode")
    try:
        number = parse_phone_number(to_text(value), country_code)
        if number is None or not is_valid_phone_number(number):
            return INVALID_VALUE
        return render_phone_number(number, str(output_format))
    except Exception as exc:  # noqa: BLE001
        logger.debug(
            "transformation.phone_reformat_failed",
            country_code=country_code,
            error=str(exc),
        )
        return INVALID_VALUE


@handler(TransformationType.API_LOOKUP, "Look the value up in an external API")
def api_lookup(
    value: Any, transformation: Transformation, context: TransformContext
) -> Any:
    raise TransformationNotImplementedError("Api Lookup transformation not implemented")


__all__ = [
    "api_lookup",
    "find_replace",
    "format_string",
    "generate_identifier",
    "overwrite",
    "reformat_date",
    "reformat_phone_number",
    "substitute",
]
