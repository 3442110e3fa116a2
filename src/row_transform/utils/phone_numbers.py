"""
Phone number parsing and rendering backed by ``phonenumbers``.

Output formats:
    national                   (213) 373-4253
    national-no-spaces         (213)373-4253
    international              +1 213-373-4253
    international-no-spaces    +1213-373-4253

Renderings follow Google's libphonenumber metadata as shipped in
``phonenumbers``. The JavaScript port (libphonenumber-js) groups some
international numbers differently, e.g. ``+1 213 373 4253`` for the US,
so exports produced by JS tooling may not match these byte for byte.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Tuple

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumber, PhoneNumberFormat

DEFAULT_OUTPUT_FORMAT = "international"

# output format -> (phonenumbers format, strip whitespace)
PHONE_OUTPUT_FORMATS: Dict[str, Tuple[int, bool]] = {
    "national": (PhoneNumberFormat.NATIONAL, False),
    "national-no-spaces": (PhoneNumberFormat.NATIONAL, True),
    "international": (PhoneNumberFormat.INTERNATIONAL, False),
    "international-no-spaces": (PhoneNumberFormat.INTERNATIONAL, True),
}

_WHITESPACE = re.compile(r"\s")


def parse_phone_number(
    text: str, default_country: Optional[str] = None
) -> Optional[PhoneNumber]:
    """
    Parse a phone number, using ``default_country`` for numbers without a
    leading ``+``.

    Returns:
        The parsed number, or None when the text cannot be parsed
    """
    region = str(default_country).upper() if default_country else None
    try:
        return phonenumbers.parse(text, region)
    except NumberParseException:
        return None


def is_valid_phone_number(number: PhoneNumber) -> bool:
    return phonenumbers.is_valid_number(number)


def render_phone_number(number: PhoneNumber, output_format: str) -> str:
    """Render a parsed number; unknown output formats render international."""
    number_format, strip_spaces = PHONE_OUTPUT_FORMATS.get(
        output_format, PHONE_OUTPUT_FORMATS[DEFAULT_OUTPUT_FORMAT]
    )
    rendered = phonenumbers.format_number(number, number_format)
    if strip_spaces:
        rendered = _WHITESPACE.sub("", rendered)
    return rendered


__all__ = [
    "DEFAULT_OUTPUT_FORMAT",
    "PHONE_OUTPUT_FORMATS",
    "is_valid_phone_number",
    "parse_phone_number",
    "render_phone_number",
]
