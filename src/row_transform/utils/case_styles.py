"""
Case-conversion styles for the string-format transformation.

Every style except ``lowerCase``/``upperCase`` first splits the text into
words: boundaries are lower-to-upper transitions (``fooBar``), acronym ends
(``XMLHttp``) and any run of non-alphanumeric characters.

Example:
    >>> change_case("capitalCase", "john smith")
    'John Smith'
    >>> change_case("snakeCase", "userId")
    'user_id'
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List

_SPLIT_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_SPLIT_UPPER_UPPER = re.compile(r"([A-Z])([A-Z][a-z])")
_STRIP = re.compile(r"[\W_]+")


def split_words(text: str) -> List[str]:
    """Split text into words on case transitions and separators."""
    marked = _SPLIT_LOWER_UPPER.sub("\\1\0\\2", text)
    marked = _SPLIT_UPPER_UPPER.sub("\\1\0\\2", marked)
    marked = _STRIP.sub("\0", marked)
    return [word for word in marked.strip("\0").split("\0") if word]


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def _pascal_word(word: str, index: int) -> str:
    # Digits can't start a word after the first, so prefix them.
    if index > 0 and word[:1].isdigit():
        return f"_{word[:1]}{word[1:].lower()}"
    return _capitalize(word)


def _join(text: str, delimiter: str, transform: Callable[[str, int], str]) -> str:
    return delimiter.join(
        transform(word, index) for index, word in enumerate(split_words(text))
    )


def no_case(text: str) -> str:
    return _join(text, " ", lambda word, _: word.lower())


def camel_case(text: str) -> str:
    return _join(
        text,
        "",
        lambda word, index: word.lower() if index == 0 else _pascal_word(word, index),
    )


def pascal_case(text: str) -> str:
    return _join(text, "", _pascal_word)


def capital_case(text: str) -> str:
    return _join(text, " ", lambda word, _: _capitalize(word))


def header_case(text: str) -> str:
    return _join(text, "-", lambda word, _: _capitalize(word))


def sentence_case(text: str) -> str:
    return _join(
        text,
        " ",
        lambda word, index: _capitalize(word) if index == 0 else word.lower(),
    )


def constant_case(text: str) -> str:
    return _join(text, "_", lambda word, _: word.upper())


def snake_case(text: str) -> str:
    return _join(text, "_", lambda word, _: word.lower())


def dot_case(text: str) -> str:
    return _join(text, ".", lambda word, _: word.lower())


def param_case(text: str) -> str:
    return _join(text, "-", lambda word, _: word.lower())


def path_case(text: str) -> str:
    return _join(text, "/", lambda word, _: word.lower())


CASE_STYLES: Dict[str, Callable[[str], str]] = {
    "lowerCase": str.lower,
    "upperCase": str.upper,
    "camelCase": camel_case,
    "capitalCase": capital_case,
    "constantCase": constant_case,
    "dotCase": dot_case,
    "headerCase": header_case,
    "noCase": no_case,
    "paramCase": param_case,
    "pascalCase": pascal_case,
    "pathCase": path_case,
    "sentenceCase": sentence_case,
    "snakeCase": snake_case,
}


def change_case(style: str, text: str) -> str:
    """Apply a named case style; unrecognized styles return the text unchanged."""
    converter = CASE_STYLES.get(style)
    if converter is None:
        return text
    return converter(text)


__all__ = ["CASE_STYLES", "change_case", "split_words"]
