"""Unit tests for case-conversion styles."""

import pytest

from row_transform.utils.case_styles import CASE_STYLES, change_case, split_words


@pytest.mark.unit
class TestSplitWords:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("fooBar", ["foo", "Bar"]),
            ("XMLHttpRequest", ["XML", "Http", "Request"]),
            ("snake_case_text", ["snake", "case", "text"]),
            ("  --padded--  ", ["padded"]),
            ("version 2 beta", ["version", "2", "beta"]),
            ("", []),
        ],
    )
    def test_splits(self, text, expected) -> None:
        assert split_words(text) == expected


@pytest.mark.unit
class TestChangeCase:
    @pytest.mark.parametrize(
        "style, text, expected",
        [
            ("capitalCase", "john", "John"),
            ("capitalCase", "john smith", "John Smith"),
            ("camelCase", "user id", "userId"),
            ("camelCase", "User-Id", "userId"),
            ("pascalCase", "user id", "UserId"),
            ("pascalCase", "version 2 beta", "Version_2Beta"),
            ("constantCase", "userId", "USER_ID"),
            ("snakeCase", "userId", "user_id"),
            ("dotCase", "User Id", "user.id"),
            ("paramCase", "User Id", "user-id"),
            ("pathCase", "User Id", "user/id"),
            ("headerCase", "content type", "Content-Type"),
            ("noCase", "XMLHttpRequest", "xml http request"),
            ("sentenceCase", "HELLO WORLD", "Hello world"),
            ("lowerCase", "MiXeD Text", "mixed text"),
            ("upperCase", "MiXeD text", "MIXED TEXT"),
        ],
    )
    def test_styles(self, style, text, expected) -> None:
        assert change_case(style, text) == expected

    def test_lower_and_upper_keep_separators(self) -> None:
        assert change_case("upperCase", "a-b_c") == "A-B_C"

    def test_unknown_style_returns_text(self) -> None:
        assert change_case("titleCase", "keep Me") == "keep Me"

    def test_empty_text(self) -> None:
        for style in CASE_STYLES:
            assert change_case(style, "") == ""

    def test_non_ascii_letters(self) -> None:
        assert change_case("snakeCase", "Crème Brûlée") == "crème_brûlée"
