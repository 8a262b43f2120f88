from __future__ import annotations

import pytest

from traversals.text import (
    LINE_TERMINATORS,
    NON_SEPARATING_SPACES,
    GroupPolicy,
    Text,
    all_of,
    any_of,
    chars_in,
    compose_ops,
    negate,
)


class TestBasics:
    def test_from_str_and_text(self) -> None:
        assert str(Text("abc")) == "abc"
        assert str(Text(Text("abc"))) == "abc"
        assert len(Text()) == 0

    def test_equality_with_text_and_str(self) -> None:
        assert Text("abc") == Text("abc")
        assert Text("abc") == "abc"
        assert "abc" == Text("abc")
        assert Text("abc") != "abd"
        assert Text("abc") != 3

    def test_copy_is_independent(self) -> None:
        original = Text("abc")
        clone = original.copy()
        clone.delete()
        assert original == "abc"

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, "a"), (2, "c"), (-1, "d"), (-4, "a"), (-10, "a")],
    )
    def test_char_at_normalizes(self, index: int, expected: str) -> None:
        assert Text("abcd").char_at(index) == expected

    def test_char_at_end_is_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            Text("").char_at(0)

    @pytest.mark.parametrize(
        ("begin", "end", "expected"),
        [(1, 3, "bc"), (-2, None, "de"), (0, 100, "abcde"), (3, 1, ""), (-100, 2, "ab")],
    )
    def test_sub_sequence(self, begin: int, end: int | None, expected: str) -> None:
        assert Text("abcde").sub_sequence(begin, end) == expected


class TestEditing:
    def test_append_and_extend(self) -> None:
        text = Text("a").append("bc").append(Text("d")).extend(["e", Text("f")])
        assert text == "abcdef"

    def test_append_slice(self) -> None:
        assert Text("x").append("hello", 1, -1) == "xell"

    @pytest.mark.parametrize(
        ("offset", "expected"),
        [(0, "--ab"), (1, "a--b"), (-1, "a--b"), (50, "ab--"), (-50, "--ab")],
    )
    def test_insert_clamps(self, offset: int, expected: str) -> None:
        assert Text("ab").insert(offset, "--") == expected

    def test_delete_all(self) -> None:
        assert Text("abc").delete() == ""

    @pytest.mark.parametrize(
        ("index", "expected"),
        [(0, "bc"), (-1, "ab"), (10, "abc"), (-10, "bc")],
    )
    def test_delete_one(self, index: int, expected: str) -> None:
        assert Text("abc").delete(index) == expected

    def test_delete_range(self) -> None:
        assert Text("abcdef").delete(1, -1) == "af"

    def test_replace_variants(self) -> None:
        assert Text("abc").replace("xyz") == "xyz"
        assert Text("abc").replace("X", 1) == "aXc"
        assert Text("abc").replace("--", -1) == "ab--"
        assert Text("abcdef").replace("_", 1, 4) == "a_ef"

    def test_filter(self) -> None:
        assert Text("a1b2c3").filter(str.isalpha) == "abc"

    def test_filter_range_tracks_shrinking_end(self) -> None:
        assert Text("1a2b3c").filter(str.isalpha, 0, 4) == "ab3c"

    def test_filter_single_index(self) -> None:
        assert Text("a1b").filter(str.isalpha, 1) == "ab"
        assert Text("a1b").filter(str.isalpha, 0) == "a1b"

    def test_map(self) -> None:
        assert Text("abc").map(str.upper) == "ABC"
        assert Text("abc").map(str.upper, 1) == "aBc"
        assert Text("abcd").map(str.upper, 1, 3) == "aBCd"

    def test_map_rejects_wide_results(self) -> None:
        with pytest.raises(ValueError):
            Text("ab").map(lambda c: c * 2)

    def test_flat_map_widens_and_keeps_scanning(self) -> None:
        assert Text("abc").flat_map(lambda c: c * 2) == "aabbcc"

    def test_flat_map_can_delete(self) -> None:
        assert Text("a-b-c").flat_map(lambda c: "" if c == "-" else c) == "abc"

    def test_flat_map_range(self) -> None:
        assert Text("abcd").flat_map(lambda c: c.upper() * 3, 1, 3) == "aBBBCCCd"

    def test_flat_map_single_index(self) -> None:
        assert Text("abc").flat_map(lambda c: "<" + c + ">", -1) == "ab<c>"


class TestGroup:
    def test_alternating_runs(self) -> None:
        groups = Text("ab  cd e").group(str.isspace)
        assert [str(g) for g in groups] == ["ab", "  ", "cd", " ", "e"]

    def test_leading_delimiters(self) -> None:
        groups = Text(" \tx").group(str.isspace)
        assert [str(g) for g in groups] == [" \t", "x"]

    def test_single_group(self) -> None:
        assert Text("hello").group(str.isspace) == [Text("hello")]

    def test_empty_text_has_no_groups(self) -> None:
        assert Text("").group(str.isspace) == []

    def test_joining_groups_restores_text(self) -> None:
        text = Text("id,name\n47,Jane Doe")
        assert Text().extend(text.group(chars_in(",\n"))) == text


class TestCharHelpers:
    def test_chars_in(self) -> None:
        comma = chars_in(",;")
        assert comma(",") and comma(";") and not comma("a")

    def test_combinators(self) -> None:
        vowel = chars_in("aeiou")
        assert negate(vowel)("b")
        assert all_of(vowel, str.islower)("a")
        assert not all_of(vowel, str.isupper)("a")
        assert any_of(vowel, str.isdigit)("7")

    def test_compose_ops(self) -> None:
        shout = compose_ops(str.lower, str.upper)
        assert shout("a") == "A"
        assert compose_ops()("q") == "q"

    def test_line_terminators(self) -> None:
        assert set("\n\r") <= set(LINE_TERMINATORS)


class TestGroupPolicy:
    def test_chars(self) -> None:
        assert GroupPolicy.chars(",").is_delimiting(",")

    def test_empty_chars_delimit_nothing(self) -> None:
        policy = GroupPolicy.chars("")
        assert not any(policy.is_delimiting(c) for c in ", \n")

    def test_requires_callable(self) -> None:
        with pytest.raises(TypeError):
            GroupPolicy(is_delimiting=",")  # type: ignore[arg-type]

    def test_presets(self) -> None:
        assert GroupPolicy.whitespace().is_delimiting("\t")
        assert GroupPolicy.line_terminators().is_delimiting("\r")
        assert not GroupPolicy.line_terminators().is_delimiting(" ")

    def test_whitespace_excludes_no_break_spaces(self) -> None:
        is_delimiting = GroupPolicy.whitespace().is_delimiting
        assert all(is_delimiting(c) for c in " \t\n\r\u2028\u3000")
        assert not any(is_delimiting(c) for c in NON_SEPARATING_SPACES)
