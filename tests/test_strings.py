import pytest
from hypothesis import given
from hypothesis import strategies as st

from fmtkit.strings import (
    bounded_concat,
    bounded_copy,
    compare_prefix,
    find_char,
    find_within,
    map_indexed,
    rfind_char,
    split,
    substr,
    trim,
)

_plain_text = st.text(alphabet="abc ,xyz", max_size=30)


def test_split_example():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_accepts_integer_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


@given(_plain_text)
def test_split_words_are_nonempty_and_free_of_separator(text):
    words = split(text, " ")
    assert all(word and " " not in word for word in words)
    assert "".join(words) == text.replace(" ", "")


def test_find_char_first_occurrence():
    assert find_char("banana", "a") == 1


def test_find_char_missing():
    assert find_char("banana", "z") is None


def test_find_char_nul_finds_end():
    assert find_char("banana", "\0") == len("banana")
    assert find_char("banana", 0) == len("banana")


def test_find_char_code_is_narrowed_to_byte():
    assert find_char("banana", ord("n") + 256) == 2


def test_rfind_char_last_occurrence():
    assert rfind_char("banana", "a") == len("banana") - 1
    assert rfind_char("banana", "q") is None
    assert rfind_char("banana", "\0") == len("banana")


@given(_plain_text, st.sampled_from("abcxyz"))
def test_find_and_rfind_bracket_occurrences(text, char):
    first = find_char(text, char)
    last = rfind_char(text, char)
    if char in text:
        assert text[first] == char and text[last] == char
        assert first <= last
        assert char not in text[:first] and char not in text[last + 1 :]
    else:
        assert first is None and last is None


def test_compare_prefix_equal_within_limit():
    assert compare_prefix("abcdef", "abcxyz", 3) == 0


def test_compare_prefix_reports_code_difference():
    assert compare_prefix("abc", "abd", 3) == ord("c") - ord("d")


def test_compare_prefix_shorter_string():
    assert compare_prefix("ab", "abc", 5) == -ord("c")


def test_compare_prefix_zero_limit():
    assert compare_prefix("a", "z", 0) == 0


def test_compare_prefix_rejects_negative_limit():
    with pytest.raises(ValueError):
        compare_prefix("a", "b", -1)


@given(_plain_text, _plain_text, st.integers(min_value=0, max_value=40))
def test_compare_prefix_sign_matches_ordering(first, second, limit):
    result = compare_prefix(first, second, limit)
    left, right = first[:limit], second[:limit]
    if left == right:
        assert result == 0
    elif left < right:
        assert result < 0
    else:
        assert result > 0


def test_find_within_empty_needle():
    assert find_within("haystack", "", 0) == 0


def test_find_within_found_inside_limit():
    assert find_within("haystack", "stack", len("haystack")) == 3


def test_find_within_not_fully_inside_limit():
    assert find_within("haystack", "stack", 7) is None


@given(_plain_text, st.text(alphabet="abc", min_size=1, max_size=3), st.integers(0, 40))
def test_find_within_result_is_a_match(haystack, needle, limit):
    index = find_within(haystack, needle, limit)
    if index is None:
        assert needle not in haystack[:limit]
    else:
        assert haystack[index : index + len(needle)] == needle
        assert index + len(needle) <= limit


def test_trim_both_ends():
    assert trim("xxhelloxyx", "xy") == "hello"


def test_trim_everything():
    assert trim("xyxy", "xy") == ""


def test_trim_empty_charset_keeps_text():
    assert trim("  hi  ", "") == "  hi  "


@given(_plain_text)
def test_trim_result_has_no_set_chars_at_ends(text):
    result = trim(text, " ,")
    assert result in text
    if result:
        assert result[0] not in " ," and result[-1] not in " ,"


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_start_beyond_end():
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 99, 3) == ""


def test_substr_length_clipped():
    assert substr("hello", 3, 100) == "lo"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_map_indexed_passes_index_and_char():
    assert map_indexed("abc", lambda index, char: char * (index + 1)) == "abbccc"


@given(_plain_text)
def test_map_indexed_identity(text):
    assert map_indexed(text, lambda index, char: char) == text


def test_bounded_copy_truncates():
    assert bounded_copy("hello", 3) == ("he", 5)


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", 5)


@given(_plain_text, st.integers(min_value=1, max_value=40))
def test_bounded_copy_invariants(source, size):
    copied, length = bounded_copy(source, size)
    assert length == len(source)
    assert source.startswith(copied)
    assert len(copied) == min(len(source), size - 1)


def test_bounded_concat_fits():
    assert bounded_concat("foo", "bar", 10) == ("foobar", 6)


def test_bounded_concat_truncates():
    assert bounded_concat("foo", "bar", 5) == ("foob", 6)


def test_bounded_concat_size_not_larger_than_dest():
    assert bounded_concat("foo", "bar", 2) == ("foo", 2 + len("bar"))


@given(_plain_text, _plain_text, st.integers(min_value=0, max_value=70))
def test_bounded_concat_invariants(dest, source, size):
    result, length = bounded_concat(dest, source, size)
    assert result.startswith(dest)
    assert (dest + source).startswith(result)
    if size > len(dest):
        assert length == len(dest) + len(source)
        assert len(result) <= size - 1
    else:
        assert result == dest
        assert length == size + len(source)