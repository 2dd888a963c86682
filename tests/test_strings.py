import pytest

from cpsolve.strings import count_occurrences, z_array


def test_worked_example():
    assert count_occurrences("saippuakauppias", "pp") == 2


@pytest.mark.parametrize("s", ["aabxaayaab", "aaaa", "abcabcab", "x"])
def test_z_array_definition(s):
    z = z_array(s)
    assert len(z) == len(s)
    assert z[0] == 0
    for i in range(1, len(s)):
        length = z[i]
        assert s[i : i + length] == s[:length]
        assert i + length == len(s) or s[i + length] != s[length]


def test_z_array_empty():
    assert z_array("") == []


@pytest.mark.parametrize(
    "text, pattern",
    [("aaaaa", "aa"), ("abababa", "aba"), ("abc", "abcd"), ("hello", "l"), ("a$b$", "$")],
)
def test_count_matches_every_start(text, pattern):
    starts = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert count_occurrences(text, pattern) == len(starts)


def test_pattern_equal_to_text():
    assert count_occurrences("abc", "abc") == 1


def test_empty_pattern_rejected():
    with pytest.raises(ValueError):
        count_occurrences("abc", "")