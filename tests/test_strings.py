import pytest

from ftkit.strings import (
    atoi,
    itoa,
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


def test_strlen_examples():
    assert strlen("Veritasium") == len("Veritasium")
    assert strlen("Cappele") == len("Cappele")
    assert strlen("") == 0


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")


def test_strlcpy_truncates():
    copied, total = strlcpy("Veritasium", 5)
    assert copied == "Veri"
    assert total == len("Veritasium")


def test_strlcpy_fits():
    copied, total = strlcpy("Veritasium", 20)
    assert copied == "Veritasium"
    assert total == len("Veritasium")


def test_strlcpy_zero_size_writes_nothing():
    copied, total = strlcpy("Veritasium", 0)
    assert copied is None
    assert total == len("Veritasium")


@pytest.mark.parametrize("size", [1, 2, 3, 7, 11, 50])
def test_strlcpy_length_invariant(size):
    copied, _ = strlcpy("Veritasium", size)
    assert len(copied) == min(len("Veritasium"), size - 1)
    assert "Veritasium".startswith(copied)


def test_strlcat_source_example():
    dest = "Science Channel "
    result, total = strlcat(dest, "Veritasium", 20)
    assert len(result) == 19
    assert result.startswith(dest)
    assert total == len(dest) + len("Veritasium")


def test_strlcat_enough_room():
    result, total = strlcat("foo", "bar", 10)
    assert result == "foo" + "bar"
    assert total == len("foobar")


def test_strlcat_size_not_larger_than_dest():
    result, total = strlcat("foobar", "xyz", 4)
    assert result == "foobar"
    assert total == 4 + len("xyz")


def test_strlcat_none_with_zero_size():
    assert strlcat(None, "abc", 0) == (None, 0)


def test_strlcat_none_with_size_raises():
    with pytest.raises(TypeError):
        strlcat(None, "abc", 5)


def test_strchr_examples():
    text = "Veritasium"
    index = strchr(text, "a")
    assert text[index:] == "asium"
    assert strchr(text, "x") is None


def test_strchr_int_and_nul():
    text = "Veritasium"
    assert strchr(text, ord("V")) == 0
    assert strchr(text, 0) == len(text)
    assert strchr(text, "\0") == len(text)


def test_strchr_finds_first():
    text = "banana"
    assert strchr(text, "a") == text.index("a")


def test_strrchr_examples():
    text = "Veritasium"
    index = strrchr(text, "a")
    assert text[index:] == "asium"
    assert strrchr(text, "x") is None
    assert strrchr(text, 0) == len(text)


def test_strrchr_finds_last():
    text = "banana"
    assert strrchr(text, "a") == text.rindex("a")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_source_example():
    result = strncmp("Veritasium", "VeriTasium", 8)
    assert result == ord("t") - ord("T")


def test_strncmp_equal_and_limited():
    assert strncmp("Veritasium", "Veritasium", 20) == 0
    assert strncmp("Veritasium", "VeriTasium", 4) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)
    assert strncmp("abc", "abd", 3) < 0


def test_strncmp_prefix():
    assert strncmp("abc", "ab", 5) == ord("c")
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("ab", "abc", 2) == 0


def test_strnstr_source_example():
    text = "Veritasium Science Channel"
    index = strnstr(text, "Science", len(text))
    assert text[index:] == "Science Channel"


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_needle_must_fit_within_length():
    text = "Veritasium Science Channel"
    start = text.index("Science")
    assert strnstr(text, "Science", start + len("Science")) == start
    assert strnstr(text, "Science", start + len("Science") - 1) is None


def test_strnstr_missing():
    assert strnstr("Veritasium", "xyz", 10) is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12345", 12345),
        ("-12345", -12345),
        ("+12345", 12345),
        ("   12345", 12345),
        ("\t\n\v\f\r12345", 12345),
        ("12345abc", 12345),
        ("123abc45", 123),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_source_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_without_digits():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("+-5") == 0


@pytest.mark.parametrize("number, expected", [
    (0, "0"),
    (123, "123"),
    (-123, "-123"),
    (2147483647, "2147483647"),
    (-2147483648, "-2147483648"),
])
def test_itoa_source_cases(number, expected):
    assert itoa(number) == expected


@pytest.mark.parametrize("number", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")