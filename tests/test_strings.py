import pytest

from wirefdf.strings import (
    atoi,
    atoi_base,
    itoa,
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strrchr,
)

SENTENCE = "This a test to find if my function work fine"
HEX_L = "0123456789abcdef"
HEX_U = "0123456789ABCDEF"


def test_strchr_finds_first_occurrence():
    idx = strchr(SENTENCE, "d")
    assert SENTENCE[idx] == "d"
    assert "d" not in SENTENCE[:idx]


def test_strchr_missing_returns_none():
    assert strchr(SENTENCE, "g") is None


def test_strchr_nul_returns_length():
    assert strchr(SENTENCE, "\0") == len(SENTENCE)
    assert strchr(SENTENCE, 0) == len(SENTENCE)


def test_strchr_stops_at_embedded_nul():
    assert strchr("ab\0cd", "c") is None
    assert strchr("ab\0cd", "\0") == 2


def test_strchr_accepts_bytes_and_int():
    assert strchr(b"hello", ord("l")) == 2


def test_strrchr_finds_last_occurrence():
    idx = strrchr(SENTENCE, "o")
    assert SENTENCE[idx] == "o"
    assert "o" not in SENTENCE[idx + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr(SENTENCE, "g") is None
    assert strrchr(SENTENCE, "\0") == len(SENTENCE)


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize(
    "first, second, count, expected",
    [
        ("test", "test", 5, 0),
        ("testee", "test", 6, ord("e")),
        ("", "", 2, 0),
        ("Hey", "Hello", 2, 0),
        ("Hey", "Hello", 3, ord("y") - ord("l")),
    ],
)
def test_strncmp_cases(first, second, count, expected):
    assert strncmp(first, second, count) == expected


def test_strncmp_zero_count():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_is_antisymmetric():
    assert strncmp("abc", "abd", 3) == -strncmp("abd", "abc", 3)
    assert strncmp("abc", "abd", 3) < 0


def test_strcmp():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") < 0
    assert strcmp("abcd", "abc") == ord("d")
    assert strcmp("ab\0x", "ab\0y") == 0


def test_strnstr_respects_length():
    assert strnstr("aaabcabcd", "cd", 8) is None
    assert strnstr("aaabcabcd", "cd", 9) == 7


def test_strnstr_empty_needle_and_zero_length():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "a", 0) is None


def test_strnstr_finds_first_match():
    haystack = "abcabc"
    idx = strnstr(haystack, "bc", len(haystack))
    assert haystack[idx:idx + 2] == "bc"
    assert "bc" not in haystack[: idx + 1]


def test_strlcpy_truncates():
    src = b"Hello I am a string !"
    dest = bytearray(100)
    assert strlcpy(dest, src, 10) == len(src)
    assert bytes(dest[:10]) == src[:9] + b"\0"


def test_strlcpy_size_zero_writes_nothing():
    src = b"Hello I am a string !"
    dest = bytearray(b"xyz")
    assert strlcpy(dest, src, 0) == len(src)
    assert dest == bytearray(b"xyz")


def test_strlcpy_full_copy():
    dest = bytearray(10)
    assert strlcpy(dest, b"abc", 10) == 3
    assert bytes(dest[:4]) == b"abc\0"


def test_strlcpy_too_small_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"abcdef", 10)


LOREM = b"lorem ipsum dolor sit amet"


def _dst_buffer():
    buf = bytearray(15)
    buf[:4] = b"dst\0"
    return buf


@pytest.mark.parametrize("size", [0, 1, 2])
def test_strlcat_size_below_dest_length(size):
    buf = _dst_buffer()
    assert strlcat(buf, LOREM, size) == len(LOREM) + size
    assert bytes(buf[:4]) == b"dst\0"


@pytest.mark.parametrize("size", [3, 4, 5, 6, 7, 8])
def test_strlcat_appends_within_size(size):
    buf = _dst_buffer()
    assert strlcat(buf, LOREM, size) == len(b"dst") + len(LOREM)
    copied = max(0, size - 4)
    assert bytes(buf[: 3 + copied + 1]) == b"dst" + LOREM[:copied] + b"\0"


def test_strlcat_missing_dest_with_zero_size():
    assert strlcat(None, LOREM, 0) == 0


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("4193 with words", 4193),
        ("words and 987", 0),
        ("+123", 123),
        ("0", 0),
        ("   +0", 0),
        ("   -0", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("   123abc456", 123),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == -2147483648


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0


def test_atoi_base_hex():
    assert atoi_base("ff", HEX_L) == int("ff", 16)
    assert atoi_base("FF", HEX_U) == int("FF", 16)


def test_atoi_base_signs_and_stop():
    assert atoi_base("  -+-1fz", HEX_L) == int("1f", 16)
    assert atoi_base("-1f", HEX_L) == -int("1f", 16)
    assert atoi_base("FF", HEX_L) == 0


def test_atoi_base_binary():
    assert atoi_base("1011", "01") == int("1011", 2)


@pytest.mark.parametrize("base", ["0", "", "0123456789+", "01-", "aa", "0 1"])
def test_atoi_base_invalid_base(base):
    with pytest.raises(ValueError):
        atoi_base("10", base)


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, "0"),
        (1, "1"),
        (-1, "-1"),
        (123, "123"),
        (-123, "-123"),
        (2147483647, "2147483647"),
        (-2147483648, "-2147483648"),
        (42, "42"),
        (-42, "-42"),
        (10, "10"),
    ],
)
def test_itoa_cases(number, expected):
    assert itoa(number) == expected


@pytest.mark.parametrize("number", [0, 7, -7, 2147483647, -2147483648, 90210])
def test_itoa_atoi_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2147483648)
    with pytest.raises(OverflowError):
        itoa(-2147483649)