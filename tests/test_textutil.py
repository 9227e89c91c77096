import pytest

from minishell.textutil import INT_MAX, INT_MIN, atoi, split


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+5", 5),
        ("-7", -7),
        ("  \t\n-17abc", -17),
        ("0", 0),
    ],
)
def test_atoi_reads_leading_number(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["+-5", "--5", "-+1", "++3"])
def test_atoi_rejects_second_sign(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("text", ["", "abc", "   ", "-", "x12"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_none_is_zero():
    assert atoi(None) == 0


def test_atoi_limits():
    assert atoi(str(INT_MAX)) == INT_MAX
    assert atoi("-2147483648") == INT_MIN
    assert atoi(str(INT_MAX + 1)) == 0
    assert atoi(str(INT_MIN - 1)) == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


def test_split_drops_empty_fields():
    assert split("a::b:c:", ":") == ["a", "b", "c"]
    assert split(":::", ":") == []
    assert split("", ":") == []


def test_split_single_field():
    assert split("/usr/bin", ":") == ["/usr/bin"]


@pytest.mark.parametrize("text", ["/bin:/usr/bin", "::x::y", "a=b=c", "plain"])
def test_split_invariants(text):
    parts = split(text, ":")
    assert all(part and ":" not in part for part in parts)
    assert ":".join(parts) == ":".join(p for p in text.split(":") if p)


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "")
    with pytest.raises(ValueError):
        split(None, ":")