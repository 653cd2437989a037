import pytest

from typedstore.lib.text import implode, lowercase, split, uppercase


def test_case_conversion():
    assert uppercase("Mixed Case 1") == "MIXED CASE 1"
    assert lowercase("Mixed Case 1") == "mixed case 1"


def test_implode_joins_with_delimiter():
    assert implode(["a", "b", "c"], ", ") == "a, b, c"


def test_implode_stringifies_items():
    assert implode([1, 2.5, None], "|") == "1|2.5|None"


def test_implode_empty_and_single():
    assert implode([], ",") == ""
    assert implode(["only"], ",") == "only"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        ("", []),
        ("a", ["a"]),
        ("a,b,", ["a", "b"]),
        ("a,,b", ["a", "", "b"]),
        (",a", ["", "a"]),
        (",", [""]),
    ],
)
def test_split(text, expected):
    assert split(text, ",") == expected


def test_split_multichar_delimiter():
    assert split("a::b::c", "::") == ["a", "b", "c"]


def test_split_rejects_empty_delimiter():
    with pytest.raises(ValueError):
        split("abc", "")
