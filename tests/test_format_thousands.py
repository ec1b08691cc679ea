import pytest

from decimals import INT64_MIN, format_thousands


@pytest.mark.parametrize(
    "x,expected",
    [
        (0, "0"),
        (-0, "0"),  # 符号は付かない
        (7, "7"),
        (999, "999"),
        (-999, "-999"),
        (1000, "1,000"),
        (-1234, "-1,234"),
        (1234567, "1,234,567"),
        (-100000, "-100,000"),
        (INT64_MIN, "-9,223,372,036,854,775,808"),
    ],
)
def test_format_thousands_basic(x, expected):
    assert format_thousands(x) == expected


def test_format_thousands_custom_separator():
    assert format_thousands(1234567, sep=" ") == "1 234 567"
    assert format_thousands(-1234567, sep="'") == "-1'234'567"


def test_format_thousands_rejects_empty_separator():
    with pytest.raises(ValueError):
        format_thousands(1234, sep="")


def test_format_thousands_rejects_float():
    with pytest.raises(TypeError):
        format_thousands(1234.0)
