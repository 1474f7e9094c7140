import pytest

from versionkit.utils.strings import quote


def test_quote_none_is_bare_null():
    assert quote(None) == "null"


def test_quote_wraps_plain_text():
    assert quote("1.2.3") == '"1.2.3"'
    assert quote("") == '""'


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('a"b', '"a\\"b"'),
        ("a\\b", '"a\\\\b"'),
        ("a\nb", '"a\\nb"'),
        ("a\tb", '"a\\tb"'),
        ("a\x01b", '"a\\u0001b"'),
        ("a\x1fb", '"a\\u001Fb"'),
    ],
)
def test_quote_escapes_special_characters(raw, expected):
    assert quote(raw) == expected


def test_quote_keeps_non_ascii():
    assert quote("ÿé") == '"ÿé"'
