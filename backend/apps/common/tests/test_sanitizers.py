import pytest

from apps.common.sanitizers import sanitize


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Chair", "Chair"),
        ("<b>Bold</b>", "&lt;b&gt;Bold&lt;/b&gt;"),
        ("Tom & Jerry", "Tom &amp; Jerry"),
        ("it's \"quoted\"", "it&#x27;s &quot;quoted&quot;"),
        (49, "49"),
        (9.5, "9.5"),
    ],
)
def test_sanitize_escapes_markup(raw, expected):
    assert sanitize(raw) == expected


def test_sanitize_returns_plain_str():
    assert type(sanitize("<i>")) is str
