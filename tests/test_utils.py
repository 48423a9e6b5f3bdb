import pytest

from pyzpool import utils


@pytest.mark.parametrize('value,expected', [
    ("1024", 1024),
    ("1K", 1024),
    ("1.5G", int(1.5 * 1024 ** 3)),
    ("2TiB", 2 * 1024 ** 4),
    ("-", 0),
    ("", 0),
    (None, 0),
    (42, 42),
])
def test_parse_size(value, expected):
    assert utils.parse_size(value) == expected


def test_parse_size_rejects_garbage():
    with pytest.raises(ValueError):
        utils.parse_size("lots")


