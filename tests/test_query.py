import pytest

from map3terms.errors import GridOutOfRangeError, MalformedAddressError
from map3terms.grid import Coordinate
from map3terms.query import (
    display_address,
    is_coordinate,
    locate_address,
    locate_cell,
    normalize_address,
    parse_coordinate,
    resolve_query,
)


@pytest.mark.parametrize("text", ["51.50844113, -0.116708278", "-33,151", "0.5,  -179.25", " 12, 34 "])
def test_is_coordinate(text):
    assert is_coordinate(text)


@pytest.mark.parametrize("text", ["cat.gnu.elk", "51.5 -0.1", "51.5,", "123.4, 5", "abc, def"])
def test_is_not_coordinate(text):
    assert not is_coordinate(text)


def test_parse_coordinate():
    assert parse_coordinate("51.5, -0.25") == Coordinate(51.5, -0.25)


def test_parse_coordinate_out_of_range():
    with pytest.raises(GridOutOfRangeError):
        parse_coordinate("95, 10")
    with pytest.raises(GridOutOfRangeError):
        parse_coordinate("10, 190")


def test_parse_coordinate_rejects_words():
    with pytest.raises(ValueError):
        parse_coordinate("cat.gnu.elk")


@pytest.mark.parametrize("text", ["cat gnu elk", "  cat   gnu elk ", "cat . gnu . elk", "cat.gnu.elk"])
def test_normalize_address(text):
    assert normalize_address(text) == "cat.gnu.elk"


def test_normalize_keeps_empty_tokens_malformed(toy_codec):
    with pytest.raises(MalformedAddressError):
        toy_codec.decode(normalize_address("cat..elk"))


def test_display_address():
    assert display_address("cat.gnu.elk") == "cat gnu elk"


def test_resolve_coordinate_query(toy_codec):
    location = resolve_query(toy_codec, "1.5, 2.5")
    assert location.address == toy_codec.encode(1.5, 2.5)
    assert location.center == Coordinate(5.625, 5.625)
    assert location.bounds == (0.0, 0.0, 11.25, 11.25)


def test_resolve_word_query(toy_codec):
    location = resolve_query(toy_codec, "Cat Gnu Elk")
    assert location.address == "cat.gnu.elk"
    assert location.center == toy_codec.grid.center_of(0)


def test_locate_cell_matches_both_query_forms(toy_codec):
    expected = locate_cell(toy_codec, 272)
    assert expected.center == Coordinate(5.625, 5.625)
    assert resolve_query(toy_codec, "1.5, 2.5") == expected
    assert locate_address(toy_codec, expected.address.replace('.', ' ')) == expected
