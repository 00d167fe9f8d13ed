"""
Free-form user input: "lat, lon" or a three-word address.

Map views display addresses with spaces ("cat gnu elk") while the codec uses
the canonical delimiter ("cat.gnu.elk"); the helpers here convert between the
two.
"""
import re
from typing import NamedTuple

from map3terms.codec import ThreeWordCodec
from map3terms.config import ADDRESS_DELIMITER
from map3terms.errors import GridOutOfRangeError
from map3terms.grid import Bounds, Coordinate

COORDINATE_PATTERN = re.compile(
    r'^\s*(-?[0-9]{1,2}(?:\.[0-9]+)?),\s*(-?[0-9]{1,3}(?:\.[0-9]+)?)\s*$'
)
SEPARATOR = re.compile(r'\s*' + re.escape(ADDRESS_DELIMITER) + r'\s*|\s+')


class Location(NamedTuple):
    address: str
    center: Coordinate
    bounds: Bounds


def is_coordinate(text: str) -> bool:
    return COORDINATE_PATTERN.match(text) is not None


def parse_coordinate(text: str) -> Coordinate:
    """
    Parse "lat, lon".

    Raises:
        ValueError: If the text is not a coordinate
        GridOutOfRangeError: If lat/lon are outside the legal domain
    """
    match = COORDINATE_PATTERN.match(text)
    if not match:
        raise ValueError(f"Invalid coordinate format, use 'lat, lon': {text!r}")

    lat, lon = float(match.group(1)), float(match.group(2))
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0):
        raise GridOutOfRangeError(f"Coordinates out of range: ({lat}, {lon})")
    return Coordinate(lat, lon)


def normalize_address(text: str) -> str:
    """Turn a space separated address into canonical form."""
    return SEPARATOR.sub(ADDRESS_DELIMITER, text.strip())


def display_address(address: str) -> str:
    return address.replace(ADDRESS_DELIMITER, ' ')


def locate_cell(codec: ThreeWordCodec, cell_id: int) -> Location:
    return Location(
        address=codec.address_of_cell(cell_id),
        center=codec.grid.center_of(cell_id),
        bounds=codec.grid.bounds_of(cell_id),
    )


def locate_address(codec: ThreeWordCodec, text: str) -> Location:
    """Locate an address given with dots or spaces between the words."""
    return locate_cell(codec, codec.cell_of_address(normalize_address(text)))


def resolve_query(codec: ThreeWordCodec, text: str) -> Location:
    """
    Locate the cell a query refers to.

    Coordinates are snapped to the cell containing them; anything else is
    decoded as an address.
    """
    if is_coordinate(text):
        coordinate = parse_coordinate(text)
        return locate_cell(codec, codec.grid.cell_of(coordinate.lat, coordinate.lon))
    return locate_address(codec, text)
