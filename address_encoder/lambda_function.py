"""
Address Encoder Lambda Function.

Converts a coordinate into the three-word address of the ~3 m cell that
contains it. Accepts `lat` and `lon` (JSON body or query string) or a single
`coordinates` string in "lat, lon" form.
"""
import math
from typing import Dict, Any, Optional

from botocore.exceptions import ClientError

from map3terms.codec import ThreeWordCodec
from map3terms.config import FORMAT_VERSION
from map3terms.grid import Coordinate
from map3terms.query import display_address, locate_cell, parse_coordinate
from shared.utils import (
    DictionaryLoadError,
    setup_logger,
    create_response,
    get_request_params,
    coordinate_to_dict,
    bounds_to_dict,
    load_codec_from_env,
)

# Initialize logger
logger = setup_logger(__name__)

# Built on first invocation and reused while the container is warm
_codec: Optional[ThreeWordCodec] = None


def get_codec() -> ThreeWordCodec:
    """Get the codec, loading the dictionary on first use."""
    global _codec
    if _codec is None:
        _codec = load_codec_from_env()
    return _codec


def parse_number(value: Any, name: str) -> float:
    """
    Parse a finite number from a request parameter.

    Raises:
        ValueError: If the value is missing or not a finite number
    """
    if value is None or value == '':
        raise ValueError(f"Missing required parameter: {name}")
    if isinstance(value, bool):
        raise ValueError(f"Parameter {name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Parameter {name} must be a number") from None
    if not math.isfinite(number):
        raise ValueError(f"Parameter {name} must be finite")
    return number


def extract_coordinate(params: Dict[str, Any]) -> Coordinate:
    """Get the requested coordinate from request parameters."""
    coordinates = params.get('coordinates')
    if coordinates:
        if not isinstance(coordinates, str):
            raise ValueError("Parameter coordinates must be a 'lat, lon' string")
        return parse_coordinate(coordinates)

    return Coordinate(
        parse_number(params.get('lat'), 'lat'),
        parse_number(params.get('lon'), 'lon'),
    )


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for coordinate -> address encoding."""
    try:
        logger.info("Address encoder Lambda invoked")

        coordinate = extract_coordinate(get_request_params(event))
        codec = get_codec()

        location = locate_cell(codec, codec.grid.cell_of(coordinate.lat, coordinate.lon))

        logger.info(
            f"Encoded ({coordinate.lat:.5f}, {coordinate.lon:.5f}) -> {location.address}"
        )

        return create_response(200, {
            'words': location.address,
            'display': display_address(location.address),
            'center': coordinate_to_dict(location.center),
            'bounds': bounds_to_dict(location.bounds),
            'format_version': FORMAT_VERSION
        })

    except ValueError as e:
        logger.warning(f"Validation error: {e}")
        return create_response(400, {'error': str(e)})
    except DictionaryLoadError as e:
        logger.error(f"Dictionary configuration error: {e}")
        return create_response(500, {'error': 'Failed to load dictionary'})
    except ClientError as e:
        logger.error(f"AWS service error: {e}")
        return create_response(500, {'error': 'Failed to load dictionary'})
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        return create_response(500, {'error': 'Internal server error'})
