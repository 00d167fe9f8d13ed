"""
Address Decoder Lambda Function.

Resolves a three-word address to the centre and outline of its cell.
Accepts `words` ("cat.gnu.elk" or "cat gnu elk"), or a free-form `query`
that may be either an address or a "lat, lon" coordinate, in the JSON body or
the query string.
"""
from typing import Dict, Any, Optional

from botocore.exceptions import ClientError

from map3terms.codec import ThreeWordCodec
from map3terms.config import FORMAT_VERSION
from map3terms.query import Location, locate_address, resolve_query
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

_codec: Optional[ThreeWordCodec] = None


def get_codec() -> ThreeWordCodec:
    """Get the codec, loading the dictionary on first use."""
    global _codec
    if _codec is None:
        _codec = load_codec_from_env()
    return _codec


def locate(params: Dict[str, Any]) -> Location:
    """
    Resolve request parameters to a cell.

    Args:
        params: Request parameters with `words` or `query`

    Returns:
        Location of the requested cell

    Raises:
        ValueError: If neither parameter is given or the input is invalid
    """
    codec = get_codec()
    words = params.get('words')
    query = params.get('query')

    if words:
        if not isinstance(words, str):
            raise ValueError("Parameter words must be a string")
        return locate_address(codec, words)

    if query:
        if not isinstance(query, str):
            raise ValueError("Parameter query must be a string")
        return resolve_query(codec, query)

    raise ValueError("Missing required parameter: words or query")


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda handler for address -> coordinate decoding."""
    try:
        logger.info("Address decoder Lambda invoked")

        location = locate(get_request_params(event))

        logger.info(
            f"Resolved {location.address} -> "
            f"({location.center.lat:.5f}, {location.center.lon:.5f})"
        )

        return create_response(200, {
            'words': location.address,
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
