"""
Shared utilities for the address Lambda functions.
"""
import os
import json
import logging
from typing import Dict, Any, Optional

from map3terms.codec import ThreeWordCodec
from map3terms.config import DEFAULT_DICTIONARY_SIZE
from map3terms.dictionary import generate_vocabulary, load_words_from_file
from map3terms.grid import Bounds, Coordinate
from map3terms.storage import fetch_dictionary_words


def setup_logger(logger_name: str) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    The level comes from the LOG_LEVEL environment variable (default INFO).

    Args:
        logger_name: Name of the logger

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


logger = setup_logger(__name__)


def get_env_var(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable key
        default: Optional default value

    Returns:
        Environment variable value, stripped of surrounding whitespace

    Raises:
        ValueError: If variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(f"Environment variable {key} is required but not set")
    return value.strip()


def create_response(
    status_code: int,
    body: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Create a standardized API Gateway response.

    Args:
        status_code: HTTP status code
        body: Response body dictionary
        headers: Optional custom headers

    Returns:
        API Gateway formatted response
    """
    default_headers = {
        'Content-Type': 'application/json',
        'Access-Control-Allow-Origin': '*',
        'Access-Control-Allow-Headers': 'Content-Type',
        'Access-Control-Allow-Methods': 'GET,POST,OPTIONS'
    }

    if headers:
        default_headers.update(headers)

    return {
        'statusCode': status_code,
        'headers': default_headers,
        'body': json.dumps(body)
    }


def get_request_params(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge query string parameters and JSON body of an API Gateway event.

    Body values win over query string values.

    Raises:
        ValueError: If the body is not a JSON object
    """
    params = dict(event.get('queryStringParameters') or {})

    body = event.get('body')
    if body:
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except json.JSONDecodeError:
                raise ValueError("Request body must be valid JSON") from None
        if not isinstance(body, dict):
            raise ValueError("Request body must be a JSON object")
        params.update(body)

    return params


def coordinate_to_dict(coordinate: Coordinate) -> Dict[str, float]:
    return {'lat': coordinate.lat, 'lon': coordinate.lon}


def bounds_to_dict(bounds: Bounds) -> Dict[str, float]:
    return bounds._asdict()


class DictionaryLoadError(RuntimeError):
    """The configured dictionary could not be turned into a codec."""


def load_codec_from_env() -> ThreeWordCodec:
    """
    Build the codec from the configured dictionary source.

    Sources, in order of preference:
    1. S3 object DICTIONARY_BUCKET/DICTIONARY_KEY (optionally DICTIONARY_VERSION_ID)
    2. Local file DICTIONARY_PATH
    3. Generated vocabulary of DICTIONARY_SIZE words

    Returns:
        Codec using the default grid and scramble constants

    Raises:
        DictionaryLoadError: If the configuration or the word list is invalid
        ClientError: If the word list cannot be read from S3
    """
    try:
        bucket = os.environ.get('DICTIONARY_BUCKET', '').strip()
        path = os.environ.get('DICTIONARY_PATH', '').strip()

        if bucket:
            key = get_env_var('DICTIONARY_KEY')
            version_id = os.environ.get('DICTIONARY_VERSION_ID') or None
            words = fetch_dictionary_words(bucket, key, version_id)
        elif path:
            logger.info(f"Loading dictionary from {path}")
            words = load_words_from_file(path)
        else:
            size = int(os.environ.get('DICTIONARY_SIZE', str(DEFAULT_DICTIONARY_SIZE)))
            logger.info(f"Using generated dictionary of {size} words")
            words = generate_vocabulary(size)

        return ThreeWordCodec.from_words(words)
    except (ValueError, OSError) as e:
        logger.error(f"Invalid dictionary configuration: {e}")
        raise DictionaryLoadError(str(e)) from e
