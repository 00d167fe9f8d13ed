"""
Dictionary word lists stored in S3.

The word list is part of the address format, so deployments should pin the
object version they were built against.
"""
import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import ClientError

from map3terms.dictionary import parse_word_list

logger = logging.getLogger(__name__)


def fetch_dictionary_words(
    bucket: str,
    key: str,
    version_id: Optional[str] = None,
    s3_client: Optional[Any] = None,
) -> list[str]:
    """
    Download and parse a word list from S3.

    Args:
        bucket: S3 bucket name
        key: S3 object key
        version_id: Optional object version to pin
        s3_client: Optional boto3 S3 client (one is created if omitted)

    Returns:
        Words in file order

    Raises:
        ClientError: If the object cannot be read
    """
    if s3_client is None:
        s3_client = boto3.client('s3')

    params = {'Bucket': bucket, 'Key': key}
    if version_id:
        params['VersionId'] = version_id

    try:
        response = s3_client.get_object(**params)
    except ClientError as e:
        logger.error(f"Failed to fetch dictionary s3://{bucket}/{key}: {e}")
        raise

    text = response['Body'].read().decode('utf-8')
    words = parse_word_list(text)
    logger.info(
        f"Fetched dictionary s3://{bucket}/{key} "
        f"(version={response.get('VersionId', 'latest')}, words={len(words)})"
    )
    return words
