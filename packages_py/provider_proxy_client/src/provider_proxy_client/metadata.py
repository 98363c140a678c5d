"""
Reject-direct flag resolution from provider metadata.

Metadata that cannot be read never raises: it resolves to
``MetadataFlag.UNKNOWN``, which the policy treats as not strict.
"""
import json
import logging
from typing import Any, Mapping, Optional, Union

from .constants import KEY_REJECT_DIRECT, STRICT_VALUES
from .models import MetadataFlag

logger = logging.getLogger(__name__)

MetadataInput = Optional[Union[bytes, bytearray, str, Mapping[str, Any]]]


def _decode_document(metadata: MetadataInput) -> Optional[Mapping[str, Any]]:
    if metadata is None:
        return None
    if isinstance(metadata, Mapping):
        return metadata

    if isinstance(metadata, (bytes, bytearray)):
        # Invalid bytes inside strings become U+FFFD; outside strings they
        # still fail JSON parsing below.
        text = bytes(metadata).decode("utf-8", errors="replace")
    elif isinstance(metadata, str):
        text = metadata
    else:
        logger.debug(f"Unsupported metadata type: {type(metadata).__name__}")
        return None

    if not text.strip():
        return None

    try:
        document = json.loads(text)
    except ValueError as e:
        logger.debug(f"Metadata is not valid JSON: {e}")
        return None

    if not isinstance(document, dict):
        logger.debug("Metadata JSON is not an object")
        return None
    return document


def _find_flag_key(document: Mapping[str, Any]) -> Optional[str]:
    """Exact key if present, else the first key equal to it ignoring case."""
    if KEY_REJECT_DIRECT in document:
        return KEY_REJECT_DIRECT
    for key in document:
        if isinstance(key, str) and key.casefold() == KEY_REJECT_DIRECT:
            return key
    return None


def resolve_reject_direct(metadata: MetadataInput) -> MetadataFlag:
    """Read the reject-direct flag as a tri-state.

    The key is matched case-insensitively, preferring an exact match.
    UNKNOWN covers absent, empty, undecodable or non-object documents and a
    flag that is present but not a string. A readable document without the
    flag, or with any string other than "true"/"1", is FALSE.
    """
    document = _decode_document(metadata)
    if document is None:
        return MetadataFlag.UNKNOWN

    key = _find_flag_key(document)
    if key is None:
        return MetadataFlag.FALSE

    value = document[key]
    if value is None:
        return MetadataFlag.FALSE
    if not isinstance(value, str):
        logger.debug(f"'{KEY_REJECT_DIRECT}' is not a string: {value!r}")
        return MetadataFlag.UNKNOWN

    return MetadataFlag.TRUE if value in STRICT_VALUES else MetadataFlag.FALSE


def is_strict(metadata: MetadataInput) -> bool:
    """Whether metadata demands proxied connections. UNKNOWN counts as False."""
    return resolve_reject_direct(metadata) is MetadataFlag.TRUE
