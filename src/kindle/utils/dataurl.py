"""Inline data-URL encoding for descriptor content."""

from typing import Union
from urllib.parse import quote, unquote


DATA_URL_PREFIX = "data:,"

# Reserved characters left literal in a URL path segment.
_PATH_SEGMENT_SAFE = "$&+:=@"


def encode_data_url(contents: Union[str, bytes]) -> str:
    """Embed content as ``data:,<percent-encoded text>``.

    No media type and no ``;base64`` token: the guest-side interpreter
    reads the escaped bytes back verbatim. Text is escaped as UTF-8;
    bytes (e.g. DER certificates) are escaped as-is.
    """
    if isinstance(contents, bytes):
        return DATA_URL_PREFIX + quote(contents, safe=_PATH_SEGMENT_SAFE)
    return DATA_URL_PREFIX + quote(contents, safe=_PATH_SEGMENT_SAFE, encoding="utf-8")


def decode_data_url(source: str) -> str:
    """Recover the text embedded by :func:`encode_data_url`."""
    if not source.startswith(DATA_URL_PREFIX):
        raise ValueError(f"Not an inline data URL: {source[:32]!r}")
    return unquote(source[len(DATA_URL_PREFIX):], encoding="utf-8", errors="strict")
