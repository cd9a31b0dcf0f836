"""Inflation of zlib-compressed byte buffers."""

from __future__ import annotations

import zlib
from typing import Iterable, Union

from .log import Level, log


class DecompressionError(ValueError):
    """Raised when a compressed buffer cannot be inflated."""


def decompress_gzip(data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> bytes:
    """Inflate a zlib stream and return the uncompressed bytes.

    An empty input gives an empty result. A corrupt or truncated stream
    raises :class:`DecompressionError`. Bytes after the end of the stream
    are ignored.
    """
    payload = bytes(data)
    if not payload:
        log(Level.WARNING, "Compressed bytes size is 0", engine=True)
        return b""

    inflater = zlib.decompressobj()
    try:
        result = inflater.decompress(payload)
    except zlib.error as exc:
        log(Level.ERROR, "Cannot inflate zlib stream - ", exc, engine=True)
        raise DecompressionError(f"cannot inflate zlib stream: {exc}") from exc

    if not inflater.eof:
        log(Level.ERROR, "Cannot inflate zlib stream - unexpected end of data", engine=True)
        raise DecompressionError("cannot inflate zlib stream: unexpected end of data")
    return result