# hwptext/core/processor/hwp5_helper/hwp5_decoder.py
"""
HWP 5.0 Compression Utilities

HWP 5.0 uses raw Deflate (no zlib header) for:
- DocInfo stream
- BodyText/Section and ViewText/Section streams
- BinData streams (images, OLE objects)

Compression flag is stored in FileHeader stream at bytes 36-40.
Some third-party writers emit zlib-wrapped data instead, which is
accepted as a fallback.
"""
import zlib
import logging
from typing import Optional

from hwptext.core.errors import DecompressFailedError
from hwptext.core.functions.config import DEFAULT_MAX_STREAM_SIZE

logger = logging.getLogger("hwptext.HWP5")

# zlib header CMF byte for 32K window deflate
ZLIB_HEADER_BYTE = 0x78


def _inflate(data: bytes, wbits: int, max_size: int, stream: Optional[str]) -> bytes:
    decompressor = zlib.decompressobj(wbits)
    result = decompressor.decompress(data, max_size + 1)
    if len(result) > max_size:
        raise DecompressFailedError(
            f"decompressed size exceeds limit of {max_size} bytes", stream=stream
        )
    if not decompressor.eof:
        raise zlib.error("incomplete or truncated stream")
    return result


def inflate(
    data: bytes,
    expected_size_hint: Optional[int] = None,
    max_size: int = DEFAULT_MAX_STREAM_SIZE,
    stream: Optional[str] = None,
) -> bytes:
    """
    Decompress a raw Deflate payload.

    Args:
        data: Compressed bytes
        expected_size_hint: Expected decompressed size (logged on mismatch)
        max_size: Maximum decompressed size accepted
        stream: Stream name for error context

    Returns:
        Decompressed bytes

    Raises:
        DecompressFailedError: Corrupt, truncated or oversized payload
    """
    try:
        result = _inflate(data, -15, max_size, stream)
    except zlib.error as raw_error:
        if not data or data[0] != ZLIB_HEADER_BYTE:
            raise DecompressFailedError(str(raw_error), stream=stream) from raw_error
        try:
            result = _inflate(data, 15, max_size, stream)
        except zlib.error:
            raise DecompressFailedError(str(raw_error), stream=stream) from raw_error
        logger.debug(f"Stream {stream} is zlib-wrapped, decompressed with header")

    if expected_size_hint is not None and len(result) != expected_size_hint:
        logger.debug(
            f"Stream {stream}: decompressed {len(result)} bytes, expected {expected_size_hint}"
        )
    return result


def decompress_stream(
    data: bytes,
    is_compressed_flag: bool = True,
    max_size: int = DEFAULT_MAX_STREAM_SIZE,
    stream: Optional[str] = None,
) -> bytes:
    """
    Decompress stream data if the document compression flag is set.

    Args:
        data: Stream binary data
        is_compressed_flag: Whether data should be decompressed
        max_size: Maximum decompressed size accepted
        stream: Stream name for error context

    Returns:
        Decompressed data (or original if not compressed)
    """
    if not is_compressed_flag:
        return data
    return inflate(data, max_size=max_size, stream=stream)


__all__ = [
    'inflate',
    'decompress_stream',
]
