# hwptext/core/processor/hwp5_helper/hwp5_distdoc.py
"""
HWP 5.0 Distribution Document Decryption

Distribution (restricted-copy) documents keep their body in ViewText/SectionN
instead of BodyText/SectionN. Each ViewText stream is laid out as:

- One DISTRIBUTE_DOC_DATA record (tag 28) with a 256-byte payload
- AES-128-ECB encrypted section data (deflated when the document is compressed)

The 256-byte payload is scrambled with a key stream from the MSVC rand()
LCG seeded by its first 4 bytes; the AES key sits in the unscrambled block
at offset 4 + (seed & 0x0F).
"""
import struct
import logging
from typing import Optional

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from hwptext.core.errors import DecryptFailedError, InvalidRecordHeaderError
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    HWPTAG_DISTRIBUTE_DOC_DATA,
    RECORD_EXTENDED_SIZE_MARKER,
    RECORD_HEADER_SIZE,
)
from hwptext.core.processor.hwp5_helper.hwp5_record import iter_records

logger = logging.getLogger("hwptext.HWP5")

DIST_DATA_SIZE = 256
AES_KEY_SIZE = 16
AES_BLOCK_SIZE = 16


class MsvcRand:
    """MSVC rand(): 32-bit LCG, 15-bit output."""

    def __init__(self, seed: int):
        self.state = seed & 0xFFFFFFFF

    def next(self) -> int:
        self.state = (self.state * 214013 + 2531011) & 0xFFFFFFFF
        return (self.state >> 16) & 0x7FFF


def descramble_dist_data(data: bytes) -> bytes:
    """
    Undo the key-stream scrambling of a DISTRIBUTE_DOC_DATA payload.

    The first 4 bytes (the seed) are left as they are.
    """
    seed = struct.unpack_from('<I', data, 0)[0]
    rand = MsvcRand(seed)
    result = bytearray(data[:DIST_DATA_SIZE])
    key = 0
    remaining = 0

    for i in range(DIST_DATA_SIZE):
        if remaining == 0:
            key = rand.next() & 0xFF
            remaining = (rand.next() & 0x0F) + 1
        if i >= 4:
            result[i] ^= key
        remaining -= 1

    return bytes(result)


def extract_aes_key(dist_data: bytes) -> bytes:
    """Get the AES-128 key from a 256-byte DISTRIBUTE_DOC_DATA payload."""
    decoded = descramble_dist_data(dist_data)
    seed = struct.unpack_from('<I', decoded, 0)[0]
    offset = 4 + (seed & 0x0F)
    return decoded[offset:offset + AES_KEY_SIZE]


def decrypt_view_text(data: bytes, stream: Optional[str] = None) -> bytes:
    """
    Decrypt a ViewText/SectionN stream.

    Args:
        data: Raw stream bytes
        stream: Stream name for error context

    Returns:
        Decrypted section data, still deflated if the document is compressed

    Raises:
        DecryptFailedError: Key record missing or malformed
    """
    try:
        first = next(iter_records(data, stream), None)
    except InvalidRecordHeaderError as e:
        raise DecryptFailedError(f"unreadable key record: {e.message}", stream=stream) from e

    if first is None or first.tag_id != HWPTAG_DISTRIBUTE_DOC_DATA:
        raise DecryptFailedError("missing DISTRIBUTE_DOC_DATA record", stream=stream)
    if first.size < DIST_DATA_SIZE:
        raise DecryptFailedError(
            f"DISTRIBUTE_DOC_DATA payload too short ({first.size} bytes)", stream=stream
        )

    key = extract_aes_key(first.payload)
    body_start = _record_end(data, first.size)
    encrypted = data[body_start:]
    usable = len(encrypted) - (len(encrypted) % AES_BLOCK_SIZE)
    if usable != len(encrypted):
        logger.debug(f"Stream {stream}: {len(encrypted) - usable} trailing bytes ignored")

    try:
        decryptor = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
        result = decryptor.update(encrypted[:usable]) + decryptor.finalize()
    except ValueError as e:
        raise DecryptFailedError(str(e), stream=stream) from e

    logger.debug(f"Stream {stream}: decrypted {len(result)} bytes")
    return result


def _record_end(data: bytes, payload_size: int) -> int:
    # Header is 4 bytes, or 8 with the extended size field
    header = struct.unpack_from('<I', data, 0)[0]
    header_size = RECORD_HEADER_SIZE
    if (header >> 20) & 0xFFF == RECORD_EXTENDED_SIZE_MARKER:
        header_size += 4
    return header_size + payload_size


__all__ = [
    'MsvcRand',
    'descramble_dist_data',
    'extract_aes_key',
    'decrypt_view_text',
]
