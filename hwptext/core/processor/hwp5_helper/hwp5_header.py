# hwptext/core/processor/hwp5_helper/hwp5_header.py
"""
HWP 5.0 FileHeader Inspection

FileHeader structure (256 bytes):
- 0-31: Signature "HWP Document File" (NUL padded)
- 32-35: Version DWORD 0xMMnnPPrr (major.minor.build.revision)
- 36-39: Property flags (compression, password, distribution, ...)
- 40-255: License flags, encryption version, reserved
"""
import struct
import logging

from hwptext.core.errors import (
    InvalidSignatureError,
    ParseError,
    UnsupportedVersionError,
)
from hwptext.core.functions.header_info import (
    FORMAT_HWP,
    HeaderInfo,
    Version,
    version_in_range,
)
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    FILE_HEADER_STREAM,
    FLAG_COMPRESSED,
    FLAG_DISTRIBUTION,
    FLAG_PASSWORD,
    FLAGS_OFFSET,
    HWP_SIGNATURE,
    MIN_HEADER_SIZE,
    SIGNATURE_SIZE,
    SUPPORTED_VERSION_MAX,
    SUPPORTED_VERSION_MIN,
    VERSION_OFFSET,
)

logger = logging.getLogger("hwptext.HWP5")


def parse_version(value: int) -> Version:
    """Split version DWORD 0xMMnnPPrr into (MM, nn, PP, rr)."""
    return (
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


def inspect_file_header(header: bytes) -> HeaderInfo:
    """
    Validate FileHeader bytes and extract version and property flags.

    Args:
        header: FileHeader stream data

    Returns:
        HeaderInfo for the document

    Raises:
        InvalidSignatureError: Signature does not match
        ParseError: Header truncated before the flags field
        UnsupportedVersionError: Version outside the supported range
    """
    if len(header) < SIGNATURE_SIZE or header[:len(HWP_SIGNATURE)] != HWP_SIGNATURE:
        raise InvalidSignatureError(stream=FILE_HEADER_STREAM)

    # Signature is padded with NULs
    if header[len(HWP_SIGNATURE):SIGNATURE_SIZE].strip(b'\x00'):
        raise InvalidSignatureError(stream=FILE_HEADER_STREAM)

    if len(header) < MIN_HEADER_SIZE:
        raise ParseError(
            f"FileHeader truncated ({len(header)} bytes)",
            stream=FILE_HEADER_STREAM,
        )

    version = parse_version(struct.unpack_from('<I', header, VERSION_OFFSET)[0])
    flags = struct.unpack_from('<I', header, FLAGS_OFFSET)[0]

    if not version_in_range(version, SUPPORTED_VERSION_MIN, SUPPORTED_VERSION_MAX):
        raise UnsupportedVersionError(version, stream=FILE_HEADER_STREAM)

    info = HeaderInfo(
        format=FORMAT_HWP,
        signature=HWP_SIGNATURE,
        version=version,
        flags=flags,
        is_compressed=bool(flags & FLAG_COMPRESSED),
        is_password_protected=bool(flags & FLAG_PASSWORD),
        is_distribution_document=bool(flags & FLAG_DISTRIBUTION),
    )
    logger.debug(
        f"FileHeader: version={info.version_string}, flags=0x{flags:08x}, "
        f"compressed={info.is_compressed}, password={info.is_password_protected}, "
        f"distribution={info.is_distribution_document}"
    )
    return info


__all__ = [
    'parse_version',
    'inspect_file_header',
]
