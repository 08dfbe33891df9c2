# hwptext/core/functions/file_signature.py
"""
Container Signature Sniffing

Identifies the outer container of a file from its first bytes:
- OLE Compound Document (HWP 5.x)
- ZIP archive (HWPX)
- Pre-5.0 HWP binary (HWP 2.x / 3.x), recognized but not supported
"""
import re
from typing import Optional

from hwptext.core.functions.header_info import Version

OLE_MAGIC = b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1'
ZIP_MAGIC = b'PK\x03\x04'
LEGACY_HWP_SIGNATURE = b'HWP Document File V'

FILE_TYPE_OLE = "OLE"
FILE_TYPE_ZIP = "ZIP"
FILE_TYPE_HWP_LEGACY = "HWP_LEGACY"

_LEGACY_VERSION_RE = re.compile(rb'HWP Document File V(\d+)\.(\d+)')


def check_file_signature(raw_data: bytes) -> Optional[str]:
    """
    Check file signature to identify the container type.

    Args:
        raw_data: File binary data (at least the first 32 bytes)

    Returns:
        FILE_TYPE_* string or None if unknown
    """
    if raw_data[:8] == OLE_MAGIC:
        return FILE_TYPE_OLE

    if raw_data[:4] == ZIP_MAGIC:
        return FILE_TYPE_ZIP

    if raw_data[:len(LEGACY_HWP_SIGNATURE)] == LEGACY_HWP_SIGNATURE:
        return FILE_TYPE_HWP_LEGACY

    return None


def parse_legacy_version(raw_data: bytes) -> Version:
    """
    Read the version out of a pre-5.0 signature ("HWP Document File V3.00").

    Returns (0, 0, 0, 0) when the digits cannot be read.
    """
    match = _LEGACY_VERSION_RE.match(raw_data[:32])
    if not match:
        return (0, 0, 0, 0)
    return (int(match.group(1)), int(match.group(2)), 0, 0)


__all__ = [
    'OLE_MAGIC',
    'ZIP_MAGIC',
    'LEGACY_HWP_SIGNATURE',
    'FILE_TYPE_OLE',
    'FILE_TYPE_ZIP',
    'FILE_TYPE_HWP_LEGACY',
    'check_file_signature',
    'parse_legacy_version',
]
