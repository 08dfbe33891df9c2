# hwptext/core/processor/hwpx_helper/hwpx_header.py
"""
HWPX Package Inspection

Builds HeaderInfo for an HWPX package:
- mimetype must read "application/hwp+zip"
- version.xml (optional) carries HCFVersion major/minor/micro/buildNumber
- META-INF/manifest.xml lists encryption-data for password protected packages
"""
import logging
from typing import Optional

from hwptext.core.errors import (
    InvalidSignatureError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from hwptext.core.functions.header_info import (
    FORMAT_HWPX,
    HeaderInfo,
    Version,
    version_in_range,
)
from hwptext.core.processor.hwpx_helper.hwpx_constants import (
    HWPX_MIMETYPE,
    MANIFEST_PATH,
    MIMETYPE_PATH,
    SUPPORTED_VERSION_MAX,
    SUPPORTED_VERSION_MIN,
    VERSION_PATH,
)
from hwptext.core.processor.hwpx_helper.hwpx_container import HwpxContainer

logger = logging.getLogger("hwptext.HWPX")

VERSION_ATTRIBUTES = ('major', 'minor', 'micro', 'buildNumber')


def read_version(container: HwpxContainer) -> Optional[Version]:
    """
    Read the format version from version.xml.

    Returns:
        (major, minor, micro, buildNumber), None when version.xml is absent
    """
    if not container.exists(VERSION_PATH):
        logger.debug("HWPX package has no version.xml")
        return None

    root = container.read_xml(VERSION_PATH)
    parts = []
    for name in VERSION_ATTRIBUTES:
        value = root.get(name, '0')
        try:
            parts.append(int(value))
        except ValueError:
            logger.warning(f"Non-numeric HWPX version attribute {name}={value!r}, read as 0")
            parts.append(0)
    return tuple(parts)


def is_password_protected(container: HwpxContainer) -> bool:
    """Check META-INF/manifest.xml for encryption-data elements."""
    if not container.exists(MANIFEST_PATH):
        return False

    root = container.read_xml(MANIFEST_PATH)
    for elem in root.iter():
        if isinstance(elem.tag, str) and elem.tag.endswith('encryption-data'):
            return True
    return False


def inspect_package(container: HwpxContainer) -> HeaderInfo:
    """
    Validate an HWPX package and build its HeaderInfo.

    Args:
        container: Opened HWPX container

    Returns:
        HeaderInfo (always compressed; flags is 0)

    Raises:
        UnsupportedFormatError: mimetype entry missing
        InvalidSignatureError: mimetype is not application/hwp+zip
        UnsupportedVersionError: version.xml outside the supported range
        HwpxError: Malformed version.xml / manifest.xml
    """
    if not container.exists(MIMETYPE_PATH):
        raise UnsupportedFormatError("HWPX package has no mimetype entry")

    mimetype = container.read(MIMETYPE_PATH).decode('ascii', errors='replace').strip()
    if mimetype != HWPX_MIMETYPE:
        raise InvalidSignatureError(
            f"Invalid file signature: mimetype {mimetype!r}", stream=MIMETYPE_PATH
        )

    version = read_version(container)
    if version is not None and not version_in_range(
        version, SUPPORTED_VERSION_MIN, SUPPORTED_VERSION_MAX
    ):
        raise UnsupportedVersionError(version, stream=VERSION_PATH)

    info = HeaderInfo(
        format=FORMAT_HWPX,
        signature=HWPX_MIMETYPE.encode('ascii'),
        version=version,
        flags=0,
        is_compressed=True,
        is_password_protected=is_password_protected(container),
        is_distribution_document=False,
    )
    logger.debug(
        f"HWPX package: version={info.version_string}, "
        f"password={info.is_password_protected}"
    )
    return info


__all__ = [
    'read_version',
    'is_password_protected',
    'inspect_package',
]
