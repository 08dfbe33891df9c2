# hwptext/core/functions/header_info.py
"""
Header Info and Stream Entry Models

Shared by the HWP 5.0 and HWPX header inspectors and container readers.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

Version = Tuple[int, int, int, int]

FORMAT_HWP = "HWP"
FORMAT_HWPX = "HWPX"


@dataclass(frozen=True)
class HeaderInfo:
    """
    Parsed document header.

    Attributes:
        format: FORMAT_HWP or FORMAT_HWPX
        signature: Magic bytes the header matched
        version: (major, minor, build, revision), None when the package
            carries no version information
        flags: Raw property bitmask (HWP) or 0 (HWPX)
        is_compressed: Body streams are deflate-compressed
        is_password_protected: Body streams are password encrypted
        is_distribution_document: Restricted-copy document (ViewText streams)
    """
    format: str
    signature: bytes
    version: Optional[Version]
    flags: int = 0
    is_compressed: bool = False
    is_password_protected: bool = False
    is_distribution_document: bool = False

    @property
    def version_string(self) -> str:
        if self.version is None:
            return "unknown"
        return ".".join(str(v) for v in self.version)


@dataclass(frozen=True)
class StreamEntry:
    """
    Named stream inside a container.

    Attributes:
        name: Full stream path ("BodyText/Section0", "Contents/section0.xml")
        raw_size: Stored size in bytes
        compressed: Whether the stored bytes are compressed
    """
    name: str
    raw_size: int
    compressed: bool = False


def version_in_range(version: Version, minimum: Version, maximum: Version) -> bool:
    """Check minimum <= version < maximum."""
    return minimum <= tuple(version) < maximum


__all__ = [
    'Version',
    'FORMAT_HWP',
    'FORMAT_HWPX',
    'HeaderInfo',
    'StreamEntry',
    'version_in_range',
]
