# hwptext/core/processor/hwpx_helper/hwpx_container.py
"""
HWPX Package Container

zipfile.ZipFile over an in-memory buffer. Entries are listed in central
directory order; archive-level failures surface as HwpxError.
"""
import io
import zlib
import zipfile
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

from hwptext.core.errors import HwpxError, StreamNotFoundError
from hwptext.core.functions.config import DEFAULT_MAX_STREAM_SIZE
from hwptext.core.functions.header_info import StreamEntry

logger = logging.getLogger("hwptext.HWPX")

# zipfile reports corrupt central directories and entries with more than BadZipFile
_ARCHIVE_ERRORS = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    NotImplementedError,
    RuntimeError,
    ValueError,
    EOFError,
    OSError,
)


class HwpxContainer:
    """
    Read-only view of an HWPX package.

    Usage:
        with HwpxContainer(data) as container:
            names = [entry.name for entry in container.list_streams()]
    """

    def __init__(self, data: bytes, max_entry_size: int = DEFAULT_MAX_STREAM_SIZE):
        self._data = data
        self._max_entry_size = max_entry_size
        self._zf: Optional[zipfile.ZipFile] = None

    def open(self) -> "HwpxContainer":
        try:
            self._zf = zipfile.ZipFile(io.BytesIO(self._data))
        except _ARCHIVE_ERRORS as e:
            raise HwpxError(f"invalid archive: {e}") from e
        return self

    def close(self) -> None:
        if self._zf is not None:
            self._zf.close()
            self._zf = None

    def __enter__(self) -> "HwpxContainer":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def zf(self) -> zipfile.ZipFile:
        if self._zf is None:
            raise HwpxError("archive is not open")
        return self._zf

    def list_streams(self) -> List[StreamEntry]:
        """List archive entries in central directory order (directories skipped)."""
        entries = [
            StreamEntry(
                name=info.filename,
                raw_size=info.compress_size,
                compressed=info.compress_type != zipfile.ZIP_STORED,
            )
            for info in self.zf.infolist()
            if not info.is_dir()
        ]
        logger.debug(f"HWPX package has {len(entries)} entries")
        return entries

    def exists(self, name: str) -> bool:
        try:
            self.zf.getinfo(name)
        except KeyError:
            return False
        return True

    def read(self, name: str) -> bytes:
        """
        Read an archive entry.

        Args:
            name: Entry path ("Contents/section0.xml")

        Returns:
            Uncompressed entry bytes

        Raises:
            StreamNotFoundError: No such entry
            HwpxError: Corrupt entry, bad CRC or oversized entry
        """
        try:
            info = self.zf.getinfo(name)
        except KeyError:
            raise StreamNotFoundError(name)

        if info.file_size > self._max_entry_size:
            raise HwpxError(
                f"entry size {info.file_size} exceeds limit of {self._max_entry_size} bytes",
                stream=name,
            )

        try:
            with self.zf.open(info) as f:
                data = f.read(self._max_entry_size + 1)
        except _ARCHIVE_ERRORS as e:
            raise HwpxError(str(e), stream=name) from e

        if len(data) > self._max_entry_size:
            raise HwpxError(f"entry exceeds limit of {self._max_entry_size} bytes", stream=name)
        return data

    def read_xml(self, name: str) -> ET.Element:
        """Read and parse an XML entry; malformed XML raises HwpxError."""
        data = self.read(name)
        try:
            return ET.fromstring(data)
        except ET.ParseError as e:
            raise HwpxError(f"malformed XML: {e}", stream=name) from e


__all__ = [
    'HwpxContainer',
]
