# hwptext/core/processor/hwp5_helper/hwp5_container.py
"""
HWP 5.0 Compound File Container

Wraps olefile.OleFileIO over an in-memory buffer and exposes the named-stream
operations the HWP 5.0 handler needs:

- list_streams(): stream entries in directory order (SID order, the order the
  writer created them), paths joined with "/"
- read_stream(): stream bytes after the FAT / MiniFAT chain has been checked
  for cycles and out-of-range sectors
- section_streams(): BodyText/SectionN or ViewText/SectionN names in
  numeric order
"""
import io
import re
import struct
import logging
from typing import Dict, List, Optional, Tuple

import olefile
from olefile.olefile import OleDirectoryEntry

from hwptext.core.errors import ParseError, StreamNotFoundError
from hwptext.core.functions.header_info import StreamEntry
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    COMPRESSIBLE_STORAGES,
    COMPRESSIBLE_STREAMS,
    SECTION_STREAM_PREFIX,
)

logger = logging.getLogger("hwptext.HWP5")

_SECTION_RE = re.compile(r'^' + SECTION_STREAM_PREFIX + r'(\d+)$')

# olefile reports corrupt headers and directories with more than OSError
_OLE_ERRORS = (OSError, ValueError, OverflowError, IndexError, struct.error)


class Hwp5Container:
    """
    Read-only view of an OLE compound file.

    Usage:
        with Hwp5Container(data) as container:
            header = container.read_stream("FileHeader")
    """

    def __init__(self, data: bytes):
        self._data = data
        self._ole: Optional[olefile.OleFileIO] = None
        self._streams: Dict[str, OleDirectoryEntry] = {}

    def open(self) -> "Hwp5Container":
        try:
            self._ole = olefile.OleFileIO(io.BytesIO(self._data))
            self._streams = dict(self._stream_entries())
        except _OLE_ERRORS as e:
            raise ParseError(f"invalid compound file: {e}") from e
        return self

    def close(self) -> None:
        if self._ole is not None:
            self._ole.close()
            self._ole = None
        self._streams = {}

    def __enter__(self) -> "Hwp5Container":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def ole(self) -> olefile.OleFileIO:
        if self._ole is None:
            raise ParseError("container is not open")
        return self._ole

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def _stream_entries(self) -> List[Tuple[str, OleDirectoryEntry]]:
        found = []
        pending = [(kid, kid.name) for kid in self.ole.root.kids]

        while pending:
            entry, path = pending.pop()
            if entry.entry_type == olefile.STGTY_STREAM:
                found.append((entry.sid, path, entry))
            elif entry.entry_type == olefile.STGTY_STORAGE:
                pending.extend((kid, f"{path}/{kid.name}") for kid in entry.kids)

        found.sort(key=lambda item: item[0])
        return [(path, entry) for _, path, entry in found]

    def list_streams(self, is_compressed: bool = False) -> List[StreamEntry]:
        """
        List all streams in container order.

        Args:
            is_compressed: Document compression flag, used to mark the
                streams whose payload is deflated

        Returns:
            StreamEntry list ordered by directory entry
        """
        entries = []
        for path, entry in self._streams.items():
            entries.append(StreamEntry(
                name=path,
                raw_size=entry.size,
                compressed=is_compressed and _is_compressible(path),
            ))
        logger.debug(f"Compound file has {len(entries)} streams")
        return entries

    def exists(self, name: str) -> bool:
        return name in self._streams

    def section_streams(self, storage: str) -> List[str]:
        """
        Get SectionN streams of a storage sorted by section number.

        Args:
            storage: "BodyText" or "ViewText"

        Returns:
            Stream paths, e.g. ["BodyText/Section0", "BodyText/Section1"]
        """
        sections = []
        for path in self._streams:
            parts = path.split('/')
            if len(parts) != 2 or parts[0] != storage:
                continue
            match = _SECTION_RE.match(parts[1])
            if match:
                sections.append((int(match.group(1)), path))
        sections.sort()
        return [path for _, path in sections]

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read_stream(self, name: str) -> bytes:
        """
        Read a stream's raw bytes.

        Args:
            name: Stream path ("FileHeader", "BodyText/Section0")

        Returns:
            Stored stream bytes (still compressed / encrypted)

        Raises:
            StreamNotFoundError: No such stream
            ParseError: Broken sector chain or unreadable container
        """
        if not self.exists(name):
            raise StreamNotFoundError(name)

        try:
            stream = self.ole.openstream(name)
            self._check_chain(self._streams[name], name)
            data = stream.read()
        except _OLE_ERRORS as e:
            raise ParseError(str(e), stream=name) from e

        logger.debug(f"Read stream {name}: {len(data)} bytes")
        return data

    def _check_chain(self, entry: OleDirectoryEntry, name: str) -> None:
        """
        Walk a stream's sector chain with a visited set.

        The walk runs to ENDOFCHAIN; every sector may be visited once, so the
        loop is bounded by the table length. olefile stops after the declared
        size and would silently repeat sectors of a cyclic chain.
        """
        if entry.size == 0:
            return

        ole = self.ole
        if entry.size < ole.minisectorcutoff:
            table = getattr(ole, "minifat", None)
        else:
            table = ole.fat

        if table is None:
            raise ParseError("allocation table not loaded", stream=name)

        visited = set()
        sect = entry.isectStart

        while sect != olefile.ENDOFCHAIN:
            if sect >= len(table):
                raise ParseError(f"sector {sect} out of range", stream=name)
            if sect in visited:
                raise ParseError(f"cyclic sector chain at sector {sect}", stream=name)
            visited.add(sect)
            sect = table[sect]


def _is_compressible(path: str) -> bool:
    top = path.split('/', 1)[0]
    if '/' in path:
        return top in COMPRESSIBLE_STORAGES
    return path in COMPRESSIBLE_STREAMS


__all__ = [
    'Hwp5Container',
]
