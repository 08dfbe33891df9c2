# hwptext/core/processor/hwp5_helper/hwp5_record.py
"""
HWP 5.0 Record Parser

Parses HWP 5.0 binary records from DocInfo and BodyText/Section streams.

Record Structure:
- Header (4 bytes): TagID (10 bits) | Level (10 bits) | Size (12 bits)
- Extended Size (4 bytes): Only if Size field == 0xFFF
- Payload: Variable length data

Records are returned as a flat list in stream order. Nesting is carried by
the level value only: a record's children are the following records with a
greater level, up to the next record whose level is less than or equal to
its own. parent_indices() recovers that structure with an index stack.

Recognized tags get typed fields (ParaHeader, CtrlHeader, ListHeader,
EqEdit); every other tag, and any recognized tag whose payload is too short
to decode, is kept as an opaque record with fields=None.
"""
import struct
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from hwptext.core.errors import InvalidRecordHeaderError
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    HWPTAG_CTRL_HEADER,
    HWPTAG_EQEDIT,
    HWPTAG_LIST_HEADER,
    HWPTAG_PARA_HEADER,
    RECORD_EXTENDED_SIZE_MARKER,
    RECORD_HEADER_SIZE,
)

logger = logging.getLogger("hwptext.HWP5")


# ============================================================================
# Typed Record Fields
# ============================================================================

@dataclass(frozen=True)
class ParaHeader:
    """HWPTAG_PARA_HEADER fields.

    Attributes:
        char_count: Number of WCHARs in the paragraph text
        control_mask: Bitmask of control characters used in the paragraph
    """
    char_count: int
    control_mask: int

    @classmethod
    def from_payload(cls, payload: bytes) -> "ParaHeader":
        char_count, control_mask = struct.unpack_from('<II', payload, 0)
        # Bit 31 of nchars is a flag, not part of the count
        return cls(char_count=char_count & 0x7FFFFFFF, control_mask=control_mask)


@dataclass(frozen=True)
class CtrlHeader:
    """HWPTAG_CTRL_HEADER fields.

    Attributes:
        ctrl_id: Four character control ID ('tbl ', 'gso ', 'eqed', ...)
    """
    ctrl_id: bytes

    @classmethod
    def from_payload(cls, payload: bytes) -> "CtrlHeader":
        if len(payload) < 4:
            raise struct.error("CTRL_HEADER payload shorter than control id")
        # Stored as a little-endian UINT32 of the big-endian char code
        return cls(ctrl_id=bytes(payload[:4][::-1]))


@dataclass(frozen=True)
class ListHeader:
    """HWPTAG_LIST_HEADER fields (table cells, text boxes, notes)."""
    paragraph_count: int

    @classmethod
    def from_payload(cls, payload: bytes) -> "ListHeader":
        return cls(paragraph_count=struct.unpack_from('<h', payload, 0)[0])


@dataclass(frozen=True)
class EqEdit:
    """HWPTAG_EQEDIT fields.

    Attributes:
        script: Equation script text
    """
    script: str

    @classmethod
    def from_payload(cls, payload: bytes) -> "EqEdit":
        script_len = struct.unpack_from('<H', payload, 4)[0]
        raw = payload[6:6 + script_len * 2]
        return cls(script=raw.decode('utf-16-le', errors='replace'))


RECORD_DECODERS: Dict[int, Callable[[bytes], Any]] = {
    HWPTAG_PARA_HEADER: ParaHeader.from_payload,
    HWPTAG_CTRL_HEADER: CtrlHeader.from_payload,
    HWPTAG_LIST_HEADER: ListHeader.from_payload,
    HWPTAG_EQEDIT: EqEdit.from_payload,
}


# ============================================================================
# Record
# ============================================================================

@dataclass(frozen=True)
class HwpRecord:
    """
    HWP 5.0 Binary Record.

    Attributes:
        tag_id: Record type identifier (10 bits, 0-1023)
        level: Nesting depth (10 bits)
        size: Payload size in bytes
        payload: Record data
        offset: Byte offset of the record header in the stream
        fields: Typed fields for recognized tags, None for opaque records
    """
    tag_id: int
    level: int
    size: int
    payload: bytes
    offset: int = 0
    fields: Any = None

    @property
    def is_opaque(self) -> bool:
        return self.fields is None

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (
            f"HwpRecord(tag_id={self.tag_id}, level={self.level}, "
            f"size={self.size}, offset={self.offset})"
        )


def _decode_fields(tag_id: int, payload: bytes) -> Any:
    decoder = RECORD_DECODERS.get(tag_id)
    if decoder is None:
        return None
    try:
        return decoder(payload)
    except struct.error:
        logger.debug(f"Record tag {tag_id} payload too short ({len(payload)} bytes), kept opaque")
        return None


def iter_records(data: bytes, stream: Optional[str] = None) -> Iterator[HwpRecord]:
    """
    Walk a decompressed stream as a sequence of records.

    Args:
        data: Decompressed DocInfo / Section stream data
        stream: Stream name for error context

    Yields:
        HwpRecord in stream order

    Raises:
        InvalidRecordHeaderError: Truncated header or payload past the buffer end
    """
    pos = 0
    size = len(data)

    while pos < size:
        record_offset = pos
        if pos + RECORD_HEADER_SIZE > size:
            raise InvalidRecordHeaderError(
                f"Truncated record header ({size - pos} bytes left)",
                stream=stream,
                offset=record_offset,
            )

        # Parse 4-byte header
        header = struct.unpack_from('<I', data, pos)[0]
        pos += RECORD_HEADER_SIZE

        tag_id = header & 0x3FF           # bits 0-9: Tag ID
        level = (header >> 10) & 0x3FF    # bits 10-19: Level
        rec_len = (header >> 20) & 0xFFF  # bits 20-31: Size

        # Extended size: next 4 bytes contain actual size
        if rec_len == RECORD_EXTENDED_SIZE_MARKER:
            if pos + 4 > size:
                raise InvalidRecordHeaderError(
                    "Truncated extended record size",
                    stream=stream,
                    offset=record_offset,
                )
            rec_len = struct.unpack_from('<I', data, pos)[0]
            pos += 4

        if rec_len > size - pos:
            raise InvalidRecordHeaderError(
                f"Record size {rec_len} exceeds remaining {size - pos} bytes (tag {tag_id})",
                stream=stream,
                offset=record_offset,
            )

        payload = bytes(data[pos:pos + rec_len])
        pos += rec_len

        yield HwpRecord(
            tag_id=tag_id,
            level=level,
            size=rec_len,
            payload=payload,
            offset=record_offset,
            fields=_decode_fields(tag_id, payload),
        )


def parse_records(data: bytes, stream: Optional[str] = None) -> List[HwpRecord]:
    """
    Parse all records of a stream.

    Args:
        data: Decompressed stream data
        stream: Stream name for error context

    Returns:
        Records in stream order
    """
    records = list(iter_records(data, stream))
    logger.debug(f"Parsed {len(records)} records from {stream or 'stream'} ({len(data)} bytes)")
    return records


def parent_indices(records: List[HwpRecord]) -> List[Optional[int]]:
    """
    Resolve each record's parent from the level values.

    Uses a stack of open record indices: entries with a level greater than or
    equal to the current record are closed before the current record is
    pushed, so the stack top is the nearest enclosing record.

    Args:
        records: Records in stream order

    Returns:
        Parent index per record (None for top-level records)
    """
    parents: List[Optional[int]] = []
    stack: List[int] = []

    for index, record in enumerate(records):
        while stack and records[stack[-1]].level >= record.level:
            stack.pop()
        parents.append(stack[-1] if stack else None)
        stack.append(index)

    return parents


__all__ = [
    'ParaHeader',
    'CtrlHeader',
    'ListHeader',
    'EqEdit',
    'RECORD_DECODERS',
    'HwpRecord',
    'iter_records',
    'parse_records',
    'parent_indices',
]
