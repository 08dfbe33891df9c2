# hwptext/core/processor/hwp5_helper/hwp5_text.py
"""
HWP 5.0 Text Reconstructor

Turns the flat record list of one BodyText/ViewText section into paragraph
strings in reading order.

Reading order:
- Every PARA_HEADER reserves an output slot when it is reached, the
  PARA_TEXT child that follows fills it.
- Paragraphs nested inside a control (table cells, text boxes, headers,
  footers, notes, hidden comments) sit after their host paragraph's text in
  the record sequence, so a single linear pass keeps them after the host.
- A CTRL_HEADER stays open until a record at the same or a lower level
  arrives (or the stream ends). Tables that close without any cell text
  leave a placeholder behind.

Inline objects without text of their own:
- Equation (EQEDIT): the equation script
- Picture (SHAPE_COMPONENT_PICTURE): [Image]
- OLE object / chart (SHAPE_COMPONENT_OLE): [Object]
- Empty table: [Table]
Lines, rectangles and other drawing primitives without text emit nothing.
"""
import struct
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from hwptext.core.functions.config import ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import (
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_OBJECT,
    PLACEHOLDER_TABLE,
)
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    CHAR_CONTROLS,
    CONTROL_WCHAR_COUNT,
    CTRL_CHAR_FWSPACE,
    CTRL_CHAR_HYPHEN,
    CTRL_CHAR_LINE_BREAK,
    CTRL_CHAR_NBSPACE,
    CTRL_CHAR_TAB,
    CTRL_ID_TABLE,
    EXTENDED_CONTROLS,
    HWPTAG_CTRL_HEADER,
    HWPTAG_EQEDIT,
    HWPTAG_PARA_HEADER,
    HWPTAG_PARA_TEXT,
    HWPTAG_SHAPE_COMPONENT_OLE,
    HWPTAG_SHAPE_COMPONENT_PICTURE,
    INLINE_CONTROLS,
)
from hwptext.core.processor.hwp5_helper.hwp5_record import HwpRecord, parent_indices

logger = logging.getLogger("hwptext.HWP5")

# Control characters that map to visible text
CONTROL_CHAR_TEXT: Dict[int, str] = {
    CTRL_CHAR_TAB: '\t',
    CTRL_CHAR_LINE_BREAK: '\n',
    CTRL_CHAR_HYPHEN: '-',
    CTRL_CHAR_NBSPACE: ' ',
    CTRL_CHAR_FWSPACE: ' ',
}


def decode_para_text(payload: bytes) -> str:
    """
    Decode a HWPTAG_PARA_TEXT payload.

    HWP text is UTF-16LE with control characters below 32:
    - Char controls take 1 WCHAR (line break, paragraph end, hyphen, spaces)
    - Inline and extended controls take 8 WCHARs (code, 6 data WCHARs, code)

    Runs of normal characters are decoded together so surrogate pairs are
    joined; unpaired surrogates become U+FFFD. A control cut off by the end
    of the payload is consumed without error.

    Args:
        payload: PARA_TEXT record payload

    Returns:
        Paragraph text
    """
    parts: List[str] = []
    length = len(payload) - (len(payload) % 2)
    run_start = 0
    cursor = 0

    while cursor < length:
        code = struct.unpack_from('<H', payload, cursor)[0]
        if code >= 32:
            cursor += 2
            continue

        if run_start < cursor:
            parts.append(payload[run_start:cursor].decode('utf-16-le', errors='replace'))

        mapped = CONTROL_CHAR_TEXT.get(code)
        if mapped is not None:
            parts.append(mapped)

        if code in CHAR_CONTROLS:
            cursor += 2
        elif code in INLINE_CONTROLS or code in EXTENDED_CONTROLS:
            cursor += CONTROL_WCHAR_COUNT * 2
        else:
            logger.debug(f"Unknown control character {code} in PARA_TEXT")
            cursor += 2
        run_start = min(cursor, length)

    if run_start < length:
        parts.append(payload[run_start:length].decode('utf-16-le', errors='replace'))

    if length != len(payload):
        logger.debug("PARA_TEXT payload has an odd trailing byte, ignored")

    return ''.join(parts)


@dataclass
class _ControlFrame:
    """Open CTRL_HEADER while its child records are being visited."""
    level: int
    ctrl_id: bytes
    slot: int


class _SectionBuilder:
    """Collects output slots for one section."""

    def __init__(self, config: ExtractionConfig):
        self.config = config
        self.slots: List[str] = []
        self.para_slots: Dict[int, int] = {}
        self.frames: List[_ControlFrame] = []

    def reserve(self, text: str = "") -> int:
        self.slots.append(text)
        return len(self.slots) - 1

    def placeholder(self, token: str) -> None:
        if self.config.include_placeholders:
            self.reserve(token)

    def close_frames(self, level: int) -> None:
        while self.frames and self.frames[-1].level >= level:
            self._close(self.frames.pop())

    def close_all(self) -> None:
        while self.frames:
            self._close(self.frames.pop())

    def _close(self, frame: _ControlFrame) -> None:
        if frame.ctrl_id != CTRL_ID_TABLE or not self.config.include_placeholders:
            return
        has_text = any(text.strip() for text in self.slots[frame.slot + 1:])
        if not has_text:
            self.slots[frame.slot] = PLACEHOLDER_TABLE

    def paragraphs(self) -> List[str]:
        return [text for text in self.slots if text.strip()]


def reconstruct_section(
    records: List[HwpRecord],
    config: Union[ExtractionConfig, dict, None] = None,
) -> List[str]:
    """
    Rebuild the paragraphs of one section from its records.

    Args:
        records: Records of a section stream in stream order
        config: Extraction options (placeholders)

    Returns:
        Non-empty paragraph strings in reading order
    """
    config = resolve_config(config)
    parents = parent_indices(records)
    builder = _SectionBuilder(config)

    for index, record in enumerate(records):
        builder.close_frames(record.level)
        tag_id = record.tag_id

        if tag_id == HWPTAG_PARA_HEADER:
            builder.para_slots[index] = builder.reserve()

        elif tag_id == HWPTAG_PARA_TEXT:
            text = decode_para_text(record.payload)
            slot = _owner_slot(builder, parents[index])
            if slot is None:
                builder.reserve(text)
            else:
                builder.slots[slot] += text

        elif tag_id == HWPTAG_CTRL_HEADER:
            ctrl_id = record.fields.ctrl_id if record.fields is not None else b''
            builder.frames.append(_ControlFrame(
                level=record.level,
                ctrl_id=ctrl_id,
                slot=builder.reserve(),
            ))

        elif tag_id == HWPTAG_EQEDIT:
            if record.fields is not None and record.fields.script.strip():
                builder.reserve(record.fields.script.strip())

        elif tag_id == HWPTAG_SHAPE_COMPONENT_PICTURE:
            builder.placeholder(PLACEHOLDER_IMAGE)

        elif tag_id == HWPTAG_SHAPE_COMPONENT_OLE:
            builder.placeholder(PLACEHOLDER_OBJECT)

    builder.close_all()
    return builder.paragraphs()


def _owner_slot(builder: _SectionBuilder, parent: Optional[int]) -> Optional[int]:
    if parent is None:
        return None
    return builder.para_slots.get(parent)


__all__ = [
    'CONTROL_CHAR_TEXT',
    'decode_para_text',
    'reconstruct_section',
]
