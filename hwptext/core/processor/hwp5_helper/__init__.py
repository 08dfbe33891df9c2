# hwptext/core/processor/hwp5_helper/__init__.py
"""
HWP 5.0 OLE Format Helper Module

HWP 5.0 is a binary format based on the OLE compound document structure.
The file contains:
- FileHeader: Signature, version, compression / password / distribution flags
- DocInfo: Fonts, styles, BinData mappings
- BodyText: Sections containing paragraph/text records
- ViewText: Encrypted sections of distribution documents

File structure:
- hwp5_constants.py: HWP 5.0 tag IDs and constants
- hwp5_container.py: Compound file stream access (olefile)
- hwp5_header.py: FileHeader signature / version / flag inspection
- hwp5_decoder.py: Deflate decompression
- hwp5_distdoc.py: Distribution document decryption
- hwp5_record.py: Binary record parsing (tag/level/size/payload)
- hwp5_text.py: Paragraph text reconstruction
"""

# Constants
from hwptext.core.processor.hwp5_helper.hwp5_constants import (
    BODY_TEXT_STORAGE,
    FILE_HEADER_STREAM,
    HWPTAG_CTRL_HEADER,
    HWPTAG_EQEDIT,
    HWPTAG_LIST_HEADER,
    HWPTAG_PARA_HEADER,
    HWPTAG_PARA_TEXT,
    VIEW_TEXT_STORAGE,
)

# Container
from hwptext.core.processor.hwp5_helper.hwp5_container import Hwp5Container

# Header
from hwptext.core.processor.hwp5_helper.hwp5_header import inspect_file_header, parse_version

# Decoder
from hwptext.core.processor.hwp5_helper.hwp5_decoder import decompress_stream, inflate

# Distribution documents
from hwptext.core.processor.hwp5_helper.hwp5_distdoc import decrypt_view_text

# Record Parser
from hwptext.core.processor.hwp5_helper.hwp5_record import (
    CtrlHeader,
    EqEdit,
    HwpRecord,
    ListHeader,
    ParaHeader,
    iter_records,
    parent_indices,
    parse_records,
)

# Text
from hwptext.core.processor.hwp5_helper.hwp5_text import decode_para_text, reconstruct_section

__all__ = [
    # Constants
    'BODY_TEXT_STORAGE',
    'FILE_HEADER_STREAM',
    'HWPTAG_CTRL_HEADER',
    'HWPTAG_EQEDIT',
    'HWPTAG_LIST_HEADER',
    'HWPTAG_PARA_HEADER',
    'HWPTAG_PARA_TEXT',
    'VIEW_TEXT_STORAGE',
    # Container
    'Hwp5Container',
    # Header
    'inspect_file_header',
    'parse_version',
    # Decoder
    'decompress_stream',
    'inflate',
    # Distribution
    'decrypt_view_text',
    # Records
    'CtrlHeader',
    'EqEdit',
    'HwpRecord',
    'ListHeader',
    'ParaHeader',
    'iter_records',
    'parent_indices',
    'parse_records',
    # Text
    'decode_para_text',
    'reconstruct_section',
]
