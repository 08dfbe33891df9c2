# hwptext/core/processor/hwp5_helper/hwp5_constants.py
"""
HWP 5.0 OLE Format Constants

Defines stream names, FileHeader layout, record tag IDs, control character
codes and control IDs for HWP 5.0 text extraction.

Record Structure:
- Header (4 bytes): TagID (10 bits) | Level (10 bits) | Size (12 bits)
- If Size == 0xFFF, next 4 bytes contain actual size
- Payload: Variable length data

Reference: HWP 5.0 File Format Specification (한글과컴퓨터)
"""

# ==========================================================================
# Stream Names
# ==========================================================================

FILE_HEADER_STREAM = "FileHeader"
BODY_TEXT_STORAGE = "BodyText"
VIEW_TEXT_STORAGE = "ViewText"         # Distribution documents
SECTION_STREAM_PREFIX = "Section"

# Streams whose payload follows the document compression flag
COMPRESSIBLE_STORAGES = ("BodyText", "ViewText", "DocInfo", "BinData", "DocHistory")
COMPRESSIBLE_STREAMS = ("DocInfo",)


# ==========================================================================
# FileHeader Layout
# ==========================================================================

HWP_SIGNATURE = b'HWP Document File'
SIGNATURE_SIZE = 32
VERSION_OFFSET = 32
FLAGS_OFFSET = 36
MIN_HEADER_SIZE = 40

# Supported version range: MIN <= version < MAX
SUPPORTED_VERSION_MIN = (5, 0, 0, 0)
SUPPORTED_VERSION_MAX = (6, 0, 0, 0)

# Property flags (FileHeader bytes 36-39); other bits are kept raw in HeaderInfo.flags
FLAG_COMPRESSED = 0x0001
FLAG_PASSWORD = 0x0002
FLAG_DISTRIBUTION = 0x0004


# ==========================================================================
# Record Header Layout
# ==========================================================================

RECORD_HEADER_SIZE = 4
RECORD_EXTENDED_SIZE_MARKER = 0xFFF


# ==========================================================================
# HWP 5.0 Tag Constants
# ==========================================================================

HWPTAG_BEGIN = 0x10

HWPTAG_DISTRIBUTE_DOC_DATA = HWPTAG_BEGIN + 12  # 28 - Distribution document key data (ViewText)
HWPTAG_PARA_HEADER = HWPTAG_BEGIN + 50          # 66 - Paragraph header
HWPTAG_PARA_TEXT = HWPTAG_BEGIN + 51            # 67 - Paragraph text
HWPTAG_CTRL_HEADER = HWPTAG_BEGIN + 55          # 71 - Control header
HWPTAG_LIST_HEADER = HWPTAG_BEGIN + 56          # 72 - List header (cells, text boxes)
HWPTAG_SHAPE_COMPONENT_OLE = HWPTAG_BEGIN + 68        # 84 - OLE object (charts too)
HWPTAG_SHAPE_COMPONENT_PICTURE = HWPTAG_BEGIN + 69    # 85 - Picture
HWPTAG_EQEDIT = HWPTAG_BEGIN + 72               # 88 - Equation


# ==========================================================================
# Control Character Codes (PARA_TEXT)
# ==========================================================================

# 1 WCHAR controls
CHAR_CONTROLS = frozenset({0, 10, 13, 24, 25, 26, 27, 28, 29, 30, 31})
# 8 WCHAR controls, no child records
INLINE_CONTROLS = frozenset({4, 5, 6, 7, 8, 9, 19, 20})
# 8 WCHAR controls, object described by CTRL_HEADER child records
EXTENDED_CONTROLS = frozenset({1, 2, 3, 11, 12, 14, 15, 16, 17, 18, 21, 22, 23})
CONTROL_WCHAR_COUNT = 8

CTRL_CHAR_TAB = 0x09                   # Tab (inline)
CTRL_CHAR_LINE_BREAK = 0x0A            # Line break
CTRL_CHAR_HYPHEN = 0x18                # Hyphen
CTRL_CHAR_NBSPACE = 0x1E               # Bound (non-breaking) space
CTRL_CHAR_FWSPACE = 0x1F               # Fixed-width space


# ==========================================================================
# Control IDs (4 char code, read order)
# ==========================================================================

CTRL_ID_TABLE = b'tbl '      # Table control


# ==========================================================================
# Export List
# ==========================================================================

__all__ = [
    # Streams
    'FILE_HEADER_STREAM',
    'BODY_TEXT_STORAGE',
    'VIEW_TEXT_STORAGE',
    'SECTION_STREAM_PREFIX',
    'COMPRESSIBLE_STORAGES',
    'COMPRESSIBLE_STREAMS',
    # FileHeader
    'HWP_SIGNATURE',
    'SIGNATURE_SIZE',
    'VERSION_OFFSET',
    'FLAGS_OFFSET',
    'MIN_HEADER_SIZE',
    'SUPPORTED_VERSION_MIN',
    'SUPPORTED_VERSION_MAX',
    'FLAG_COMPRESSED',
    'FLAG_PASSWORD',
    'FLAG_DISTRIBUTION',
    # Record header
    'RECORD_HEADER_SIZE',
    'RECORD_EXTENDED_SIZE_MARKER',
    # Tag IDs
    'HWPTAG_DISTRIBUTE_DOC_DATA',
    'HWPTAG_PARA_HEADER',
    'HWPTAG_PARA_TEXT',
    'HWPTAG_CTRL_HEADER',
    'HWPTAG_LIST_HEADER',
    'HWPTAG_SHAPE_COMPONENT_OLE',
    'HWPTAG_SHAPE_COMPONENT_PICTURE',
    'HWPTAG_EQEDIT',
    # Control characters
    'CHAR_CONTROLS',
    'INLINE_CONTROLS',
    'EXTENDED_CONTROLS',
    'CONTROL_WCHAR_COUNT',
    'CTRL_CHAR_TAB',
    'CTRL_CHAR_LINE_BREAK',
    'CTRL_CHAR_HYPHEN',
    'CTRL_CHAR_NBSPACE',
    'CTRL_CHAR_FWSPACE',
    # Control IDs
    'CTRL_ID_TABLE',
]
