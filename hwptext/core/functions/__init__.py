# hwptext/core/functions/__init__.py
"""
Format-independent building blocks: configuration, header and text models,
signature sniffing and the protection gate.
"""
from hwptext.core.functions.config import DEFAULT_MAX_STREAM_SIZE, ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import (
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_OBJECT,
    PLACEHOLDER_TABLE,
    ExtractedText,
    SectionText,
)
from hwptext.core.functions.file_signature import check_file_signature, parse_legacy_version
from hwptext.core.functions.header_info import FORMAT_HWP, FORMAT_HWPX, HeaderInfo, StreamEntry
from hwptext.core.functions.protection import check_protection

__all__ = [
    'DEFAULT_MAX_STREAM_SIZE',
    'ExtractionConfig',
    'resolve_config',
    'PLACEHOLDER_IMAGE',
    'PLACEHOLDER_OBJECT',
    'PLACEHOLDER_TABLE',
    'ExtractedText',
    'SectionText',
    'check_file_signature',
    'parse_legacy_version',
    'FORMAT_HWP',
    'FORMAT_HWPX',
    'HeaderInfo',
    'StreamEntry',
    'check_protection',
]
