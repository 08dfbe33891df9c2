# hwptext/__init__.py
"""
hwptext - text extraction for Hangul Word Processor documents

Supports HWP 5.x compound files (including distribution documents) and
HWPX packages.

Usage Example:
    import hwptext

    text = hwptext.extract_text("report.hwp")
    names = hwptext.list_streams("report.hwp")
    results = hwptext.extract_batch(["a.hwp", "b.hwpx"])
"""
import logging
import os
from typing import Dict, List, Optional, Sequence, Union

from hwptext.core.document_processor import DocumentProcessor
from hwptext.core.errors import (
    DecompressFailedError,
    DecryptFailedError,
    FileError,
    HwpError,
    HwpxError,
    InvalidRecordHeaderError,
    InvalidSignatureError,
    ParseError,
    PasswordProtectedError,
    StreamNotFoundError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from hwptext.core.functions.config import ExtractionConfig
from hwptext.core.functions.extracted_text import ExtractedText, SectionText
from hwptext.core.functions.header_info import HeaderInfo, StreamEntry

__version__ = "0.1.0"

logging.getLogger("hwptext").addHandler(logging.NullHandler())

PathLike = Union[str, os.PathLike]


def extract_text(path: PathLike) -> str:
    """Extract the plain text of an HWP or HWPX file."""
    return DocumentProcessor().extract_text(path)


def extract_document(path: PathLike) -> ExtractedText:
    """Extract the sections and paragraphs of an HWP or HWPX file."""
    return DocumentProcessor().extract_document(path)


def list_streams(path: PathLike) -> List[str]:
    """List stream names in container order."""
    return DocumentProcessor().list_streams(path)


def inspect_header(path: PathLike) -> HeaderInfo:
    """Read signature, version and flags without extracting text."""
    return DocumentProcessor().inspect_header(path)


def extract_batch(
    paths: Sequence[PathLike],
    max_workers: Optional[int] = None,
) -> Dict[str, Dict[str, str]]:
    """Extract several files; each value is {"text": ...} or {"error": ...}."""
    return DocumentProcessor().extract_batch(paths, max_workers=max_workers)


__all__ = [
    '__version__',
    'DocumentProcessor',
    'ExtractionConfig',
    'ExtractedText',
    'SectionText',
    'HeaderInfo',
    'StreamEntry',
    'extract_text',
    'extract_document',
    'list_streams',
    'inspect_header',
    'extract_batch',
    # Errors
    'HwpError',
    'FileError',
    'InvalidSignatureError',
    'UnsupportedVersionError',
    'PasswordProtectedError',
    'StreamNotFoundError',
    'InvalidRecordHeaderError',
    'DecompressFailedError',
    'DecryptFailedError',
    'ParseError',
    'UnsupportedFormatError',
    'HwpxError',
]
