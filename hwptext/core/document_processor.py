# hwptext/core/document_processor.py
"""
DocumentProcessor - entry point for HWP / HWPX text extraction

Reads the source, sniffs the outer container signature and delegates to the
matching handler:
- OLE compound file -> HWP5Handler
- ZIP archive -> HWPXHandler
- Pre-5.0 HWP binary -> UnsupportedVersionError
- Anything else -> InvalidSignatureError (no stream is opened)

Usage Example:
    processor = DocumentProcessor({"include_placeholders": False})
    text = processor.extract_text("report.hwp")
    results = processor.extract_batch(["a.hwp", "b.hwpx"])
"""
import os
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Sequence, TypedDict, Union

from hwptext.core.errors import (
    FileError,
    HwpError,
    InvalidSignatureError,
    UnsupportedVersionError,
)
from hwptext.core.functions.config import ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import ExtractedText
from hwptext.core.functions.file_signature import (
    FILE_TYPE_HWP_LEGACY,
    FILE_TYPE_OLE,
    FILE_TYPE_ZIP,
    check_file_signature,
    parse_legacy_version,
)
from hwptext.core.functions.header_info import HeaderInfo
from hwptext.core.processor import BaseHandler, HWP5Handler, HWPXHandler

logger = logging.getLogger("hwptext")

Source = Union[str, os.PathLike, bytes]


class CurrentFile(TypedDict, total=False):
    """File info and binary data passed to handlers."""
    file_path: str
    file_name: str
    file_data: bytes


class DocumentProcessor:
    """
    HWP / HWPX text extraction.

    Every method accepts a path (str / os.PathLike) or the raw file bytes.
    Instances hold no per-document state and can be shared across threads.
    """

    def __init__(self, config: Union[ExtractionConfig, Dict[str, Any], None] = None):
        self._config = resolve_config(config)
        self._hwp5_handler = HWP5Handler(self._config)
        self._hwpx_handler = HWPXHandler(self._config)

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    # ------------------------------------------------------------------
    # Source handling
    # ------------------------------------------------------------------

    def _load(self, source: Source) -> CurrentFile:
        if isinstance(source, (bytes, bytearray)):
            return CurrentFile(file_path="<bytes>", file_name="<bytes>", file_data=bytes(source))

        file_path = os.fspath(source)
        try:
            with open(file_path, "rb") as f:
                file_data = f.read()
        except OSError as e:
            raise FileError(f"Cannot read {file_path}: {e.strerror or e}") from e

        return CurrentFile(
            file_path=file_path,
            file_name=os.path.basename(file_path),
            file_data=file_data,
        )

    def _get_handler(self, current_file: CurrentFile) -> BaseHandler:
        file_data = current_file.get("file_data", b"")
        file_type = check_file_signature(file_data)

        if file_type == FILE_TYPE_OLE:
            return self._hwp5_handler
        if file_type == FILE_TYPE_ZIP:
            return self._hwpx_handler
        if file_type == FILE_TYPE_HWP_LEGACY:
            version = parse_legacy_version(file_data)
            logger.info(f"Pre-5.0 HWP file is not supported: {current_file.get('file_path')}")
            raise UnsupportedVersionError(version)

        raise InvalidSignatureError()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def extract_document(self, source: Source) -> ExtractedText:
        """
        Extract structured text (sections of paragraphs).

        Args:
            source: File path or file bytes

        Returns:
            ExtractedText in reading order

        Raises:
            HwpError: Any taxonomy failure (see hwptext.core.errors)
        """
        current_file = self._load(source)
        return self._get_handler(current_file).extract_document(current_file)

    def extract_text(self, source: Source) -> str:
        """
        Extract plain text.

        Args:
            source: File path or file bytes

        Returns:
            Paragraphs joined with paragraph_separator, sections with
            section_separator
        """
        current_file = self._load(source)
        return self._get_handler(current_file).extract_text(current_file)

    def list_streams(self, source: Source) -> List[str]:
        """
        List stream names in container order.

        Args:
            source: File path or file bytes

        Returns:
            Stream names ("FileHeader", "BodyText/Section0", ...) for HWP,
            entry names for HWPX
        """
        current_file = self._load(source)
        entries = self._get_handler(current_file).list_streams(current_file)
        return [entry.name for entry in entries]

    def inspect_header(self, source: Source) -> HeaderInfo:
        """
        Validate the header and return signature, version and flags.

        Args:
            source: File path or file bytes

        Returns:
            HeaderInfo
        """
        current_file = self._load(source)
        return self._get_handler(current_file).inspect_header(current_file)

    def _extract_one(self, path: str) -> Dict[str, str]:
        try:
            return {"text": self.extract_text(path)}
        except HwpError as e:
            logger.error(f"Extraction failed for {path}: [{e.kind}] {e}")
            return {"error": str(e)}
        except Exception as e:
            logger.exception(f"Unexpected error extracting {path}")
            return {"error": str(e)}

    def extract_batch(
        self,
        paths: Sequence[Union[str, os.PathLike]],
        max_workers: Optional[int] = None,
    ) -> Dict[str, Dict[str, str]]:
        """
        Extract several files in a thread pool.

        One file's failure never aborts the others.

        Args:
            paths: File paths
            max_workers: Thread count (defaults to config.max_workers, then
                the executor default)

        Returns:
            Mapping path -> {"text": ...} or {"error": message}, in input order
        """
        keys = [os.fspath(path) for path in paths]
        if not keys:
            return {}

        workers = max_workers or self._config.max_workers
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {key: executor.submit(self._extract_one, key) for key in keys}
            results = {key: futures[key].result() for key in keys}

        failed = sum(1 for result in results.values() if "error" in result)
        logger.info(f"Batch extraction: {len(results) - failed} succeeded, {failed} failed")
        return results


__all__ = [
    'CurrentFile',
    'DocumentProcessor',
]
