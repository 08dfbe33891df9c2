# hwptext/core/processor/hwpx_handler.py
"""
HWPX Handler - HWPX (ZIP/XML) File Processor

Class-based handler for HWPX packages. Produces the same ExtractedText
model as the HWP 5.0 handler.
"""
import logging
from typing import List, TYPE_CHECKING

from hwptext.core.errors import UnsupportedFormatError
from hwptext.core.functions.extracted_text import ExtractedText
from hwptext.core.functions.header_info import HeaderInfo, StreamEntry
from hwptext.core.functions.protection import check_protection
from hwptext.core.processor.base_handler import BaseHandler
from hwptext.core.processor.hwpx_helper import (
    HwpxContainer,
    extract_sections,
    inspect_package,
)

if TYPE_CHECKING:
    from hwptext.core.document_processor import CurrentFile

logger = logging.getLogger("hwptext.HWPX")


class HWPXHandler(BaseHandler):
    """HWPX File Processing Handler Class"""

    def _open(self, current_file: "CurrentFile") -> HwpxContainer:
        return HwpxContainer(
            self.get_file_data(current_file),
            max_entry_size=self.config.max_stream_size,
        )

    def inspect_header(self, current_file: "CurrentFile") -> HeaderInfo:
        with self._open(current_file) as container:
            return inspect_package(container)

    def list_streams(self, current_file: "CurrentFile") -> List[StreamEntry]:
        with self._open(current_file) as container:
            return container.list_streams()

    def extract_document(self, current_file: "CurrentFile") -> ExtractedText:
        """
        Extract text from an HWPX file.

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            ExtractedText with one SectionText per section part

        Raises:
            UnsupportedFormatError: Missing mandatory entries or no sections
            PasswordProtectedError: Manifest lists encryption data
            HwpxError: Corrupt archive or malformed XML
        """
        file_path = current_file.get("file_path", "unknown")

        with self._open(current_file) as container:
            header = inspect_package(container)
            check_protection(header, file_path)

            document = extract_sections(container, self.config)

        if not document.sections:
            raise UnsupportedFormatError("HWPX package has no section parts")

        self.logger.info(
            f"HWPX {header.version_string}: {len(document.sections)} sections in {file_path}"
        )
        return document


__all__ = ['HWPXHandler']
