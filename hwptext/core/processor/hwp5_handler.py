# hwptext/core/processor/hwp5_handler.py
"""
HWP5 Handler - HWP 5.0 OLE Format File Processor

Class-based handler for HWP 5.0 compound files.

Processing order per document:
1. FileHeader: signature, version, flags
2. Protection gate (password flag)
3. Section streams: BodyText/SectionN (ViewText/SectionN for distribution
   documents, decrypted first)
4. Inflate, parse records, reconstruct paragraphs
"""
import struct
import logging
from typing import List, TYPE_CHECKING

from hwptext.core.errors import HwpError, ParseError, UnsupportedFormatError
from hwptext.core.functions.extracted_text import ExtractedText, SectionText
from hwptext.core.functions.header_info import HeaderInfo, StreamEntry
from hwptext.core.functions.protection import check_protection
from hwptext.core.processor.base_handler import BaseHandler
from hwptext.core.processor.hwp5_helper import (
    BODY_TEXT_STORAGE,
    FILE_HEADER_STREAM,
    VIEW_TEXT_STORAGE,
    Hwp5Container,
    decompress_stream,
    decrypt_view_text,
    inspect_file_header,
    parse_records,
    reconstruct_section,
)

if TYPE_CHECKING:
    from hwptext.core.document_processor import CurrentFile

logger = logging.getLogger("hwptext.HWP5")


class HWP5Handler(BaseHandler):
    """HWP 5.0 OLE Format File Processing Handler Class"""

    def _open(self, current_file: "CurrentFile") -> Hwp5Container:
        return Hwp5Container(self.get_file_data(current_file))

    def _read_header(self, container: Hwp5Container) -> HeaderInfo:
        if not container.exists(FILE_HEADER_STREAM):
            raise UnsupportedFormatError("Compound file has no FileHeader stream")
        return inspect_file_header(container.read_stream(FILE_HEADER_STREAM))

    def inspect_header(self, current_file: "CurrentFile") -> HeaderInfo:
        with self._open(current_file) as container:
            return self._read_header(container)

    def list_streams(self, current_file: "CurrentFile") -> List[StreamEntry]:
        with self._open(current_file) as container:
            is_compressed = False
            if container.exists(FILE_HEADER_STREAM):
                try:
                    is_compressed = self._read_header(container).is_compressed
                except HwpError as e:
                    self.logger.warning(f"FileHeader unreadable, streams listed as stored: {e}")
            return container.list_streams(is_compressed=is_compressed)

    def extract_document(self, current_file: "CurrentFile") -> ExtractedText:
        """
        Extract text from an HWP 5.0 file.

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            ExtractedText with one SectionText per section stream

        Raises:
            UnsupportedFormatError: No FileHeader or no section streams
            PasswordProtectedError: Password flag set
        """
        file_path = current_file.get("file_path", "unknown")

        with self._open(current_file) as container:
            header = self._read_header(container)
            check_protection(header, file_path)

            section_names = self._section_names(container, header)
            if not section_names:
                raise UnsupportedFormatError("Compound file has no section streams")

            self.logger.info(
                f"HWP {header.version_string}: {len(section_names)} sections in {file_path}"
            )
            sections = [
                SectionText(name=name, paragraphs=self._extract_section(container, name, header))
                for name in section_names
            ]

        return ExtractedText(sections=sections)

    def _section_names(self, container: Hwp5Container, header: HeaderInfo) -> List[str]:
        if header.is_distribution_document:
            names = container.section_streams(VIEW_TEXT_STORAGE)
            if names:
                return names
            self.logger.warning("Distribution document without ViewText sections, reading BodyText")
        return container.section_streams(BODY_TEXT_STORAGE)

    def _extract_section(
        self,
        container: Hwp5Container,
        name: str,
        header: HeaderInfo,
    ) -> List[str]:
        data = container.read_stream(name)

        if name.startswith(VIEW_TEXT_STORAGE + "/"):
            data = decrypt_view_text(data, stream=name)

        data = decompress_stream(
            data,
            is_compressed_flag=header.is_compressed,
            max_size=self.config.max_stream_size,
            stream=name,
        )

        try:
            records = parse_records(data, stream=name)
            paragraphs = reconstruct_section(records, self.config)
        except (struct.error, IndexError, ValueError) as e:
            raise ParseError(str(e), stream=name) from e

        logger.debug(f"{name}: {len(records)} records, {len(paragraphs)} paragraphs")
        return paragraphs


__all__ = ['HWP5Handler']
