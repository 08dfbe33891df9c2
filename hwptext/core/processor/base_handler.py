# hwptext/core/processor/base_handler.py
"""
BaseHandler - Abstract base class for format handlers

Defines the interface shared by the HWP 5.0 and HWPX handlers. The handler
receives its ExtractionConfig from DocumentProcessor at creation and keeps it
at instance level for reuse by internal methods.

Usage Example:
    class HWPXHandler(BaseHandler):
        def extract_document(self, current_file: CurrentFile) -> ExtractedText:
            # Access self.config, self.logger
            ...
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING, Union

from hwptext.core.functions.config import ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import ExtractedText
from hwptext.core.functions.header_info import HeaderInfo, StreamEntry

if TYPE_CHECKING:
    from hwptext.core.document_processor import CurrentFile

logger = logging.getLogger("hwptext")


class BaseHandler(ABC):
    """
    Abstract base class for format handlers.

    Attributes:
        config: ExtractionConfig passed from DocumentProcessor
        logger: Logging instance named after the handler class
    """

    def __init__(self, config: Union[ExtractionConfig, Dict[str, Any], None] = None):
        """
        Initialize BaseHandler.

        Args:
            config: ExtractionConfig or plain dict (passed from DocumentProcessor)
        """
        self._config = resolve_config(config)
        self._logger = logging.getLogger(f"hwptext.{self.__class__.__name__}")

    @property
    def config(self) -> ExtractionConfig:
        """Extraction configuration."""
        return self._config

    @property
    def logger(self) -> logging.Logger:
        """Logger instance."""
        return self._logger

    @abstractmethod
    def inspect_header(self, current_file: "CurrentFile") -> HeaderInfo:
        """
        Validate the document header.

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            HeaderInfo with signature, version and flags
        """
        pass

    @abstractmethod
    def list_streams(self, current_file: "CurrentFile") -> List[StreamEntry]:
        """
        Enumerate container streams in container order.

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            StreamEntry list
        """
        pass

    @abstractmethod
    def extract_document(self, current_file: "CurrentFile") -> ExtractedText:
        """
        Extract structured text (sections of paragraphs).

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            ExtractedText in reading order
        """
        pass

    def extract_text(self, current_file: "CurrentFile") -> str:
        """
        Extract text from file.

        Args:
            current_file: CurrentFile dict containing file info and binary data

        Returns:
            Paragraphs and sections joined with the configured separators
        """
        document = self.extract_document(current_file)
        text = document.to_text(
            paragraph_separator=self.config.paragraph_separator,
            section_separator=self.config.section_separator,
        )
        self.logger.info(
            f"Extracted {len(text)} chars in {len(document.sections)} sections "
            f"from {current_file.get('file_path', 'unknown')}"
        )
        return text

    def get_file_data(self, current_file: "CurrentFile") -> bytes:
        return current_file.get("file_data", b"")

    def get_file_path(self, current_file: "CurrentFile") -> Optional[str]:
        return current_file.get("file_path")


__all__ = ["BaseHandler"]
