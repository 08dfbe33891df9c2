# tests/test_config_errors.py
import logging

import pytest

from hwptext.core.errors import (
    DecompressFailedError,
    HwpError,
    HwpxError,
    InvalidRecordHeaderError,
    InvalidSignatureError,
    ParseError,
    StreamNotFoundError,
    UnsupportedVersionError,
)
from hwptext.core.functions.config import ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import ExtractedText, SectionText
from hwptext.core.functions.file_signature import (
    FILE_TYPE_HWP_LEGACY,
    FILE_TYPE_OLE,
    FILE_TYPE_ZIP,
    check_file_signature,
    parse_legacy_version,
)


class TestConfig:

    def test_defaults(self):
        config = ExtractionConfig()

        assert config.include_placeholders is True
        assert config.paragraph_separator == "\n"
        assert config.section_separator == "\n\n"
        assert config.max_workers is None

    def test_from_dict(self):
        config = ExtractionConfig.from_dict({"include_placeholders": False, "max_workers": 3})

        assert config.include_placeholders is False
        assert config.max_workers == 3

    def test_unknown_keys_are_ignored_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hwptext"):
            config = ExtractionConfig.from_dict({"tags": True, "section_separator": "|"})

        assert config.section_separator == "|"
        assert "tags" in caplog.text

    @pytest.mark.parametrize("value", [None, {}])
    def test_resolve_empty(self, value):
        assert resolve_config(value) == ExtractionConfig()

    def test_resolve_passes_instance_through(self):
        config = ExtractionConfig(paragraph_separator=" ")

        assert resolve_config(config) is config


class TestErrors:

    def test_context_is_appended(self):
        error = InvalidRecordHeaderError(stream="BodyText/Section0", offset=4)

        assert str(error) == "Invalid record header (stream=BodyText/Section0, offset=4)"
        assert error.offset == 4

    def test_message_without_context(self):
        assert str(ParseError("bad")) == "Parse error: bad"

    def test_every_error_is_hwp_error(self):
        errors = [
            InvalidSignatureError(),
            UnsupportedVersionError((3, 0, 0, 0)),
            StreamNotFoundError("DocInfo"),
            DecompressFailedError("truncated"),
            HwpxError("zip"),
        ]

        assert all(isinstance(e, HwpError) for e in errors)
        assert [e.kind for e in errors] == [
            "InvalidSignature",
            "UnsupportedVersion",
            "StreamNotFound",
            "DecompressFailed",
            "Hwpx",
        ]

    def test_unsupported_version_text(self):
        assert str(UnsupportedVersionError((3, 0, 0, 0))) == "Unsupported version: 3.0.0.0"

    def test_stream_not_found_keeps_name(self):
        error = StreamNotFoundError("BodyText/Section3")

        assert error.name == "BodyText/Section3"
        assert error.stream == "BodyText/Section3"
        assert str(error) == "Stream not found (stream=BodyText/Section3)"


class TestFileSignature:

    @pytest.mark.parametrize("data, expected", [
        (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1rest", FILE_TYPE_OLE),
        (b"PK\x03\x04rest", FILE_TYPE_ZIP),
        (b"HWP Document File V2.10", FILE_TYPE_HWP_LEGACY),
        (b"HWP Document File", None),
        (b"", None),
    ])
    def test_check_file_signature(self, data, expected):
        assert check_file_signature(data) == expected

    def test_legacy_version(self):
        assert parse_legacy_version(b"HWP Document File V2.10") == (2, 10, 0, 0)
        assert parse_legacy_version(b"HWP Document File Vx") == (0, 0, 0, 0)


class TestExtractedText:

    def test_empty_sections_leave_no_separator(self):
        document = ExtractedText(sections=[
            SectionText("a", ["One"]),
            SectionText("b", []),
            SectionText("c", ["Two", "Three"]),
        ])

        assert document.to_text() == "One\n\nTwo\nThree"
        assert str(document) == document.to_text()
        assert document.paragraphs == ["One", "Two", "Three"]
