# tests/test_document_processor.py
import struct

import pytest

import hwptext
from hwptext import DocumentProcessor
from hwptext.core.errors import (
    DecompressFailedError,
    FileError,
    InvalidRecordHeaderError,
    InvalidSignatureError,
    ParseError,
    PasswordProtectedError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from hwptext.core.processor.hwp5_helper.hwp5_container import Hwp5Container
from hwptext.core.processor.hwpx_helper.hwpx_container import HwpxContainer
from tests.builders import (
    FLAG_COMPRESSED,
    FLAG_PASSWORD,
    TAG_PARA_TEXT,
    CompoundFileBuilder,
    build_hwp,
    build_hwpx,
    file_header,
    hwpx_paragraph,
    paragraph,
    raw_deflate,
    section_xml,
    table_paragraph,
)


def _fail(*args, **kwargs):
    raise AssertionError("must not be called")


def test_hello(processor, hello_hwp):
    assert processor.extract_text(hello_hwp) == "Hello"


def test_path_source(processor, write_file, hello_hwp):
    path = write_file("hello.hwp", hello_hwp)

    assert processor.extract_text(path) == "Hello"


def test_sections_and_paragraphs(processor):
    data = build_hwp([paragraph("One") + paragraph("Two"), paragraph("Three")])

    document = processor.extract_document(data)

    assert [s.name for s in document.sections] == ["BodyText/Section0", "BodyText/Section1"]
    assert document.paragraphs == ["One", "Two", "Three"]
    assert processor.extract_text(data) == "One\nTwo\n\nThree"


def test_configured_separators():
    processor = DocumentProcessor({"paragraph_separator": " | ", "section_separator": "\n---\n"})
    data = build_hwp([paragraph("One") + paragraph("Two"), paragraph("Three")])

    assert processor.extract_text(data) == "One | Two\n---\nThree"


def test_placeholders_disabled_by_config():
    processor = DocumentProcessor({"include_placeholders": False})
    data = build_hwp([table_paragraph("Host", []) + paragraph("Tail")])

    assert processor.extract_text(data) == "Host\nTail"


def test_table_text_in_document(processor):
    data = build_hwp([table_paragraph("Host", ["Cell 1", "Cell 2"]) + paragraph("After")])

    assert processor.extract_text(data) == "Host\nCell 1\nCell 2\nAfter"


def test_uncompressed_document(processor):
    data = build_hwp([paragraph("Plain")], flags=0)

    assert processor.extract_text(data) == "Plain"


def test_section_larger_than_mini_stream_cutoff(processor):
    lines = [f"Line {i}" for i in range(400)]
    data = build_hwp([b"".join(paragraph(line) for line in lines)], flags=0)

    assert processor.extract_text(data) == "\n".join(lines)


def test_sections_read_in_numeric_order(processor):
    builder = CompoundFileBuilder().add_stream("FileHeader", file_header(flags=0))
    for index in (10, 2, 1, 0):
        builder.add_stream(f"BodyText/Section{index}", paragraph(f"S{index}"))

    assert processor.extract_document(builder.build()).paragraphs == ["S0", "S1", "S2", "S10"]


def test_list_streams(processor, hello_hwp):
    assert processor.list_streams(hello_hwp) == ["FileHeader", "BodyText/Section0", "DocInfo"]


def test_inspect_header(processor):
    header = processor.inspect_header(build_hwp([paragraph("x")], version=(5, 1, 1, 0)))

    assert header.format == "HWP"
    assert header.version == (5, 1, 1, 0)
    assert header.is_compressed
    assert not header.is_password_protected
    assert not header.is_distribution_document


def test_missing_file_header(processor):
    data = CompoundFileBuilder().add_stream("BodyText/Section0", paragraph("x")).build()

    with pytest.raises(UnsupportedFormatError):
        processor.extract_text(data)


def test_no_section_streams(processor):
    data = CompoundFileBuilder().add_stream("FileHeader", file_header()).add_stream("DocInfo", b"").build()

    with pytest.raises(UnsupportedFormatError):
        processor.extract_text(data)


def test_password_protected_is_gated_before_decoding(processor, monkeypatch):
    monkeypatch.setattr("hwptext.core.processor.hwp5_handler.decompress_stream", _fail)
    monkeypatch.setattr("hwptext.core.processor.hwp5_handler.parse_records", _fail)
    data = build_hwp([paragraph("Secret")], flags=FLAG_COMPRESSED | FLAG_PASSWORD)

    with pytest.raises(PasswordProtectedError):
        processor.extract_text(data)


@pytest.mark.parametrize("data", [b"", b"plain text file", b"\x00" * 64, b"HWP Document File"])
def test_unknown_signature_opens_nothing(processor, monkeypatch, data):
    monkeypatch.setattr(Hwp5Container, "open", _fail)
    monkeypatch.setattr(HwpxContainer, "open", _fail)

    with pytest.raises(InvalidSignatureError):
        processor.extract_text(data)


def test_legacy_hwp_is_unsupported_version(processor):
    data = b"HWP Document File V3.00 \x1a\x01\x02\x03\x04\x05".ljust(128, b"\x00")

    with pytest.raises(UnsupportedVersionError) as excinfo:
        processor.extract_text(data)

    assert excinfo.value.version == (3, 0, 0, 0)


def test_unsupported_hwp5_version(processor):
    with pytest.raises(UnsupportedVersionError):
        processor.extract_text(build_hwp([paragraph("x")], version=(6, 0, 0, 0)))


def test_corrupt_record_header(processor):
    section = paragraph("A") + struct.pack("<I", TAG_PARA_TEXT | (100 << 20))

    with pytest.raises(InvalidRecordHeaderError) as excinfo:
        processor.extract_text(build_hwp([section]))

    assert excinfo.value.stream == "BodyText/Section0"
    assert excinfo.value.offset == len(paragraph("A"))


def test_truncated_section_stream(processor):
    compressed = raw_deflate(paragraph("Hello") * 50)
    data = (
        CompoundFileBuilder()
        .add_stream("FileHeader", file_header(flags=FLAG_COMPRESSED))
        .add_stream("BodyText/Section0", compressed[:len(compressed) // 2])
        .build()
    )

    with pytest.raises(DecompressFailedError) as excinfo:
        processor.extract_text(data)

    assert excinfo.value.stream == "BodyText/Section0"


def test_stream_size_limit():
    processor = DocumentProcessor({"max_stream_size": 64})

    with pytest.raises(DecompressFailedError):
        processor.extract_text(build_hwp([paragraph("Hello") * 20]))


def test_cyclic_section_chain(processor):
    data = build_hwp([paragraph("x")], flags=0, cycle_stream="BodyText/Section0")

    with pytest.raises(ParseError):
        processor.extract_text(data)


def test_missing_path_is_file_error(processor, tmp_path):
    with pytest.raises(FileError):
        processor.extract_text(tmp_path / "missing.hwp")


def test_batch_keeps_going_after_failures(processor, write_file, hello_hwp, hello_hwpx, tmp_path):
    ok = write_file("ok.hwp", hello_hwp)
    corrupt = write_file("corrupt.hwp", b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 100)
    package = write_file("ok.hwpx", hello_hwpx)
    missing = str(tmp_path / "missing.hwp")

    results = processor.extract_batch([ok, corrupt, package, missing], max_workers=2)

    assert list(results) == [ok, corrupt, package, missing]
    assert results[ok] == {"text": "Hello"}
    assert results[package] == {"text": "Hello"}
    assert "error" in results[corrupt]
    assert "error" in results[missing]


def test_batch_of_nothing(processor):
    assert processor.extract_batch([]) == {}


def test_module_level_functions(write_file, hello_hwp):
    path = write_file("hello.hwp", hello_hwp)

    assert hwptext.extract_text(path) == "Hello"
    assert hwptext.extract_document(path).paragraphs == ["Hello"]
    assert hwptext.list_streams(path) == ["FileHeader", "BodyText/Section0", "DocInfo"]
    assert hwptext.inspect_header(path).version == (5, 0, 3, 0)
    assert hwptext.extract_batch([path]) == {path: {"text": "Hello"}}


def test_same_text_for_both_formats(processor):
    hwp = build_hwp([paragraph("First") + paragraph("Second")])
    hwpx = build_hwpx([section_xml(hwpx_paragraph("First") + hwpx_paragraph("Second"))])

    assert processor.extract_text(hwp) == processor.extract_text(hwpx) == "First\nSecond"
