# tests/test_hwpx.py
import xml.etree.ElementTree as ET

import pytest

from hwptext.core.errors import (
    HwpxError,
    InvalidSignatureError,
    PasswordProtectedError,
    StreamNotFoundError,
    UnsupportedFormatError,
    UnsupportedVersionError,
)
from hwptext.core.processor.hwpx_helper.hwpx_container import HwpxContainer
from hwptext.core.processor.hwpx_helper.hwpx_section import extract_paragraphs
from tests.builders import build_hwpx, content_hpf, hwpx_paragraph, section_xml


def _paragraphs(body: str, **config):
    return extract_paragraphs(ET.fromstring(section_xml(body)), config or None)


def _table(*cells: str) -> str:
    cell_xml = "".join(
        f"<hp:tc><hp:subList>{hwpx_paragraph(cell)}</hp:subList></hp:tc>" for cell in cells
    )
    return f"<hp:tbl><hp:tr>{cell_xml}</hp:tr></hp:tbl>"


def _host(text: str, inline: str) -> str:
    return f"<hp:p><hp:run><hp:t>{text}</hp:t>{inline}</hp:run></hp:p>"


class TestParagraphs:

    def test_runs_are_concatenated(self):
        body = "<hp:p><hp:run><hp:t>Hel</hp:t></hp:run><hp:run><hp:t>lo</hp:t></hp:run></hp:p>"
        assert _paragraphs(body) == ["Hello"]

    def test_tab_and_line_break(self):
        body = "<hp:p><hp:run><hp:t>A<hp:tab/>B<hp:lineBreak/>C</hp:t></hp:run></hp:p>"
        assert _paragraphs(body) == ["A\tB\nC"]

    def test_empty_paragraph_is_omitted(self):
        body = hwpx_paragraph("One") + "<hp:p><hp:run/></hp:p>" + hwpx_paragraph("Two")
        assert _paragraphs(body) == ["One", "Two"]

    def test_table_cells_follow_host(self):
        body = _host("Host", _table("A", "B")) + hwpx_paragraph("Tail")
        assert _paragraphs(body) == ["Host", "A", "B", "Tail"]

    def test_nested_table(self):
        inner = _host("Inner", _table("Deep"))
        body = "<hp:p><hp:run><hp:tbl><hp:tr><hp:tc><hp:subList>" + inner + \
            "</hp:subList></hp:tc></hp:tr></hp:tbl></hp:run></hp:p>"
        assert _paragraphs(body) == ["Inner", "Deep"]

    def test_empty_table_placeholder(self):
        body = _host("Host", _table("", " ")) + hwpx_paragraph("Tail")
        assert _paragraphs(body) == ["Host", "[Table]", "Tail"]

    def test_picture_placeholder(self):
        assert _paragraphs(_host("Pic", "<hp:pic/>")) == ["Pic", "[Image]"]

    @pytest.mark.parametrize("tag", ["hp:ole", "hp:chart"])
    def test_object_placeholder(self, tag):
        assert _paragraphs(_host("Obj", f"<{tag}/>")) == ["Obj", "[Object]"]

    def test_placeholders_can_be_disabled(self):
        body = _host("Pic", "<hp:pic/>") + _host("Host", _table())
        assert _paragraphs(body, include_placeholders=False) == ["Pic", "Host"]

    def test_equation_script(self):
        body = _host("Eq", "<hp:equation><hp:script>a over b</hp:script></hp:equation>")
        assert _paragraphs(body) == ["Eq", "a over b"]

    def test_caption_text_inside_picture_follows_placeholder(self):
        inline = "<hp:pic><hp:caption><hp:subList>" + hwpx_paragraph("Caption") + \
            "</hp:subList></hp:caption></hp:pic>"
        assert _paragraphs(_host("Pic", inline)) == ["Pic", "[Image]", "Caption"]


class TestPackage:

    def test_hello(self, processor, hello_hwpx):
        assert processor.extract_text(hello_hwpx) == "Hello"

    def test_sections_follow_spine(self, processor):
        data = build_hwpx(
            [section_xml(hwpx_paragraph("A")), section_xml(hwpx_paragraph("B"))],
            spine_order=[1, 0],
        )

        document = processor.extract_document(data)

        assert [s.name for s in document.sections] == ["Contents/section1.xml", "Contents/section0.xml"]
        assert processor.extract_text(data) == "B\n\nA"

    def test_manifest_order_without_spine(self, processor):
        data = build_hwpx(
            [section_xml(hwpx_paragraph("A")), section_xml(hwpx_paragraph("B"))],
            spine_order=[],
        )

        assert processor.extract_text(data) == "A\n\nB"

    def test_href_relative_to_contents(self, processor):
        hpf = content_hpf(1).replace('href="Contents/section0.xml"', 'href="section0.xml"')
        data = build_hwpx(
            [section_xml(hwpx_paragraph("Rel"))],
            include_hpf=False,
            extra_entries={"Contents/content.hpf": hpf},
        )

        assert processor.extract_text(data) == "Rel"

    def test_password_protected(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("Secret"))], encrypted=True)

        with pytest.raises(PasswordProtectedError):
            processor.extract_text(data)
        assert processor.inspect_header(data).is_password_protected

    def test_wrong_mimetype(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("x"))], mimetype="application/zip")

        with pytest.raises(InvalidSignatureError):
            processor.extract_text(data)

    def test_missing_mimetype(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("x"))], mimetype=None)

        with pytest.raises(UnsupportedFormatError):
            processor.extract_text(data)

    def test_missing_content_hpf(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("x"))], include_hpf=False)

        with pytest.raises(UnsupportedFormatError):
            processor.extract_text(data)

    def test_missing_section_part(self, processor):
        data = build_hwpx(
            [section_xml(hwpx_paragraph("x"))],
            include_hpf=False,
            extra_entries={"Contents/content.hpf": content_hpf(2)},
        )

        with pytest.raises(UnsupportedFormatError):
            processor.extract_text(data)

    def test_no_sections(self, processor):
        with pytest.raises(UnsupportedFormatError):
            processor.extract_text(build_hwpx([]))

    def test_malformed_section_xml(self, processor):
        data = build_hwpx(['<hs:sec xmlns:hs="urn:x"><unclosed>'])

        with pytest.raises(HwpxError) as excinfo:
            processor.extract_text(data)

        assert excinfo.value.stream == "Contents/section0.xml"

    def test_unsupported_version(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("x"))], version=(4, 0, 0, 0))

        with pytest.raises(UnsupportedVersionError) as excinfo:
            processor.extract_text(data)

        assert excinfo.value.version == (4, 0, 0, 0)

    def test_version_is_optional(self, processor):
        data = build_hwpx([section_xml(hwpx_paragraph("x"))], version=None)

        header = processor.inspect_header(data)

        assert header.version is None
        assert header.version_string == "unknown"
        assert processor.extract_text(data) == "x"

    def test_inspect_header(self, processor, hello_hwpx):
        header = processor.inspect_header(hello_hwpx)

        assert header.format == "HWPX"
        assert header.version == (5, 1, 0, 1)
        assert header.is_compressed
        assert not header.is_password_protected

    def test_list_streams_in_archive_order(self, processor, hello_hwpx):
        assert processor.list_streams(hello_hwpx) == [
            "mimetype",
            "version.xml",
            "META-INF/manifest.xml",
            "Contents/content.hpf",
            "Contents/header.xml",
            "Contents/section0.xml",
        ]

    def test_corrupt_archive(self, processor):
        with pytest.raises(HwpxError):
            processor.extract_text(b"PK\x03\x04" + b"\x00" * 64)

    def test_missing_entry_names_stream(self, hello_hwpx):
        with HwpxContainer(hello_hwpx) as container:
            with pytest.raises(StreamNotFoundError) as excinfo:
                container.read("Contents/section9.xml")

        assert excinfo.value.stream == "Contents/section9.xml"
