# tests/conftest.py
import pytest

from hwptext import DocumentProcessor
from tests.builders import build_hwp, build_hwpx, hwpx_paragraph, paragraph, section_xml


@pytest.fixture
def processor():
    return DocumentProcessor()


@pytest.fixture
def write_file(tmp_path):
    """Write bytes under tmp_path and return the path as a string."""
    def _write(name: str, data: bytes) -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)
    return _write


@pytest.fixture
def hello_hwp():
    return build_hwp([paragraph("Hello")])


@pytest.fixture
def hello_hwpx():
    return build_hwpx([section_xml(hwpx_paragraph("Hello"))])
