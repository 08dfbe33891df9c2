# hwptext/core/processor/hwpx_helper/__init__.py
"""
HWPX Format Helper Module

HWPX is the XML-in-ZIP successor of HWP 5.0 (OWPML).

File structure:
- hwpx_constants.py: Package paths, namespaces, element names
- hwpx_container.py: ZIP entry access
- hwpx_header.py: mimetype / version.xml / manifest inspection
- hwpx_section.py: content.hpf section order and paragraph extraction
"""

from hwptext.core.processor.hwpx_helper.hwpx_constants import (
    HPF_PATH,
    HWPX_MIMETYPE,
    HWPX_NAMESPACES,
    OPF_NAMESPACES,
)
from hwptext.core.processor.hwpx_helper.hwpx_container import HwpxContainer
from hwptext.core.processor.hwpx_helper.hwpx_header import (
    inspect_package,
    is_password_protected,
    read_version,
)
from hwptext.core.processor.hwpx_helper.hwpx_section import (
    extract_paragraphs,
    extract_sections,
    section_parts,
)

__all__ = [
    'HPF_PATH',
    'HWPX_MIMETYPE',
    'HWPX_NAMESPACES',
    'OPF_NAMESPACES',
    'HwpxContainer',
    'inspect_package',
    'is_password_protected',
    'read_version',
    'extract_paragraphs',
    'extract_sections',
    'section_parts',
]
