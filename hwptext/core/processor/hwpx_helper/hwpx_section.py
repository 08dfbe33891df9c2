# hwptext/core/processor/hwpx_helper/hwpx_section.py
"""
HWPX Section Parsing

Section order comes from Contents/content.hpf: spine itemrefs resolved
through manifest items. Each section part is parsed and its paragraphs are
emitted in document order.

HWPX structure:
- <hs:sec> -> <hp:p> (top level paragraph)
- <hp:p> -> <hp:run> -> <hp:t> (text, with tab/lineBreak/... children)
- <hp:p> -> <hp:run> -> <hp:tbl> -> ... -> <hp:subList> -> <hp:p> (cell)
- <hp:p> -> <hp:run> -> <hp:pic> / <hp:ole> / <hp:chart> / <hp:equation>

Paragraphs nested inside objects (cells, text boxes, captions, notes) and
object placeholders follow their host paragraph.
"""
import re
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple, Union

from hwptext.core.errors import StreamNotFoundError, UnsupportedFormatError
from hwptext.core.functions.config import ExtractionConfig, resolve_config
from hwptext.core.functions.extracted_text import (
    PLACEHOLDER_IMAGE,
    PLACEHOLDER_OBJECT,
    PLACEHOLDER_TABLE,
    ExtractedText,
    SectionText,
)
from hwptext.core.processor.hwpx_helper.hwpx_constants import (
    CONTENTS_DIR,
    HPF_PATH,
    LOCAL_EQUATION,
    LOCAL_PICTURE,
    LOCAL_SCRIPT,
    LOCAL_TABLE,
    OBJECT_LOCAL_NAMES,
    OPF_NAMESPACES,
    TAG_P,
    TAG_T,
    TEXT_CHILD_CHARS,
)
from hwptext.core.processor.hwpx_helper.hwpx_container import HwpxContainer

logger = logging.getLogger("hwptext.HWPX")

_SECTION_HREF_RE = re.compile(r'(?:^|/)section(\d+)\.xml$', re.IGNORECASE)


def _local_name(tag) -> str:
    if not isinstance(tag, str):
        return ''
    return tag.rsplit('}', 1)[-1]


# ============================================================================
# Section order
# ============================================================================

def _resolve_href(container: HwpxContainer, href: str) -> str:
    if container.exists(href):
        return href
    if container.exists(CONTENTS_DIR + href):
        return CONTENTS_DIR + href
    raise UnsupportedFormatError(f"HWPX section part missing: {href}", stream=HPF_PATH)


def section_parts(container: HwpxContainer) -> List[str]:
    """
    Get section part names in document order.

    Args:
        container: Opened HWPX container

    Returns:
        Entry names, e.g. ["Contents/section0.xml", "Contents/section1.xml"]

    Raises:
        UnsupportedFormatError: content.hpf missing, or a referenced section
            part is absent from the package
    """
    if not container.exists(HPF_PATH):
        raise UnsupportedFormatError("HWPX package has no Contents/content.hpf")

    root = container.read_xml(HPF_PATH)
    ns = OPF_NAMESPACES

    hrefs = {}
    manifest_order = []
    for item in root.findall('.//opf:manifest/opf:item', ns):
        item_id = item.get('id')
        href = item.get('href', '')
        if item_id and _SECTION_HREF_RE.search(href):
            hrefs[item_id] = href
            manifest_order.append(href)

    ordered = [
        hrefs[itemref.get('idref')]
        for itemref in root.findall('.//opf:spine/opf:itemref', ns)
        if itemref.get('idref') in hrefs
    ]
    if not ordered:
        # No spine entries for sections, fall back to manifest order
        ordered = manifest_order

    parts = [_resolve_href(container, href) for href in ordered]
    logger.debug(f"HWPX section parts: {parts}")
    return parts


# ============================================================================
# Paragraph text
# ============================================================================

def _t_text(t: ET.Element) -> str:
    parts = [t.text or '']
    for child in t:
        parts.append(TEXT_CHILD_CHARS.get(child.tag, ''))
        parts.append(child.tail or '')
    return ''.join(parts)


def _equation_script(equation: ET.Element) -> str:
    for elem in equation.iter():
        if _local_name(elem.tag) == LOCAL_SCRIPT:
            return (elem.text or '').strip()
    return ''


def _has_text(elem: ET.Element) -> bool:
    return any(_t_text(t).strip() for t in elem.iter(TAG_T))


def _scan_paragraph(
    p: ET.Element,
    include_placeholders: bool,
) -> Tuple[str, List[Union[ET.Element, str]]]:
    """
    Collect a paragraph's own text and the items that follow it.

    Returns:
        (paragraph text, followers) where followers are nested hp:p elements
        and placeholder / equation strings in document order
    """
    parts: List[str] = []
    followers: List[Union[ET.Element, str]] = []
    stack = list(reversed(list(p)))

    while stack:
        elem = stack.pop()
        tag = elem.tag

        if tag == TAG_P:
            followers.append(elem)
            continue
        if tag == TAG_T:
            parts.append(_t_text(elem))
            continue

        local = _local_name(tag)
        if local == LOCAL_EQUATION:
            script = _equation_script(elem)
            if script:
                followers.append(script)
            continue
        if local == LOCAL_TABLE and not _has_text(elem):
            if include_placeholders:
                followers.append(PLACEHOLDER_TABLE)
            continue
        if local == LOCAL_PICTURE and include_placeholders:
            followers.append(PLACEHOLDER_IMAGE)
        elif local in OBJECT_LOCAL_NAMES and include_placeholders:
            followers.append(PLACEHOLDER_OBJECT)

        stack.extend(reversed(list(elem)))

    return ''.join(parts), followers


def extract_paragraphs(root: ET.Element, config: Optional[ExtractionConfig] = None) -> List[str]:
    """
    Extract paragraph strings from a parsed section part.

    Args:
        root: <hs:sec> element
        config: Extraction options (placeholders)

    Returns:
        Non-empty paragraphs in reading order
    """
    config = resolve_config(config)
    paragraphs: List[str] = []
    pending: List[Union[ET.Element, str]] = list(reversed(root.findall(TAG_P)))

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            paragraphs.append(item)
            continue
        text, followers = _scan_paragraph(item, config.include_placeholders)
        if text.strip():
            paragraphs.append(text)
        pending.extend(reversed(followers))

    return paragraphs


def extract_sections(
    container: HwpxContainer,
    config: Union[ExtractionConfig, dict, None] = None,
) -> ExtractedText:
    """
    Extract the text of every section part.

    Args:
        container: Opened HWPX container
        config: Extraction options

    Returns:
        ExtractedText with one SectionText per section part

    Raises:
        UnsupportedFormatError: Missing content.hpf or section part
        HwpxError: Malformed section XML
    """
    config = resolve_config(config)
    sections = []
    for name in section_parts(container):
        try:
            root = container.read_xml(name)
        except StreamNotFoundError as e:
            raise UnsupportedFormatError(f"HWPX section part missing: {name}") from e
        paragraphs = extract_paragraphs(root, config)
        logger.debug(f"{name}: {len(paragraphs)} paragraphs")
        sections.append(SectionText(name=name, paragraphs=paragraphs))
    return ExtractedText(sections=sections)


__all__ = [
    'section_parts',
    'extract_paragraphs',
    'extract_sections',
]
