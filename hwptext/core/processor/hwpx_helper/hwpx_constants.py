# hwptext/core/processor/hwpx_helper/hwpx_constants.py
"""
HWPX Constants and Namespaces

HWPX is a ZIP package of XML parts:
- mimetype: "application/hwp+zip"
- version.xml: HCFVersion (format version)
- META-INF/manifest.xml: Package manifest (encryption data when protected)
- Contents/content.hpf: OPF package, spine gives section order
- Contents/sectionN.xml: Section bodies
"""

# Package entries
MIMETYPE_PATH = "mimetype"
VERSION_PATH = "version.xml"
MANIFEST_PATH = "META-INF/manifest.xml"
HPF_PATH = "Contents/content.hpf"
CONTENTS_DIR = "Contents/"

HWPX_MIMETYPE = "application/hwp+zip"

# Supported version range: MIN <= version < MAX
SUPPORTED_VERSION_MIN = (5, 0, 0, 0)
SUPPORTED_VERSION_MAX = (6, 0, 0, 0)

# HWPX XML namespaces
HWPX_NAMESPACES = {
    'hp': 'http://www.hancom.co.kr/hwpml/2011/paragraph',
}

# OPF namespace (content.hpf)
OPF_NAMESPACES = {
    'opf': 'http://www.idpf.org/2007/opf/',
}

HP = '{' + HWPX_NAMESPACES['hp'] + '}'

# Paragraph level tags
TAG_P = HP + 'p'
TAG_T = HP + 't'

# Children of hp:t that stand for characters
TEXT_CHILD_CHARS = {
    HP + 'tab': '\t',
    HP + 'lineBreak': '\n',
    HP + 'nbSpace': ' ',
    HP + 'fwSpace': ' ',
    HP + 'hyphen': '-',
}

# Inline objects, matched by local name (writers differ in the prefix used)
LOCAL_TABLE = 'tbl'
LOCAL_EQUATION = 'equation'
LOCAL_SCRIPT = 'script'
LOCAL_PICTURE = 'pic'
OBJECT_LOCAL_NAMES = frozenset({'ole', 'chart'})


__all__ = [
    'MIMETYPE_PATH',
    'VERSION_PATH',
    'MANIFEST_PATH',
    'HPF_PATH',
    'CONTENTS_DIR',
    'HWPX_MIMETYPE',
    'SUPPORTED_VERSION_MIN',
    'SUPPORTED_VERSION_MAX',
    'HWPX_NAMESPACES',
    'OPF_NAMESPACES',
    'HP',
    'TAG_P',
    'TAG_T',
    'TEXT_CHILD_CHARS',
    'LOCAL_TABLE',
    'LOCAL_EQUATION',
    'LOCAL_SCRIPT',
    'LOCAL_PICTURE',
    'OBJECT_LOCAL_NAMES',
]
