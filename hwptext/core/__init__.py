# hwptext/core/__init__.py
from hwptext.core.document_processor import CurrentFile, DocumentProcessor

__all__ = [
    'CurrentFile',
    'DocumentProcessor',
]
