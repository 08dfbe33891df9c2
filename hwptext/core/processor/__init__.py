# hwptext/core/processor/__init__.py
"""
Format handlers.

- base_handler.py: BaseHandler interface
- hwp5_handler.py: HWP 5.0 compound files
- hwpx_handler.py: HWPX packages
"""
from hwptext.core.processor.base_handler import BaseHandler
from hwptext.core.processor.hwp5_handler import HWP5Handler
from hwptext.core.processor.hwpx_handler import HWPXHandler

__all__ = [
    'BaseHandler',
    'HWP5Handler',
    'HWPXHandler',
]
