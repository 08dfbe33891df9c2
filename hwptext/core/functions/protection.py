# hwptext/core/functions/protection.py
"""
Protection Gate

Stops extraction of password-protected documents before any body stream is
read. This is a detector only: no password handling exists.
"""
import logging

from hwptext.core.errors import PasswordProtectedError
from hwptext.core.functions.header_info import HeaderInfo

logger = logging.getLogger("hwptext")


def check_protection(header: HeaderInfo, source: str = "") -> None:
    """
    Raise PasswordProtectedError when the header marks the document protected.

    Args:
        header: Inspected header
        source: File name for logging

    Raises:
        PasswordProtectedError: Protection flag is set
    """
    if header.is_password_protected:
        logger.info(f"Password protected {header.format} document, skipping: {source}")
        raise PasswordProtectedError()


__all__ = ['check_protection']
