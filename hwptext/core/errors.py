# hwptext/core/errors.py
"""
Extraction Error Hierarchy

Every failure raised by the extraction engine derives from HwpError.
One subclass exists per failure kind so callers can branch on the class
(or on the ``kind`` attribute) without parsing messages:

- FileError: I/O failure opening/reading the source
- InvalidSignatureError: magic mismatch (terminal)
- UnsupportedVersionError: recognized signature, unimplemented version
- PasswordProtectedError: protected document, gated before decoding
- StreamNotFoundError: requested stream absent from the container
- InvalidRecordHeaderError: structurally impossible record header
- DecompressFailedError: corrupt or truncated deflate payload
- DecryptFailedError: distribution document stream could not be decrypted
- ParseError: generic structural failure
- UnsupportedFormatError: container recognized but mandatory structure missing
- HwpxError: archive/XML specific failure

Context (stream name, byte offset) is kept on the exception and appended to
the message where available.
"""
from typing import Optional, Tuple


class HwpError(Exception):
    """Base class for all extraction errors."""

    kind = "Error"

    def __init__(
        self,
        message: str,
        stream: Optional[str] = None,
        offset: Optional[int] = None,
    ):
        self.message = message
        self.stream = stream
        self.offset = offset
        super().__init__(self._format())

    def _format(self) -> str:
        context = []
        if self.stream:
            context.append(f"stream={self.stream}")
        if self.offset is not None:
            context.append(f"offset={self.offset}")
        if context:
            return f"{self.message} ({', '.join(context)})"
        return self.message


class FileError(HwpError):
    kind = "FileError"


class InvalidSignatureError(HwpError):
    kind = "InvalidSignature"

    def __init__(self, message: str = "Invalid file signature", **kwargs):
        super().__init__(message, **kwargs)


class UnsupportedVersionError(HwpError):
    """Signature is known but the version is outside the supported range."""

    kind = "UnsupportedVersion"

    def __init__(self, version: Tuple[int, ...], **kwargs):
        self.version = tuple(version)
        version_text = ".".join(str(v) for v in self.version)
        super().__init__(f"Unsupported version: {version_text}", **kwargs)


class PasswordProtectedError(HwpError):
    kind = "PasswordProtected"

    def __init__(self, message: str = "Document is password protected", **kwargs):
        super().__init__(message, **kwargs)


class StreamNotFoundError(HwpError):
    kind = "StreamNotFound"

    def __init__(self, name: str, **kwargs):
        self.name = name
        kwargs.setdefault("stream", name)
        super().__init__("Stream not found", **kwargs)


class InvalidRecordHeaderError(HwpError):
    kind = "InvalidRecordHeader"

    def __init__(self, message: str = "Invalid record header", **kwargs):
        super().__init__(message, **kwargs)


class DecompressFailedError(HwpError):
    kind = "DecompressFailed"

    def __init__(self, detail: str, **kwargs):
        self.detail = detail
        super().__init__(f"Decompression failed: {detail}", **kwargs)


class DecryptFailedError(HwpError):
    kind = "DecryptFailed"

    def __init__(self, detail: str, **kwargs):
        self.detail = detail
        super().__init__(f"Decryption failed: {detail}", **kwargs)


class ParseError(HwpError):
    kind = "Parse"

    def __init__(self, detail: str, **kwargs):
        self.detail = detail
        super().__init__(f"Parse error: {detail}", **kwargs)


class UnsupportedFormatError(HwpError):
    kind = "UnsupportedFormat"

    def __init__(self, message: str = "Unsupported file format", **kwargs):
        super().__init__(message, **kwargs)


class HwpxError(HwpError):
    kind = "Hwpx"

    def __init__(self, detail: str, **kwargs):
        self.detail = detail
        super().__init__(f"HWPX error: {detail}", **kwargs)


__all__ = [
    'HwpError',
    'FileError',
    'InvalidSignatureError',
    'UnsupportedVersionError',
    'PasswordProtectedError',
    'StreamNotFoundError',
    'InvalidRecordHeaderError',
    'DecompressFailedError',
    'DecryptFailedError',
    'ParseError',
    'UnsupportedFormatError',
    'HwpxError',
]
