"""JSON codec error types."""


class CodecError(Exception):
    """Base class for JSON encode/decode failures."""


class EncodeError(CodecError):
    """Raised when a value has no JSON representation."""


class DecodeError(CodecError):
    """Raised when JSON text cannot be turned into the requested type."""

    def __init__(self, message: str, target: type | None = None):
        self.target = target
        super().__init__(message)
