"""
Errors raised when a string cannot be converted into a byte sequence.

Both kinds are permanent: the input itself is malformed, so retrying the
same conversion can never succeed.
"""


class ByteSequenceError(ValueError):
    """Base class for malformed byte sequence input."""

    description = "Failed to convert string to key"
    retryable = False

    _reason = "it was malformed"

    def __init__(self, raw_key: str, typename: str):
        self._raw_key = raw_key
        self._typename = typename
        super().__init__(
            f"Failed to convert '{raw_key}' to '{typename}' because {self._reason}"
        )

    @property
    def raw_key(self) -> str:
        return self._raw_key

    @property
    def typename(self) -> str:
        return self._typename

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (self.raw_key, self.typename) == (other.raw_key, other.typename)

    def __hash__(self):
        return hash((type(self), self.raw_key, self.typename))

    def __reduce__(self):
        return (type(self), (self.raw_key, self.typename))

    def __repr__(self):
        return f"{type(self).__name__}(raw_key={self.raw_key!r}, typename={self.typename!r})"


class InvalidKeyLen(ByteSequenceError):
    """Raised when the input does not have exactly two characters per byte."""

    description = "Failed to convert string to key because it had the wrong length"
    _reason = "it had the wrong length"


class InvalidKeyChars(ByteSequenceError):
    """Raised when the input has the right length but is not all hex digits."""

    description = "Failed to convert string to key because it contained invalid characters"
    _reason = "it contained invalid characters"
