"""
The parse-from-string capability shared by every byte sequence type.
"""

from typing import ClassVar, Protocol, Self, runtime_checkable


@runtime_checkable
class Checkable(Protocol):
    """Interface for types that can validate and parse themselves from text.

    Implementations:
        - ByteSequence subclasses declared with a size
    """

    NAME: ClassVar[str]
    """Display name, used only in diagnostics."""

    @classmethod
    def check(cls, key: str) -> Self:
        """Parse ``key`` into an instance.

        Raises:
            ByteSequenceError: If ``key`` is not a valid rendering of the type
        """
        ...
