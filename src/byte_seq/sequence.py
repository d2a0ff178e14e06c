"""
Fixed-length byte sequence value types.

A byte sequence type is declared once per (name, size) pair, either with
the factory or with a class statement:

    ApiKey = byte_seq("ApiKey", 32)

    class SessionId(ByteSequence, size=16):
        pass

Each declared type can then generate random values, render them as
canonical uppercase hex, parse them back from hex (either case), and be
used directly as a pydantic field:

    key = ApiKey.generate_new()
    assert ApiKey.check(key.to_string()) == key

    class Credentials(BaseModel):
        api_key: ApiKey
"""

import logging
import string
import sys
from typing import Any, ClassVar, Optional, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema

from .errors import InvalidKeyChars, InvalidKeyLen
from .random_source import RandomSource, default_random_source
from .visitor import CheckableVisitor

logger = logging.getLogger(__name__)

# Only ASCII digits count; int(..., 16) alone would also accept signs,
# whitespace, underscores and non-ASCII decimal digits.
_HEX_DIGITS = frozenset(string.hexdigits)


class ByteSequence:
    """
    Superclass for fixed-size immutable byte sequences.

    Not intended to be instantiated directly: declare a concrete type with
    ``byte_seq()`` or by subclassing with ``size=``.
    """

    SIZE: ClassVar[int]
    """Number of bytes in each instance of this class."""

    NAME: ClassVar[str]
    """Display name used in diagnostics and in str()/repr()."""

    __slots__ = ("_data",)

    def __init_subclass__(cls, size: Optional[int] = None, name: Optional[str] = None, **kwargs):
        super().__init_subclass__(**kwargs)
        if size is not None:
            cls.SIZE = _validate_size(size)
        cls.NAME = name or cls.__name__
        if "SIZE" in cls.__dict__:
            logger.debug(f"Declared byte sequence {cls.NAME} of {cls.SIZE} bytes")

    def __init__(self, data: bytes | bytearray | memoryview):
        size = getattr(type(self), "SIZE", None)
        if size is None:
            raise TypeError(f"{type(self).__name__} has no size; declare it with byte_seq()")
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{type(self).__name__} expects bytes-like data, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != size:
            raise ValueError(f"{self.NAME} expects {size} bytes but got {len(data)}")
        object.__setattr__(self, "_data", data)

    # ---------------- Construction ----------------

    @classmethod
    def generate_new(cls, rng: Optional[RandomSource] = None) -> Self:
        """
        Create a value from ``SIZE`` random bytes.

        Args:
            rng: Source to draw from. Defaults to the process-wide source,
                 see ``byte_seq.random_source``.

        Raises:
            ValueError: If the source does not return exactly ``SIZE`` bytes
        """
        source = rng if rng is not None else default_random_source()
        data = source.randbytes(cls.SIZE)
        if not isinstance(data, bytes) or len(data) != cls.SIZE:
            raise ValueError(
                f"random source {type(source).__name__} did not return {cls.SIZE} bytes"
            )
        logger.debug(f"Generated new {cls.NAME}")
        return cls(data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Self:
        return cls(data)

    @classmethod
    def check(cls, key: str) -> Self:
        """
        Parse a hex string of exactly ``2 * SIZE`` characters.

        Upper and lower case digits are accepted. Positions are counted in
        characters, so a string holding non-ASCII characters is measured
        and sliced consistently and rejected as invalid characters.

        Raises:
            TypeError: If ``key`` is not a str
            InvalidKeyLen: If ``key`` does not have ``2 * SIZE`` characters
            InvalidKeyChars: If any character is not a hex digit
        """
        if not isinstance(key, str):
            raise TypeError(f"{cls.NAME}.check expects str, got {type(key).__name__}")

        if len(key) != cls.SIZE * 2:
            logger.debug(f"Rejected {cls.NAME}: expected {cls.SIZE * 2} characters, got {len(key)}")
            raise InvalidKeyLen(raw_key=key, typename=cls.NAME)

        data = bytearray(cls.SIZE)
        for i in range(cls.SIZE):
            pair = key[i * 2:i * 2 + 2]
            if not _HEX_DIGITS.issuperset(pair):
                logger.debug(f"Rejected {cls.NAME}: invalid characters at position {i * 2}")
                raise InvalidKeyChars(raw_key=key, typename=cls.NAME)
            data[i] = int(pair, 16)
        return cls(data)

    # ---------------- Rendering ----------------

    def to_string(self) -> str:
        """Return the canonical form: two uppercase hex digits per byte."""
        return self._data.hex().upper()

    @property
    def raw(self) -> bytes:
        return self._data

    def __bytes__(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __str__(self):
        return f"{self.NAME}({self.to_string()})"

    def __repr__(self):
        return str(self)

    # ---------------- Comparison ----------------

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data < other._data

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data <= other._data

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data > other._data

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data >= other._data

    def __hash__(self):
        return hash(self._data)

    # ---------------- Immutability ----------------

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (type(self), (self._data,))

    # ---------------- pydantic integration ----------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> CoreSchema:
        return CheckableVisitor(cls).core_schema()

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: CoreSchema, handler: GetJsonSchemaHandler) -> JsonSchemaValue:
        length = cls.SIZE * 2
        return {
            "type": "string",
            "title": cls.NAME,
            "pattern": f"^[0-9A-Fa-f]{{{length}}}$",
            "minLength": length,
            "maxLength": length,
        }


def _validate_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"byte sequence size must be an int, got {type(size).__name__}")
    if size <= 0:
        raise ValueError(f"byte sequence size must be positive, got {size}")
    return size


def byte_seq(name: str, count: int, *, module: Optional[str] = None) -> type[ByteSequence]:
    """
    Declare a new byte sequence type.

    Args:
        name: Class name of the new type, also used as its display name.
        count: Number of bytes in every value of the type.
        module: Module the class is recorded as belonging to. Defaults to
                the caller's module so values can be pickled.

    Returns:
        A ByteSequence subclass.

    Examples:
        >>> ApiKey = byte_seq("ApiKey", 32)
        >>> len(ApiKey.generate_new().to_string())
        64
        >>> ApiKey.check("ab" * 32).to_string() == "AB" * 32
        True
    """
    if not isinstance(name, str) or not name.isidentifier():
        raise ValueError(f"byte sequence name must be a valid identifier, got {name!r}")

    cls = type(name, (ByteSequence,), {"__slots__": ()}, size=count)

    if module is None:
        try:
            module = sys._getframe(1).f_globals.get("__name__", "__main__")
        except (AttributeError, ValueError):
            pass
    if module is not None:
        cls.__module__ = module

    return cls
