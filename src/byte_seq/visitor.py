"""
Bridge between pydantic validation and the Checkable capability.

A CheckableVisitor only knows which class it is validating for. Everything
that decides whether a string is acceptable lives in that class's ``check``,
so a value read from JSON is held to exactly the same rules as one parsed
by hand.
"""

from typing import Any, Generic, TypeVar

from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from .checkable import Checkable
from .errors import ByteSequenceError

Checked = TypeVar("Checked", bound=Checkable)


class CheckableVisitor(Generic[Checked]):
    """Validates strings into ``target`` instances for pydantic."""

    __slots__ = ("target",)

    def __init__(self, target: type[Checked]):
        self.target = target

    def expecting(self) -> str:
        return f"An {self.target.NAME} in String format!"

    def visit_str(self, value: str) -> Checked:
        try:
            return self.target.check(value)
        except ByteSequenceError as e:
            raise PydanticCustomError(
                "byte_sequence_parsing",
                "Failed to deserialize {typename} '{error}'",
                {"typename": self.target.NAME, "error": str(e)},
            ) from e

    def visit_python(self, value: Any) -> Checked:
        if type(value) is self.target:
            return value
        if isinstance(value, str):
            return self.visit_str(value)
        raise PydanticCustomError(
            "byte_sequence_type",
            "{expected}",
            {"expected": self.expecting()},
        )

    def core_schema(self) -> CoreSchema:
        """
        Build the pydantic core schema for ``target``.

        JSON input must be a string; anything else is rejected by pydantic
        before ``visit_str`` runs. Python input may also be an existing
        instance of ``target``. JSON output is the canonical string form.
        """
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.str_schema(strict=True),
                    core_schema.no_info_plain_validator_function(self.visit_str),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(self.visit_python),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, when_used="json"
            ),
        )

    def __repr__(self):
        return f"CheckableVisitor({self.target.NAME})"


def _serialize(value) -> str:
    return value.to_string()
