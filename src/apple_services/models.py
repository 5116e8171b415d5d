"""Base class for JSON documents exchanged with Apple services."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import InvalidDocument
from .protocols import JsonObject


class WireModel(BaseModel):
    """Immutable, forward-compatible JSON document.

    - Unknown fields in the input are ignored.
    - Optional fields that are unset are omitted on output, never sent as null.
    - Fields with a JSON alias accept either the alias or the Python name.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @classmethod
    def parse(cls, raw: str | bytes | JsonObject) -> Self:
        """Build the model from a JSON string, bytes, or a decoded mapping.

        Raises:
            InvalidDocument: If the input is not valid JSON or does not match
                the model's shape.
        """
        try:
            if isinstance(raw, (str, bytes, bytearray)):
                return cls.model_validate_json(raw)
            return cls.model_validate(raw)
        except ValidationError as e:
            raise InvalidDocument(
                f"Invalid {cls.__name__} document ({e.error_count()} error(s))"
            ) from e

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)
