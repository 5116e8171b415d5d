"""records/modify request."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field

from ..models import WireModel
from .models import Db, DbBasePath, Operation, ZoneId


class ModifyRecordsRequestBody(WireModel):
    operations: tuple[Operation, ...]
    zone_id: ZoneId = Field(alias="zoneID")
    atomic: bool | None = None
    desired_keys: tuple[str, ...] | None = Field(default=None, alias="desiredKeys")
    numbers_as_strings: bool | None = Field(default=None, alias="numbersAsStrings")


@dataclass(frozen=True, slots=True)
class ModifyRecordsRequest:
    """Create, update or delete records in one zone of a database."""

    db_base_path: DbBasePath
    db: Db
    modify_body: ModifyRecordsRequestBody

    def sub_path(self) -> str:
        return f"{self.db_base_path.db_path(self.db)}/records/modify"

    def body(self) -> ModifyRecordsRequestBody:
        return self.modify_body
