"""zones/list request and its response."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import ConfigDict, field_validator

from ..models import WireModel
from .models import Db, DbBasePath, Zone


@dataclass(frozen=True, slots=True)
class FetchZonesRequest:
    """List all zones of a database. Sent without a body."""

    db_base_path: DbBasePath
    db: Db

    def sub_path(self) -> str:
        return f"{self.db_base_path.db_path(self.db)}/zones/list"

    def body(self) -> None:
        return None


class FetchZonesResponse(WireModel):
    """The zones/list response.

    Top-level fields this package does not model are kept and written back
    by ``to_dict()`` / ``to_json()``. A missing or null ``zones`` reads as
    an empty tuple.
    """

    model_config = ConfigDict(extra="allow")

    zones: tuple[Zone, ...] = ()

    @field_validator("zones", mode="before")
    @classmethod
    def _null_as_empty(cls, v: object) -> object:
        return () if v is None else v
