"""Shared CloudKit database paths and record/zone documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from pydantic import Field

from ..models import WireModel

API_VERSION: Final[str] = "1"


@dataclass(frozen=True, slots=True)
class Container:
    """CloudKit container identifier, e.g. ``iCloud.com.example.app``."""

    name: str


class Env(Enum):
    DEV = "development"
    PROD = "production"

    def as_str(self) -> str:
        return self.value


class Db(Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    SHARED = "shared"

    def as_str(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DbBasePath:
    """The ``/database/1/<container>/<environment>`` prefix shared by requests."""

    container: Container
    env: Env

    @property
    def version(self) -> str:
        return API_VERSION

    def sub_path(self) -> str:
        return f"/database/{self.version}/{self.container.name}/{self.env.as_str()}"

    def db_path(self, db: Db) -> str:
        return f"{self.sub_path()}/{db.as_str()}"


class OperationType(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    FORCE_UPDATE = "forceUpdate"
    REPLACE = "replace"
    FORCE_REPLACE = "forceReplace"
    DELETE = "delete"
    FORCE_DELETE = "forceDelete"


class Record(WireModel):
    record_name: str = Field(alias="recordName")
    record_type: str | None = Field(default=None, alias="recordType")
    record_change_tag: str | None = Field(default=None, alias="recordChangeTag")


class Operation(WireModel):
    """A single record operation inside a modify request."""

    operation_type: OperationType = Field(alias="operationType")
    record: Record
    desired_keys: tuple[str, ...] | None = Field(default=None, alias="desiredKeys")


class ZoneId(WireModel):
    zone_name: str = Field(alias="zoneName")
    owner_record_name: str | None = Field(default=None, alias="ownerRecordName")


class Zone(WireModel):
    zone_id: ZoneId = Field(alias="zoneID")
    sync_token: str | None = Field(default=None, alias="syncToken")
    atomic: bool | None = None
