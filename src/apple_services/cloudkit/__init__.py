"""CloudKit Web Services request models.

Paths have the form ``/database/<version>/<container>/<environment>/<db>/...``
below ``BASE_URL``. Server-to-server requests are signed with a separate
scheme carried in the ``X-Apple-CloudKit-Request-*`` headers; computing that
signature is left to the transport.

See https://developer.apple.com/library/archive/documentation/DataManagement/Conceptual/CloudKitWebServicesReference/
"""

from __future__ import annotations

from typing import Final

from .models import (
    API_VERSION,
    Container,
    Db,
    DbBasePath,
    Env,
    Operation,
    OperationType,
    Record,
    Zone,
    ZoneId,
)
from .records import ModifyRecordsRequest, ModifyRecordsRequestBody
from .zones import FetchZonesRequest, FetchZonesResponse

X_APPLE_CLOUDKIT_REQUEST_KEY_ID_HEADER: Final[str] = "X-Apple-CloudKit-Request-KeyID"
X_APPLE_CLOUDKIT_REQUEST_ISO8601_DATE_HEADER: Final[str] = (
    "X-Apple-CloudKit-Request-ISO8601Date"
)
X_APPLE_CLOUDKIT_REQUEST_SIGNATURE_V1_HEADER: Final[str] = (
    "X-Apple-CloudKit-Request-SignatureV1"
)

BASE_URL: Final[str] = "https://api.apple-cloudkit.com"

__all__ = [
    "API_VERSION",
    "BASE_URL",
    "X_APPLE_CLOUDKIT_REQUEST_ISO8601_DATE_HEADER",
    "X_APPLE_CLOUDKIT_REQUEST_KEY_ID_HEADER",
    "X_APPLE_CLOUDKIT_REQUEST_SIGNATURE_V1_HEADER",
    "Container",
    "Db",
    "DbBasePath",
    "Env",
    "FetchZonesRequest",
    "FetchZonesResponse",
    "ModifyRecordsRequest",
    "ModifyRecordsRequestBody",
    "Operation",
    "OperationType",
    "Record",
    "Zone",
    "ZoneId",
]
