"""DeviceCheck request models.

See https://developer.apple.com/documentation/devicecheck
"""

from __future__ import annotations

from enum import Enum
from typing import Self

from .models import WireModel
from .protocols import DurationSinceEpoch


class Env(Enum):
    DEV = "https://api.development.devicecheck.apple.com"
    PROD = "https://api.devicecheck.apple.com"

    @property
    def base_endpoint(self) -> str:
        return self.value

    def validate_device_endpoint(self) -> str:
        return f"{self.base_endpoint}/v1/validate_device_token"


class ValidationReq(WireModel):
    """Body of a validate_device_token request.

    Attributes:
        device_token: Base64 token produced by ``DCDevice`` on the device.
        transaction_id: Caller-chosen unique ID for this request.
        timestamp: Milliseconds since the Unix epoch.
    """

    device_token: str
    transaction_id: str
    timestamp: int

    @classmethod
    def new(
        cls, device_token: str, transaction_id: str, now: DurationSinceEpoch
    ) -> Self:
        return cls(
            device_token=device_token,
            transaction_id=transaction_id,
            timestamp=now.as_millis(),
        )
