"""Protocol definitions for the Apple services models.

This module defines structural interfaces using Protocol (PEP 544) for:
- Time sources (anything that can report the duration since the Unix epoch)
- Service requests (a sub-path plus an optional JSON body)

Any class that implements the required methods satisfies the protocol, so
tests can pass a fixed clock and callers can plug in their own request types
without inheriting from anything here.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeAlias

if TYPE_CHECKING:
    from pydantic import BaseModel

# ============================================================================
# Type Aliases
# ============================================================================

JsonObject: TypeAlias = Mapping[str, Any]
"""A decoded JSON object, as produced by ``json.loads`` on an object document."""


# ============================================================================
# Core Protocols
# ============================================================================


class DurationSinceEpoch(Protocol):
    """A snapshot of time measured from the Unix epoch.

    Token and request builders take one of these instead of reading the wall
    clock, which keeps them deterministic for a given input. Implementations
    should return the same values on every call (a snapshot, not a live
    clock).
    """

    def as_secs(self) -> int:
        """Return whole seconds since the Unix epoch."""
        ...

    def as_millis(self) -> int:
        """Return whole milliseconds since the Unix epoch."""
        ...


class Request(Protocol):
    """A request to an Apple web service endpoint.

    The HTTP transport (not part of this package) joins ``sub_path()`` to the
    service base URL, attaches credentials, and sends ``body()`` as JSON when
    it is not None.
    """

    def sub_path(self) -> str:
        """Return the path below the service base URL, starting with '/'."""
        ...

    def body(self) -> BaseModel | None:
        """Return the JSON body model, or None for requests without a body."""
        ...
