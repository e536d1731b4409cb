"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events, so a signup or login can be correlated across
    the service and repository probes.

    Attributes:
        request_id: Caller-supplied X-Request-ID, if any.
        client_host: Address of the calling client (if known).

    Example:
        context = ObservationContext(request_id="req-123")
        probe = DefaultAccountServiceProbe().with_context(context)
    """

    request_id: str | None = None
    client_host: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.client_host is not None:
            result["client_host"] = self.client_host
        return result
