"""The fleet search request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fleetcore.es.search_options import FleetSearchOptions
from fleetcore.es.transport import PreparedRequest, Transport

_ENDPOINT = "_fleet/_fleet_search"
_OPAQUE_ID = "X-Opaque-Id"
_CONTENT_TYPE = "Content-Type"
_JSON = "application/json"


@dataclass
class FleetSearchRequest:
    """Configures a request to the fleet search endpoint.

    The URL parameters live in ``options``; only those that are set are sent.
    """

    index: List[str] = field(default_factory=list)
    document_type: List[str] = field(default_factory=list)
    body: Optional[bytes] = None
    options: FleetSearchOptions = field(default_factory=FleetSearchOptions)
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def path(self) -> str:
        parts = []
        if self.index:
            parts.append("/" + ",".join(self.index))
        if self.document_type:
            parts.append("/" + ",".join(self.document_type))
        parts.append("/" + _ENDPOINT)
        return "".join(parts)

    def params(self) -> Dict[str, str]:
        return self.options.to_params()

    def build(self) -> PreparedRequest:
        request = PreparedRequest("POST", self.path(), self.params(), self.body)
        if self.body is not None:
            request.headers[_CONTENT_TYPE] = [_JSON]
        request.merge_headers(self.headers)
        return request

    def do(self, transport: Transport) -> Any:
        """Send the request through ``transport`` and return its response."""
        return transport.perform(self.build())

    def with_header(self, headers: Mapping[str, str]) -> FleetSearchRequest:
        """Add the given headers to the request."""
        for key, value in headers.items():
            self.headers.setdefault(key, []).append(value)
        return self

    def with_opaque_id(self, opaque_id: str) -> FleetSearchRequest:
        """Set the X-Opaque-Id header, replacing any earlier value."""
        for key in [k for k in self.headers if k.lower() == _OPAQUE_ID.lower()]:
            del self.headers[key]
        self.headers[_OPAQUE_ID] = [opaque_id]
        return self