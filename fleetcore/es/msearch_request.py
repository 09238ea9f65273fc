"""The fleet multi-search request."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from fleetcore.es.transport import PreparedRequest, Transport, format_bool

_ENDPOINT = "_fleet/_fleet_msearch"
_OPAQUE_ID = "X-Opaque-Id"


@dataclass
class FleetMsearchRequest:
    """Configures a request to the fleet multi-search endpoint."""

    index: List[str] = field(default_factory=list)
    document_type: List[str] = field(default_factory=list)
    body: Optional[bytes] = None
    ccs_minimize_roundtrips: Optional[bool] = None
    max_concurrent_searches: Optional[int] = None
    max_concurrent_shard_requests: Optional[int] = None
    pre_filter_shard_size: Optional[int] = None
    rest_total_hits_as_int: Optional[bool] = None
    search_type: str = ""
    typed_keys: Optional[bool] = None
    pretty: bool = False
    human: bool = False
    error_trace: bool = False
    filter_path: List[str] = field(default_factory=list)
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
        params: Dict[str, str] = {}
        if self.ccs_minimize_roundtrips is not None:
            params["ccs_minimize_roundtrips"] = format_bool(self.ccs_minimize_roundtrips)
        if self.max_concurrent_searches is not None:
            params["max_concurrent_searches"] = str(int(self.max_concurrent_searches))
        if self.max_concurrent_shard_requests is not None:
            params["max_concurrent_shard_requests"] = str(int(self.max_concurrent_shard_requests))
        if self.pre_filter_shard_size is not None:
            params["pre_filter_shard_size"] = str(int(self.pre_filter_shard_size))
        if self.rest_total_hits_as_int is not None:
            params["rest_total_hits_as_int"] = format_bool(self.rest_total_hits_as_int)
        if self.search_type:
            params["search_type"] = self.search_type
        if self.typed_keys is not None:
            params["typed_keys"] = format_bool(self.typed_keys)
        if self.pretty:
            params["pretty"] = "true"
        if self.human:
            params["human"] = "true"
        if self.error_trace:
            params["error_trace"] = "true"
        if self.filter_path:
            params["filter_path"] = ",".join(self.filter_path)
        return params

    def build(self) -> PreparedRequest:
        request = PreparedRequest("POST", self.path(), self.params(), self.body)
        if self.body is not None:
            request.headers["Content-Type"] = ["application/json"]
        request.merge_headers(self.headers)
        return request

    def do(self, transport: Transport) -> Any:
        """Send the request through ``transport`` and return its response."""
        return transport.perform(self.build())

    def with_header(self, headers: Mapping[str, str]) -> FleetMsearchRequest:
        """Add the given headers to the request."""
        for key, value in headers.items():
            self.headers.setdefault(key, []).append(value)
        return self

    def with_opaque_id(self, opaque_id: str) -> FleetMsearchRequest:
        """Set the X-Opaque-Id header, replacing any earlier value."""
        for key in [k for k in self.headers if k.lower() == _OPAQUE_ID.lower()]:
            del self.headers[key]
        self.headers[_OPAQUE_ID] = [opaque_id]
        return self