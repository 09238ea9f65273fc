"""The fleet global checkpoints request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional

from fleetcore.es.transport import (
    PreparedRequest,
    Transport,
    format_bool,
    format_checkpoints,
    format_duration,
)

_ENDPOINT = "/_fleet/global_checkpoints"


@dataclass
class GlobalCheckpointsRequest:
    """Configures a request to the fleet global checkpoints endpoint."""

    index: str = ""
    wait_for_advance: Optional[bool] = None
    wait_for_index: Optional[bool] = None
    checkpoints: List[int] = field(default_factory=list)
    timeout: Optional[timedelta] = None
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def path(self) -> str:
        prefix = f"/{self.index}" if self.index else ""
        return prefix + _ENDPOINT

    def params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.wait_for_advance is not None:
            params["wait_for_advance"] = format_bool(self.wait_for_advance)
        if self.wait_for_index is not None:
            params["wait_for_index"] = format_bool(self.wait_for_index)
        if self.checkpoints:
            params["checkpoints"] = format_checkpoints(self.checkpoints)
        if self.timeout:
            params["timeout"] = format_duration(self.timeout)
        return params

    def build(self) -> PreparedRequest:
        request = PreparedRequest("GET", self.path(), self.params())
        request.merge_headers(self.headers)
        return request

    def do(self, transport: Transport) -> Any:
        """Send the request through ``transport`` and return its response."""
        return transport.perform(self.build())