"""Prepared HTTP requests and the transport that sends them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from urllib.parse import urlencode

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MICRO = 1_000
_NANOS_PER_MILLI = 1_000_000

HeaderValues = Union[str, Iterable[str]]


def format_duration(duration: timedelta) -> str:
    """Format a duration the way Elasticsearch expects time parameters."""
    nanos = (
        (duration.days * 86_400 + duration.seconds) * _NANOS_PER_SECOND
        + duration.microseconds * _NANOS_PER_MICRO
    )
    if nanos < _NANOS_PER_MILLI:
        return f"{nanos}nanos"
    return f"{nanos // _NANOS_PER_MILLI}ms"


def format_checkpoints(checkpoints: Iterable[int]) -> str:
    """Join sequence-number checkpoints into a comma separated list."""
    return ",".join(str(int(checkpoint)) for checkpoint in checkpoints)


def format_bool(value: bool) -> str:
    """Format a boolean query parameter."""
    return "true" if value else "false"


def _canonical_key(key: str) -> str:
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


@dataclass
class PreparedRequest:
    """An HTTP request ready to be handed to a transport."""

    method: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    headers: Dict[str, List[str]] = field(default_factory=dict)

    def url(self) -> str:
        """The path with its query string; parameters are encoded in key order."""
        if not self.params:
            return self.path
        return f"{self.path}?{urlencode(sorted(self.params.items()))}"

    def merge_headers(self, headers: Mapping[str, HeaderValues]) -> None:
        """Add every value of ``headers`` to the request's headers."""
        for key, values in headers.items():
            if isinstance(values, str):
                values = [values]
            self.headers.setdefault(_canonical_key(key), []).extend(values)


class Transport(ABC):
    """Sends prepared requests to a cluster."""

    @abstractmethod
    def perform(self, request: PreparedRequest) -> Any:
        """Send ``request`` and return the response."""