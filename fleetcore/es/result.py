"""Typed views of Elasticsearch search, error and acknowledgement responses."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar, Union

Document = Union[bytes, bytearray, str, Mapping[str, Any], None]

T = TypeVar("T")


def _load(data: Document) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = json.loads(data)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _field(doc: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    value = doc.get(key)
    if value is None:
        return default
    if kind is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"field {key!r} must be a number, got {value!r}")
        return float(value)
    if kind is int and isinstance(value, bool):
        raise ValueError(f"field {key!r} must be an integer, got {value!r}")
    if not isinstance(value, kind):
        raise ValueError(f"field {key!r} must be {kind.__name__}, got {value!r}")
    return value


def _optional_float(doc: Mapping[str, Any], key: str) -> Optional[float]:
    if doc.get(key) is None:
        return None
    return _field(doc, key, float, None)


def _list(doc: Mapping[str, Any], key: str) -> List[Any]:
    value = doc.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be a list, got {value!r}")
    return value


@dataclass(frozen=True)
class ErrorInfo:
    """The ``error`` object of an Elasticsearch response."""

    error_type: str = ""
    reason: str = ""
    cause_type: str = ""
    cause_reason: str = ""


@dataclass(frozen=True)
class AckResponse:
    """Response of an acknowledged operation, such as deleting indices."""

    acknowledged: bool = False
    error: ErrorInfo = field(default_factory=ErrorInfo)


@dataclass
class Hit:
    """A single search hit."""

    id: str = ""
    seq_no: int = 0
    version: int = 0
    index: str = ""
    source: Any = None
    score: Optional[float] = None

    def unmarshal(self, factory: Callable[[Any], T]) -> T:
        """Build an object from the hit source and stamp it with the hit metadata.

        If the built object has an ``es_initialize`` method it is called with
        the hit id, sequence number and version.
        """
        if self.source is None:
            raise ValueError("hit has no source")
        obj = factory(self.source)
        initialize = getattr(obj, "es_initialize", None)
        if callable(initialize):
            initialize(self.id, self.seq_no, self.version)
        return obj


@dataclass
class Hits:
    """The ``hits`` section of a search response."""

    hits: List[Hit] = field(default_factory=list)
    total_relation: str = ""
    total_value: int = 0
    max_score: Optional[float] = None


@dataclass
class Bucket:
    """A terms aggregation bucket with its nested top-hits aggregations."""

    key: str = ""
    doc_count: int = 0
    aggregations: Dict[str, Hits] = field(default_factory=dict)


@dataclass
class Aggregation:
    """A single aggregation result."""

    value: float = 0.0
    doc_count_error_upper_bound: int = 0
    sum_other_doc_count: int = 0
    buckets: List[Bucket] = field(default_factory=list)


@dataclass
class Response:
    """A full search response."""

    status: int = 0
    took: int = 0
    timed_out: bool = False
    shards_total: int = 0
    shards_successful: int = 0
    shards_skipped: int = 0
    shards_failed: int = 0
    hits: Hits = field(default_factory=Hits)
    aggregations: Dict[str, Aggregation] = field(default_factory=dict)
    error: ErrorInfo = field(default_factory=ErrorInfo)


def parse_error_info(data: Document) -> ErrorInfo:
    doc = _load(data)
    cause = _load(doc.get("caused_by"))
    return ErrorInfo(
        error_type=_field(doc, "type", str, ""),
        reason=_field(doc, "reason", str, ""),
        cause_type=_field(cause, "type", str, ""),
        cause_reason=_field(cause, "reason", str, ""),
    )


def parse_ack_response(data: Document) -> AckResponse:
    doc = _load(data)
    return AckResponse(
        acknowledged=_field(doc, "acknowledged", bool, False),
        error=parse_error_info(doc.get("error")),
    )


def parse_hit(data: Document) -> Hit:
    doc = _load(data)
    return Hit(
        id=_field(doc, "_id", str, ""),
        seq_no=_field(doc, "_seq_no", int, 0),
        version=_field(doc, "version", int, 0),
        index=_field(doc, "_index", str, ""),
        source=doc.get("_source"),
        score=_optional_float(doc, "_score"),
    )


def parse_hits(data: Document) -> Hits:
    doc = _load(data)
    total = _load(doc.get("total"))
    return Hits(
        hits=[parse_hit(item) for item in _list(doc, "hits")],
        total_relation=_field(total, "relation", str, ""),
        total_value=_field(total, "value", int, 0),
        max_score=_optional_float(doc, "max_score"),
    )


def parse_bucket(data: Document) -> Bucket:
    doc = _load(data)
    aggregations = {
        name: parse_hits(value["hits"])
        for name, value in doc.items()
        if name not in ("key", "doc_count") and isinstance(value, Mapping) and "hits" in value
    }
    return Bucket(
        key=_field(doc, "key", str, ""),
        doc_count=_field(doc, "doc_count", int, 0),
        aggregations=aggregations,
    )


def parse_aggregation(data: Document) -> Aggregation:
    doc = _load(data)
    return Aggregation(
        value=_field(doc, "value", float, 0.0),
        doc_count_error_upper_bound=_field(doc, "doc_count_error_upper_bound", int, 0),
        sum_other_doc_count=_field(doc, "sum_other_doc_count", int, 0),
        buckets=[parse_bucket(item) for item in _list(doc, "buckets")],
    )


def parse_response(data: Document) -> Response:
    doc = _load(data)
    shards = _load(doc.get("_shards"))
    aggregations = _load(doc.get("aggregations"))
    return Response(
        status=_field(doc, "status", int, 0),
        took=_field(doc, "took", int, 0),
        timed_out=_field(doc, "timed_out", bool, False),
        shards_total=_field(shards, "total", int, 0),
        shards_successful=_field(shards, "successful", int, 0),
        shards_skipped=_field(shards, "skipped", int, 0),
        shards_failed=_field(shards, "failed", int, 0),
        hits=parse_hits(doc.get("hits")),
        aggregations={name: parse_aggregation(value) for name, value in aggregations.items()},
        error=parse_error_info(doc.get("error")),
    )