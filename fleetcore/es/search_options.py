"""Query-string options of the fleet search request."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, List, Optional

from fleetcore.es.transport import format_bool, format_checkpoints, format_duration


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return format_bool(value)
    return str(value)


@dataclass
class FleetSearchOptions:
    """Every URL parameter the fleet search endpoint accepts.

    Unset options (None, empty strings, empty lists, zero durations and
    False flags) are left out of the query string.
    """

    wait_for_checkpoints: List[int] = field(default_factory=list)
    allow_no_indices: Optional[bool] = None
    allow_partial_search_results: Optional[bool] = None
    analyzer: str = ""
    analyze_wildcard: Optional[bool] = None
    batched_reduce_size: Optional[int] = None
    ccs_minimize_roundtrips: Optional[bool] = None
    default_operator: str = ""
    df: str = ""
    docvalue_fields: List[str] = field(default_factory=list)
    expand_wildcards: str = ""
    explain: Optional[bool] = None
    from_: Optional[int] = None
    ignore_throttled: Optional[bool] = None
    ignore_unavailable: Optional[bool] = None
    lenient: Optional[bool] = None
    max_concurrent_shard_requests: Optional[int] = None
    min_compatible_shard_node: str = ""
    preference: str = ""
    pre_filter_shard_size: Optional[int] = None
    query: str = ""
    request_cache: Optional[bool] = None
    rest_total_hits_as_int: Optional[bool] = None
    routing: List[str] = field(default_factory=list)
    scroll: Optional[timedelta] = None
    search_type: str = ""
    seq_no_primary_term: Optional[bool] = None
    size: Optional[int] = None
    sort: List[str] = field(default_factory=list)
    source: List[str] = field(default_factory=list)
    source_excludes: List[str] = field(default_factory=list)
    source_includes: List[str] = field(default_factory=list)
    stats: List[str] = field(default_factory=list)
    stored_fields: List[str] = field(default_factory=list)
    suggest_field: str = ""
    suggest_mode: str = ""
    suggest_size: Optional[int] = None
    suggest_text: str = ""
    terminate_after: Optional[int] = None
    timeout: Optional[timedelta] = None
    track_scores: Optional[bool] = None
    track_total_hits: Any = None
    typed_keys: Optional[bool] = None
    version: Optional[bool] = None
    pretty: bool = False
    human: bool = False
    error_trace: bool = False
    filter_path: List[str] = field(default_factory=list)

    def to_params(self) -> Dict[str, str]:
        """Return the query-string parameters for the options that are set."""
        params: Dict[str, str] = {}

        if self.wait_for_checkpoints:
            params["wait_for_checkpoints"] = format_checkpoints(self.wait_for_checkpoints)

        flags = {
            "allow_no_indices": self.allow_no_indices,
            "allow_partial_search_results": self.allow_partial_search_results,
            "analyze_wildcard": self.analyze_wildcard,
            "ccs_minimize_roundtrips": self.ccs_minimize_roundtrips,
            "explain": self.explain,
            "ignore_throttled": self.ignore_throttled,
            "ignore_unavailable": self.ignore_unavailable,
            "lenient": self.lenient,
            "request_cache": self.request_cache,
            "rest_total_hits_as_int": self.rest_total_hits_as_int,
            "seq_no_primary_term": self.seq_no_primary_term,
            "track_scores": self.track_scores,
            "typed_keys": self.typed_keys,
            "version": self.version,
        }
        numbers = {
            "batched_reduce_size": self.batched_reduce_size,
            "from": self.from_,
            "max_concurrent_shard_requests": self.max_concurrent_shard_requests,
            "pre_filter_shard_size": self.pre_filter_shard_size,
            "size": self.size,
            "suggest_size": self.suggest_size,
            "terminate_after": self.terminate_after,
        }
        strings = {
            "analyzer": self.analyzer,
            "default_operator": self.default_operator,
            "df": self.df,
            "expand_wildcards": self.expand_wildcards,
            "min_compatible_shard_node": self.min_compatible_shard_node,
            "preference": self.preference,
            "q": self.query,
            "search_type": self.search_type,
            "suggest_field": self.suggest_field,
            "suggest_mode": self.suggest_mode,
            "suggest_text": self.suggest_text,
        }
        lists = {
            "docvalue_fields": self.docvalue_fields,
            "routing": self.routing,
            "sort": self.sort,
            "_source": self.source,
            "_source_excludes": self.source_excludes,
            "_source_includes": self.source_includes,
            "stats": self.stats,
            "stored_fields": self.stored_fields,
            "filter_path": self.filter_path,
        }
        durations = {"scroll": self.scroll, "timeout": self.timeout}
        switches = {"pretty": self.pretty, "human": self.human, "error_trace": self.error_trace}

        params.update({k: format_bool(v) for k, v in flags.items() if v is not None})
        params.update({k: str(int(v)) for k, v in numbers.items() if v is not None})
        params.update({k: v for k, v in strings.items() if v})
        params.update({k: ",".join(v) for k, v in lists.items() if v})
        params.update({k: format_duration(v) for k, v in durations.items() if v})
        if self.track_total_hits is not None:
            params["track_total_hits"] = _format_value(self.track_total_hits)
        params.update({k: "true" for k, v in switches.items() if v})
        return params