# fleetcore

Pieces for a server that keeps its state in Elasticsearch. The package has
no third-party dependencies.

- `fleetcore.es.result`: dataclasses for search responses (`Response`,
  `Hits`, `Hit`, `Bucket`, `Aggregation`, `ErrorInfo`, `AckResponse`) and
  the `parse_*` functions that build them from JSON bytes, strings or mappings.
- `fleetcore.es.transport`: `PreparedRequest`, the abstract `Transport`, and
  the formatting helpers `format_duration`, `format_checkpoints` and
  `format_bool`.
- `fleetcore.es.search_request` and `fleetcore.es.search_options`:
  `FleetSearchRequest` and its URL parameters, `FleetSearchOptions`.
- `fleetcore.es.msearch_request`: `FleetMsearchRequest`.
- `fleetcore.es.checkpoints_request`: `GlobalCheckpointsRequest`.
- `fleetcore.coordinator.base`: the `Policy` dataclass and the abstract
  `Coordinator`.
- `fleetcore.coordinator.v0`: `CoordinatorZero` and `new_coordinator_zero`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parsing responses

```python
from fleetcore.es.result import parse_response

resp = parse_response(b'{"took": 3, "hits": {"total": {"value": 1, "relation": "eq"},'
                      b' "hits": [{"_id": "a1", "_seq_no": 7, "_source": {"name": "x"}}]}}')
hit = resp.hits.hits[0]
print(hit.id, hit.seq_no, resp.hits.total_value)  # a1 7 1
```

`Hit.unmarshal(factory)` calls `factory` with the hit's `_source`. If the
object that comes back has an `es_initialize` method, that method is called
with the hit's id, sequence number and version. A hit with no source raises
`ValueError`. The parsers also raise `ValueError` when a field has the wrong
JSON type.

`parse_bucket` keeps `key` and `doc_count`. Every other member that holds a
`hits` object goes into `Bucket.aggregations` as `Hits`.

## Building requests

Request objects build a `PreparedRequest`, which holds a method, a path,
query parameters, an optional body and headers. `PreparedRequest.url()`
puts the query string on the path, with the parameters in key order.

```python
from datetime import timedelta
from fleetcore.es.search_options import FleetSearchOptions
from fleetcore.es.search_request import FleetSearchRequest
from fleetcore.es.checkpoints_request import GlobalCheckpointsRequest

search = FleetSearchRequest(
    index=["agents"],
    body=b'{"query": {"match_all": {}}}',
    options=FleetSearchOptions(size=10, wait_for_checkpoints=[3]),
).with_opaque_id("req-1")
prepared = search.build()
print(prepared.method, prepared.url())
# POST /agents/_fleet/_fleet_search?size=10&wait_for_checkpoints=3

checkpoints = GlobalCheckpointsRequest(
    index="agents", wait_for_advance=True, checkpoints=[5], timeout=timedelta(seconds=30)
)
print(checkpoints.build().url())
# /agents/_fleet/global_checkpoints?checkpoints=5&timeout=30000ms&wait_for_advance=true
```

An option that is not set is left out of the query string. Not set means
None, an empty string, an empty list, a zero duration or a False flag. A
request with a body gets `Content-Type: application/json`.

To send a request, subclass `Transport`, implement `perform`, and pass an
instance to the request's `do` method:

```python
from fleetcore.es.transport import Transport

class PrintingTransport(Transport):
    def perform(self, request):
        print(request.method, request.url(), request.headers)
        return None

search.do(PrintingTransport())
```

## Coordinating policies

```python
import asyncio
from fleetcore.coordinator.base import Policy
from fleetcore.coordinator.v0 import new_coordinator_zero

async def main():
    coord = new_coordinator_zero(Policy(policy_id="p1", revision_idx=1, data=b"{}"))
    task = asyncio.create_task(coord.run())
    first = await coord.output().get()
    print(first.revision_idx, first.coordinator_idx)  # 1 1
    await coord.update(Policy(policy_id="p1", revision_idx=2, data=b"{}"))
    second = await coord.output().get()
    print(second.revision_idx, second.coordinator_idx)  # 2 1
    task.cancel()

asyncio.run(main())
```

The v0 coordinator emits a policy only in two cases: its coordinator index is
0, or its data changed. A policy that already has a coordinator index and
unchanged data produces no output. Each emitted policy has its coordinator
index raised by one.

## What it does not do

- It sends nothing over the network. There is no HTTP client, connection
  handling or authentication; you supply the `Transport`.
- It does not build query bodies. A request body is passed in as bytes.
- It does not turn error responses into exceptions. `ErrorInfo` only exposes
  the fields of the response.
- It does not create indices or manage mappings. It does not run the policy
  leader election or any service loop; the only running component is a
  coordinator task that you start yourself.