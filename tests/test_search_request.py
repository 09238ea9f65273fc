from datetime import timedelta

import pytest

from fleetcore.es.search_options import FleetSearchOptions
from fleetcore.es.search_request import FleetSearchRequest
from fleetcore.es.transport import (
    PreparedRequest,
    Transport,
    format_checkpoints,
    format_duration,
)


class RecordingTransport(Transport):
    def __init__(self, response="response"):
        self.requests = []
        self.response = response

    def perform(self, request):
        self.requests.append(request)
        return self.response


def test_default_path_is_endpoint():
    assert FleetSearchRequest().path() == "/_fleet/_fleet_search"


def test_path_joins_indices_and_types():
    req = FleetSearchRequest(index=["a", "b"], document_type=["t"])
    path = req.path()
    assert path.startswith("/a,b/t/")
    assert path.endswith("_fleet/_fleet_search")


def test_path_index_only():
    req = FleetSearchRequest(index=["idx"])
    assert req.path() == "/idx/_fleet/_fleet_search"


def test_params_empty_by_default():
    assert FleetSearchRequest().params() == {}


def test_params_come_from_options():
    options = FleetSearchOptions(
        wait_for_checkpoints=[1, 2, 3],
        size=5,
        seq_no_primary_term=True,
        timeout=timedelta(seconds=2),
    )
    params = FleetSearchRequest(options=options).params()
    assert params == options.to_params()
    assert params["wait_for_checkpoints"] == format_checkpoints([1, 2, 3])
    assert params["size"] == "5"
    assert params["seq_no_primary_term"] == "true"
    assert params["timeout"] == format_duration(timedelta(seconds=2))


def test_build_without_body():
    req = FleetSearchRequest(index=["idx"], options=FleetSearchOptions(size=1))
    built = req.build()
    assert isinstance(built, PreparedRequest)
    assert built.method == "POST"
    assert built.path == req.path()
    assert built.params == req.params()
    assert built.body is None
    assert "Content-Type" not in built.headers


def test_build_with_body_sets_json_content_type():
    body = b'{"query":{"match_all":{}}}'
    built = FleetSearchRequest(body=body).build()
    assert built.body == body
    assert built.headers["Content-Type"] == ["application/json"]


def test_with_header_adds_values_and_build_canonicalises():
    req = FleetSearchRequest()
    result = req.with_header({"x-custom": "one"}).with_header({"x-custom": "two"})
    assert result is req
    assert req.headers["x-custom"] == ["one", "two"]
    built = req.build()
    assert built.headers["X-Custom"] == ["one", "two"]


def test_with_opaque_id_replaces_earlier_value():
    req = FleetSearchRequest()
    req.with_header({"x-opaque-id": "first"})
    req.with_opaque_id("second")
    req.with_opaque_id("third")
    assert req.headers == {"X-Opaque-Id": ["third"]}
    assert req.build().headers["X-Opaque-Id"] == ["third"]


def test_do_sends_built_request_and_returns_response():
    transport = RecordingTransport(response={"took": 1})
    req = FleetSearchRequest(
        index=["idx"], body=b"{}", options=FleetSearchOptions(pretty=True)
    )
    assert req.do(transport) == {"took": 1}
    assert len(transport.requests) == 1
    sent = transport.requests[0]
    assert sent.path == req.path()
    assert sent.params == {"pretty": "true"}
    assert sent.body == b"{}"


def test_url_contains_encoded_params():
    req = FleetSearchRequest(options=FleetSearchOptions(sort=["a:asc", "b"]))
    url = req.build().url()
    assert url.startswith(req.path() + "?")
    assert "sort=a%3Aasc%2Cb" in url


@pytest.mark.parametrize("flag", ["pretty", "human", "error_trace"])
def test_switches_appear_only_when_set(flag):
    off = FleetSearchRequest().params()
    on = FleetSearchRequest(options=FleetSearchOptions(**{flag: True})).params()
    assert flag not in off
    assert on[flag] == "true"