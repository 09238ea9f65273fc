from datetime import timedelta

import pytest

from fleetcore.es.transport import (
    PreparedRequest,
    Transport,
    format_bool,
    format_checkpoints,
    format_duration,
)


def test_format_duration_milliseconds():
    assert format_duration(timedelta(milliseconds=1500)) == "1500ms"


def test_format_duration_below_one_millisecond_uses_nanos():
    result = format_duration(timedelta(microseconds=5))
    assert result.endswith("nanos")
    assert result == "5000nanos"


def test_format_duration_zero():
    assert format_duration(timedelta(0)) == "0nanos"


def test_format_checkpoints_joins_values():
    assert format_checkpoints([1, 2, 3]) == "1,2,3"
    assert format_checkpoints([]) == ""


def test_format_bool():
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


def test_url_without_params_is_path():
    request = PreparedRequest("GET", "/idx/_search")
    assert request.url() == "/idx/_search"


def test_url_sorts_and_encodes_params():
    request = PreparedRequest("GET", "/p", params={"b": "1", "a": "x y"})
    assert request.url() == "/p?a=x+y&b=1"


def test_url_encodes_commas():
    request = PreparedRequest("GET", "/p", params={"checkpoints": "1,2"})
    assert request.url() == "/p?checkpoints=1%2C2"


def test_merge_headers_canonicalises_and_appends():
    request = PreparedRequest("POST", "/p", headers={"Content-Type": ["application/json"]})
    request.merge_headers({"content-type": ["text/plain"], "x-opaque-id": "abc"})
    assert request.headers["Content-Type"] == ["application/json", "text/plain"]
    assert request.headers["X-Opaque-Id"] == ["abc"]


def test_merge_headers_into_empty():
    request = PreparedRequest("GET", "/p")
    request.merge_headers({"Accept": ["a", "b"]})
    assert request.headers == {"Accept": ["a", "b"]}


def test_transport_is_abstract():
    with pytest.raises(TypeError):
        Transport()


def test_transport_subclass_receives_request():
    class Echo(Transport):
        def perform(self, request):
            return request.url()

    request = PreparedRequest("GET", "/x", params={"k": "v"})
    assert Echo().perform(request) == "/x?k=v"