import logging

import pytest
import requests
from fakes import BASE_URL, FakeSession, make_response

from check_graylog.client import GraylogClient
from check_graylog.error import ApiError, CheckError
from check_graylog.models import ClusterNodes, Throughput
from check_graylog.state import critical, unknown


def client_for(answer) -> GraylogClient:
    session = FakeSession({"/system/throughput": answer})
    return GraylogClient(BASE_URL, "admin", "secret", timeout=3, session=session)


class TestGraylogClient:
    def test_session_setup(self) -> None:
        client = client_for({"throughput": 1})
        assert ("admin", "secret") == client.session.auth
        assert "application/json" == client.session.headers["Accept"]

    def test_get(self) -> None:
        client = client_for({"throughput": 12, "extra": [1, 2]})
        assert {"throughput": 12, "extra": [1, 2]} == client.get("/system/throughput")

    def test_get_uses_timeout(self) -> None:
        client = client_for({"throughput": 12})
        client.get("/system/throughput")
        assert isinstance(client.session, FakeSession)
        assert [{"timeout": 3}] == client.session.kwargs

    def test_fetch_projects_model(self) -> None:
        client = client_for({"throughput": 12, "extra": "ignored"})
        assert 12.0 == client.fetch("/system/throughput", Throughput).throughput

    def test_fetch_rejects_missing_field(self) -> None:
        client = client_for({"other": 1})
        with pytest.raises(CheckError) as exc:
            client.fetch("/system/throughput", Throughput)
        assert unknown == exc.value.state
        assert (
            "Unexpected response from Graylog API endpoint /system/throughput"
            == exc.value.message
        )

    def test_fetch_rejects_wrong_type(self) -> None:
        client = client_for({"throughput": "many"})
        with pytest.raises(CheckError) as exc:
            client.fetch("/system/throughput", Throughput)
        assert unknown == exc.value.state

    @pytest.mark.parametrize("value", ["12", True, None, [12]])
    def test_fetch_rejects_non_number(self, value: object) -> None:
        client = client_for({"throughput": value})
        with pytest.raises(CheckError) as exc:
            client.fetch("/system/throughput", Throughput)
        assert unknown == exc.value.state

    def test_fetch_accepts_integer_for_float(self) -> None:
        throughput = client_for({"throughput": 12}).fetch("/system/throughput", Throughput)
        assert isinstance(throughput.throughput, float)

    def test_fetch_accepts_nested_objects(self) -> None:
        session = FakeSession(
            {
                "/system/cluster/nodes": {
                    "total": 1,
                    "nodes": [{"node_id": "n-a", "hostname": "host-a"}],
                }
            }
        )
        client = GraylogClient(BASE_URL, "admin", "secret", session=session)
        nodes = client.fetch("/system/cluster/nodes", ClusterNodes)
        assert ["host-a"] == [node.hostname for node in nodes.nodes]

    def test_connection_error(self) -> None:
        client = client_for(requests.exceptions.ConnectionError("refused"))
        with pytest.raises(ApiError) as exc:
            client.get("/system/throughput")
        assert critical == exc.value.state
        assert "Cannot connect to Graylog API" == exc.value.message

    def test_timeout(self) -> None:
        client = client_for(requests.exceptions.ConnectTimeout("slow"))
        with pytest.raises(ApiError) as exc:
            client.get("/system/throughput")
        assert critical == exc.value.state
        assert "Graylog API did not respond within 3s" == exc.value.message

    def test_broken_body(self) -> None:
        client = client_for(requests.exceptions.ChunkedEncodingError("cut"))
        with pytest.raises(ApiError) as exc:
            client.get("/system/throughput")
        assert "No response received from Graylog API" == exc.value.message

    def test_empty_body(self) -> None:
        client = client_for(make_response(200, ""))
        with pytest.raises(ApiError) as exc:
            client.get("/system/throughput")
        assert critical == exc.value.state
        assert "No response received from Graylog API" == exc.value.message

    @pytest.mark.parametrize("status", [401, 404, 500, 503])
    def test_http_error(self, status: int) -> None:
        client = client_for(make_response(status, '{"message": "nope"}'))
        with pytest.raises(ApiError) as exc:
            client.get("/system/throughput")
        assert critical == exc.value.state
        assert "Graylog API replied with HTTP code {0}".format(status) == str(
            exc.value
        )

    @pytest.mark.parametrize("body", ["<html>", '{"throughput": ', "[1, 2]", "null"])
    def test_malformed_json(self, body: str) -> None:
        client = client_for(make_response(200, body))
        with pytest.raises(CheckError) as exc:
            client.get("/system/throughput")
        assert unknown == exc.value.state
        assert "Cannot parse JSON from Graylog API" == exc.value.message

    def test_body_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        client = client_for(make_response(200, '{"throughput": 5}'))
        with caplog.at_level(logging.DEBUG, logger="check_graylog"):
            client.get("/system/throughput")
        assert '{"throughput": 5}' in caplog.messages

    def test_context_manager_closes_session(self) -> None:
        closed: list[bool] = []
        with client_for({"throughput": 1}) as client:
            client.session.close = lambda: closed.append(True)  # type: ignore
        assert [True] == closed
