import pytest
from fakes import BASE_URL, ENDPOINT_ORDER, FakeSession, cluster_answers

from check_graylog.client import GraylogClient
from check_graylog.error import CheckError
from check_graylog.models import alive_node_ids
from check_graylog.resource import GraylogCluster


def cluster_for(session: FakeSession) -> GraylogCluster:
    return GraylogCluster(GraylogClient(BASE_URL, "admin", "secret", session=session))


class TestRoster:
    def test_all_alive(self, healthy_session: FakeSession) -> None:
        roster = cluster_for(healthy_session).roster()
        assert 2 == roster.total
        assert ["host-a", "host-b"] == roster.live
        assert [] == roster.dead

    def test_node_missing_from_liveness_map(self) -> None:
        session = FakeSession(
            cluster_answers({"/cluster": {"n-b": {"lifecycle": "running"}}})
        )
        roster = cluster_for(session).roster()
        assert ["host-b"] == roster.live
        assert ["host-a"] == roster.dead

    def test_null_status_is_dead(self) -> None:
        session = FakeSession(
            cluster_answers({"/cluster": {"n-a": None, "n-b": {"lifecycle": "x"}}})
        )
        assert ["host-a"] == cluster_for(session).roster().dead

    def test_empty_roster(self) -> None:
        session = FakeSession(
            cluster_answers({"/system/cluster/nodes": {"total": 0, "nodes": []}})
        )
        roster = cluster_for(session).roster()
        assert ([], []) == (roster.live, roster.dead)
        assert ["/system/cluster/nodes"] == session.requested

    def test_roster_without_nodes_list(self) -> None:
        session = FakeSession(
            cluster_answers({"/system/cluster/nodes": {"total": 1}})
        )
        with pytest.raises(CheckError):
            cluster_for(session).roster()


class TestSystem:
    def test_system(self, healthy_session: FakeSession) -> None:
        system = cluster_for(healthy_session).system()
        assert system.is_processing is True
        assert "running" == system.lifecycle
        assert "alive" == system.lb_status

    def test_is_processing_must_be_boolean(self) -> None:
        session = FakeSession(
            cluster_answers(
                {
                    "/system": {
                        "is_processing": "yes",
                        "lifecycle": "running",
                        "lb_status": "alive",
                    }
                }
            )
        )
        with pytest.raises(CheckError):
            cluster_for(session).system()


class TestProbe:
    def test_values(self, healthy_session: FakeSession) -> None:
        assert dict(
            index_failures_total=0,
            throughput=42,
            inputs_total=3,
            events_total=123456,
            uncommitted=0,
            process_buffer_p95=0.001,
            input_buffer_m15=500,
        ) == cluster_for(healthy_session).probe()

    def test_request_order(self, healthy_session: FakeSession) -> None:
        cluster = cluster_for(healthy_session)
        cluster.roster()
        cluster.system()
        cluster.probe()
        assert ENDPOINT_ORDER == healthy_session.requested


class TestAliveNodeIds:
    def test_skips_null(self) -> None:
        assert {"a"} == alive_node_ids({"a": {}, "b": None})
