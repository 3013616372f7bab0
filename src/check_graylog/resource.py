"""Data acquisition from a Graylog cluster.

:class:`GraylogCluster` knows which endpoints to ask for what. Each method
issues its requests in a fixed order and returns typed values; errors
propagate as :class:`~check_graylog.error.CheckError`.
"""

import logging
from typing import Any

from check_graylog.client import GraylogClient
from check_graylog.models import (
    ClusterNodes,
    GaugeMetric,
    IndexerFailures,
    IndexerOverview,
    Inputs,
    MeterMetric,
    SystemOverview,
    Throughput,
    TimerMetric,
    alive_node_ids,
)

_log = logging.getLogger(__name__)

UNCOMMITTED_ENTRIES = "org.graylog2.journal.entries-uncommitted"
PROCESS_BUFFER_TIME = (
    "org.graylog2.shared.buffers.processors.ProcessBufferProcessor.processTime"
)
INPUT_BUFFER_INCOMING = "org.graylog2.shared.buffers.InputBufferImpl.incomingMessages"


class Roster:
    """Declared cluster members split by liveness."""

    total: float
    live: list[str]
    dead: list[str]

    def __init__(self, total: float, live: list[str], dead: list[str]) -> None:
        self.total = total
        self.live = live
        self.dead = dead


class GraylogCluster:
    client: GraylogClient

    def __init__(self, client: GraylogClient) -> None:
        self.client = client

    def roster(self) -> Roster:
        """Compares the node roster with the nodes reported alive."""
        nodes = self.client.fetch("/system/cluster/nodes", ClusterNodes)
        if not nodes.nodes:
            return Roster(nodes.total, [], [])
        alive = alive_node_ids(self.client.get("/cluster"))
        live: list[str] = []
        dead: list[str] = []
        for node in nodes.nodes:
            if node.node_id in alive:
                live.append(node.hostname)
            else:
                _log.info("node %s (%s) is not alive", node.hostname, node.node_id)
                dead.append(node.hostname)
        return Roster(nodes.total, live, dead)

    def system(self) -> SystemOverview:
        return self.client.fetch("/system", SystemOverview)

    def probe(self) -> dict[str, Any]:
        """Samples indexer, input and buffer metrics.

        :returns: keyword arguments for
            :class:`~check_graylog.models.ClusterSample`
        """
        failures = self.client.fetch(
            "/system/indexer/failures?limit=1&offset=0", IndexerFailures
        )
        throughput = self.client.fetch("/system/throughput", Throughput)
        inputs = self.client.fetch("/system/inputs", Inputs)
        overview = self.client.fetch("/system/indexer/overview", IndexerOverview)
        uncommitted = self.client.fetch(
            "/system/metrics/" + UNCOMMITTED_ENTRIES, GaugeMetric
        )
        process_time = self.client.fetch(
            "/system/metrics/" + PROCESS_BUFFER_TIME, TimerMetric
        )
        incoming = self.client.fetch(
            "/system/metrics/" + INPUT_BUFFER_INCOMING, MeterMetric
        )
        return dict(
            index_failures_total=failures.total,
            throughput=throughput.throughput,
            inputs_total=inputs.total,
            events_total=overview.counts.events,
            uncommitted=uncommitted.value,
            process_buffer_p95=process_time.p95,
            input_buffer_m15=incoming.m15_rate,
        )
