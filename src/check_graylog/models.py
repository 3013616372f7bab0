"""Typed projections of Graylog API responses.

The client decodes every response into a generic JSON tree. The models
below pick the few fields the check needs and validate their types; all
other keys are ignored.
"""

from collections.abc import Mapping

import pydantic


class _Response(pydantic.BaseModel, frozen=True, strict=True):
    """Numbers must be JSON numbers, booleans must be JSON booleans."""


class ClusterNode(_Response):
    node_id: str
    hostname: str


class ClusterNodes(_Response):
    """``/system/cluster/nodes``: the roster of the cluster."""

    total: float
    nodes: list[ClusterNode]


class SystemOverview(_Response):
    """``/system``"""

    is_processing: bool
    lifecycle: str
    lb_status: str


class IndexerFailures(_Response):
    total: float


class Throughput(_Response):
    throughput: float


class Inputs(_Response):
    total: float


class _IndexerCounts(_Response):
    events: float


class IndexerOverview(_Response):
    counts: _IndexerCounts


class GaugeMetric(_Response):
    value: float


class TimerMetric(_Response):
    p95: float


class MeterMetric(_Response):
    m15_rate: float


def alive_node_ids(liveness: Mapping[str, object]) -> set[str]:
    """Node ids reported by ``/cluster``.

    Nodes mapped to ``null`` are not alive.
    """
    return {node_id for node_id, status in liveness.items() if status is not None}


class ClusterSample(pydantic.BaseModel, frozen=True):
    """Everything the check learned about the cluster in one run."""

    total_cluster_nodes: float = 0
    live_nodes: tuple[str, ...] = ()
    dead_nodes: tuple[str, ...] = ()
    is_processing: bool = False
    lifecycle: str = ""
    lb_status: str = ""
    index_failures_total: float = 0
    throughput: float = 0
    inputs_total: float = 0
    events_total: float = 0
    uncommitted: float = 0
    process_buffer_p95: float = 0
    input_buffer_m15: float = 0
    elapsed: float = 0
