"""Create the status message from the cluster sample.

The wording and the number formats follow the output of earlier releases
of this plugin, since log parsers on the monitoring side match on them.
"""

import typing

if typing.TYPE_CHECKING:
    from check_graylog.models import ClusterSample
    from check_graylog.result import Result


class Summary:
    """Formats the messages of the status line."""

    def ok(self, sample: "ClusterSample") -> str:
        """Message when no threshold is violated."""
        return "Service is running!\n" + self.cluster(sample)

    def problem(self, result: "Result", sample: "ClusterSample") -> str:
        """Message for the threshold violation in *result*.

        The headline of the result is followed by the short indexer
        overview or the full cluster overview, depending on the context
        that produced it.
        """
        if result.context is not None and not result.context.long_output:
            return self.indexer(str(result), sample)
        return "{0}\nService is running\n{1}".format(result, self.cluster(sample))

    def empty(self) -> str:
        return "no thresholds set"

    def dead_nodes(self, hostnames: typing.Iterable[str]) -> str:
        return "\n".join("Node: {0} - not alive".format(host) for host in hostnames)

    def indexer(self, headline: str, sample: "ClusterSample") -> str:
        return (
            "{headline}\n"
            "Service is running\n"
            "{s.events_total:.0f} total events processed\n"
            "{s.index_failures_total:.0f} index failures\n"
            "{s.throughput:.0f} throughput\n"
            "{s.inputs_total:.0f} sources\n"
            "Check took {s.elapsed:.6f}s\n"
        ).format(headline=headline, s=sample)

    def cluster(self, sample: "ClusterSample") -> str:
        running = "".join(
            "\tNode: {0} - is alive\n".format(host) for host in sample.live_nodes
        )
        return (
            "All nodes in the Cluster: {s.total_cluster_nodes:g}\n"
            "Running nodes:\n"
            "{running}\n"
            "{s.events_total:.0f} total events processed\n"
            "{s.index_failures_total:.0f} index failures\n"
            "{s.throughput:.0f} throughput\n"
            "{s.inputs_total:.0f} sources\n"
            "{s.uncommitted:.0f} uncommited\n"
            "{s.process_buffer_p95:.10f} processbuffertime\n"
            "{s.input_buffer_m15:.6f} inputbufferrate m_15\n"
            "Check took {s.elapsed:.6f}s\n"
        ).format(running=running, s=sample)
