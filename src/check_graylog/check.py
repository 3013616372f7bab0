"""Controller logic for check execution.

This module contains the :class:`Check` class which walks through the
stages of a check run: roster and liveness, service state, metric
sampling and threshold evaluation. Each stage may end the run early.
Calling a check returns an :class:`~check_graylog.result.Outcome`; printing
it and exiting is left to the :class:`~check_graylog.runtime.Runtime`.
"""

import logging
import time
import typing
from typing import Callable, Optional

from check_graylog.config import Thresholds
from check_graylog.context import Context, Metric, build_contexts
from check_graylog.error import CheckError
from check_graylog.models import ClusterSample
from check_graylog.performance import PerfData
from check_graylog.result import Outcome, Results
from check_graylog.runtime import Runtime
from check_graylog.state import ServiceState, critical, ok, warn
from check_graylog.summary import Summary

if typing.TYPE_CHECKING:
    from check_graylog.resource import GraylogCluster

_log = logging.getLogger(__name__)

UNITS = {"process_buffer_p95": "s", "input_buffer_m15": "/s"}


class Check:
    cluster: "GraylogCluster"
    thresholds: Thresholds
    contexts: list[Context]
    summary: Summary
    results: Results
    perfdata: PerfData
    sample: ClusterSample
    clock: Callable[[], float]

    def __init__(
        self,
        cluster: "GraylogCluster",
        thresholds: Thresholds,
        summary: Optional[Summary] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        :param cluster: resource to sample
        :param thresholds: limits for the sampled metrics
        :param clock: source of the elapsed time in seconds
        """
        self.cluster = cluster
        self.thresholds = thresholds
        self.contexts = build_contexts(thresholds)
        self.summary = summary or Summary()
        self.results = Results()
        self.perfdata = PerfData.zeros()
        self.sample = ClusterSample()
        self.clock = clock

    def _outcome(self, state: ServiceState, message: str) -> Outcome:
        return Outcome(state, message, self.perfdata)

    def __call__(self) -> Outcome:
        """Actually run the check.

        Errors raised while sampling become the outcome with the state
        they carry. The perfdata of the outcome are zero unless the
        metrics have been sampled.
        """
        try:
            return self._run()
        except CheckError as exc:
            _log.debug("%r", exc)
            return self._outcome(exc.state, exc.message)

    def _run(self) -> Outcome:
        start = self.clock()

        roster = self.cluster.roster()
        if roster.dead:
            return self._outcome(critical, self.summary.dead_nodes(roster.dead))

        system = self.cluster.system()
        if not system.is_processing:
            return self._outcome(critical, "Service is not processing!")
        if system.lifecycle != "running":
            return self._outcome(warn, "lifecycle: {0}".format(system.lifecycle))
        if system.lb_status != "alive":
            return self._outcome(warn, "lb_status: {0}".format(system.lb_status))

        values = self.cluster.probe()
        self.sample = ClusterSample(
            total_cluster_nodes=roster.total,
            live_nodes=tuple(roster.live),
            dead_nodes=tuple(roster.dead),
            is_processing=system.is_processing,
            lifecycle=system.lifecycle,
            lb_status=system.lb_status,
            elapsed=self.clock() - start,
            **values,
        )
        self.perfdata = PerfData.from_sample(self.sample)

        if not self.thresholds.any_set:
            return self._outcome(critical, self.summary.empty())
        return self.evaluate(self.sample)

    def evaluate(self, sample: ClusterSample) -> Outcome:
        """Compares *sample* with the thresholds.

        All contexts are evaluated, but the first one reporting a problem
        decides the outcome. The results of an earlier evaluation are
        discarded.
        """
        self.results = Results()
        for context in self.contexts:
            metric = Metric.from_sample(sample, context.name, UNITS.get(context.name))
            result = context.evaluate(metric)
            _log.info("%s is %s: %s", metric.name, metric, result.state)
            self.results.add(result)

        problem = self.results.first_problem
        if problem is None:
            return self._outcome(ok, self.summary.ok(sample))
        return self._outcome(problem.state, self.summary.problem(problem, sample))

    def main(self) -> typing.NoReturn:
        """Runs the check in the runtime environment.

        Prints the status line and exits with the outcome's code.
        """
        Runtime().execute(self)
