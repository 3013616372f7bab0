"""Threshold evaluation of cluster metrics.

A :class:`Metric` is a named value taken from the
:class:`~check_graylog.models.ClusterSample`. Each :class:`Context`
compares the metric of the same name with its threshold and yields a
:class:`~check_graylog.result.Result`. Unset thresholds always evaluate
to ok.

:func:`build_contexts` returns the contexts in the order in which their
verdicts take precedence.
"""

import numbers
import typing
from typing import Any, Optional

from check_graylog.result import Result
from check_graylog.state import critical, ok, warn

if typing.TYPE_CHECKING:
    from check_graylog.config import Thresholds
    from check_graylog.models import ClusterSample


class Metric:
    """Single measured value."""

    name: str
    value: Any
    uom: Optional[str]

    def __init__(self, name: str, value: Any, uom: Optional[str] = None) -> None:
        self.name = name
        self.value = value
        self.uom = uom

    @classmethod
    def from_sample(
        cls, sample: "ClusterSample", name: str, uom: Optional[str] = None
    ) -> "Metric":
        return cls(name, getattr(sample, name), uom)

    @property
    def valueunit(self) -> str:
        """Value and unit, floats limited to a few significant digits."""
        if isinstance(self.value, numbers.Real) and not isinstance(
            self.value, numbers.Integral
        ):
            return "%.4g%s" % (self.value, self.uom or "")
        return "%s%s" % (self.value, self.uom or "")

    def __str__(self) -> str:
        return self.valueunit

    def __repr__(self) -> str:
        return "Metric({0!r}, {1!r})".format(self.name, self.value)

    def __eq__(self, value: object) -> bool:
        return (
            isinstance(value, Metric)
            and self.name == value.name
            and self.value == value.value
            and self.uom == value.uom
        )


class Context:
    """Evaluates the metric called `name`.

    The base implementation is ok in all cases.

    :attr:`long_output` tells the summary whether a problem reported by
    this context is explained with the full cluster overview or with the
    short indexer overview.
    """

    name: str
    long_output: bool = True

    def __init__(self, name: str) -> None:
        self.name = name

    def evaluate(self, metric: Metric) -> Result:
        return self.ok(metric)

    def ok(self, metric: Metric, hint: Optional[str] = None) -> Result:
        return Result(ok, hint, metric, self)

    def warn(self, metric: Metric, hint: Optional[str] = None) -> Result:
        return Result(warn, hint, metric, self)

    def critical(self, metric: Metric, hint: Optional[str] = None) -> Result:
        return Result(critical, hint, metric, self)


class IndexFailureContext(Context):
    """Warning and critical limit for the count of indexer failures.

    Both limits are inclusive. The warning only applies below the critical
    limit; a missing critical limit counts as infinity.
    """

    long_output = False

    warning: Optional[float]
    critical_limit: Optional[float]

    def __init__(
        self,
        name: str,
        warning: Optional[float] = None,
        critical: Optional[float] = None,
    ) -> None:
        super().__init__(name)
        self.warning = warning
        self.critical_limit = critical

    def evaluate(self, metric: Metric) -> Result:
        upper = self.critical_limit
        if upper is None:
            upper = float("inf")
        if self.warning is not None and self.warning <= metric.value < upper:
            return self.warn(metric, "Index Failure above Warning Limit!")
        if self.critical_limit is not None and metric.value >= self.critical_limit:
            return self.critical(metric, "Index Failure above Critical Limit!")
        return self.ok(metric)


class UpperLimitContext(Context):
    """Critical if the metric exceeds `limit`."""

    limit: Optional[float]
    hint: str

    def __init__(self, name: str, limit: Optional[float], hint: str) -> None:
        super().__init__(name)
        self.limit = limit
        self.hint = hint

    def evaluate(self, metric: Metric) -> Result:
        if self.limit is not None and metric.value > self.limit:
            return self.critical(metric, self.hint)
        return self.ok(metric)


class LowerLimitContext(UpperLimitContext):
    """Critical if the metric falls below `limit`."""

    def evaluate(self, metric: Metric) -> Result:
        if self.limit is not None and metric.value < self.limit:
            return self.critical(metric, self.hint)
        return self.ok(metric)


def build_contexts(thresholds: "Thresholds") -> list[Context]:
    return [
        IndexFailureContext(
            "index_failures_total", thresholds.index_warn, thresholds.index_crit
        ),
        UpperLimitContext(
            "uncommitted",
            thresholds.uncommitted_crit,
            "Uncommited above Warning Limit!",
        ),
        UpperLimitContext(
            "process_buffer_p95",
            thresholds.process_buffer_p95_crit,
            "Process Buffer Time critical!",
        ),
        LowerLimitContext(
            "input_buffer_m15",
            thresholds.input_buffer_m15_crit,
            "Input Buffer rate below threshold!",
        ),
    ]
