"""Outcomes from evaluating metrics in contexts.

A :class:`Result` is what a single context decides about its metric.
:class:`Results` keeps them in evaluation order, because the first problem
found determines the check's state. :class:`Outcome` is the final verdict
that gets printed.
"""

import typing
from typing import Optional

from check_graylog.performance import PerfData
from check_graylog.state import ServiceState, ok

if typing.TYPE_CHECKING:
    from check_graylog.context import Context, Metric


class Result:
    """Evaluation outcome consisting of state and explanation.

    :param hint: the headline describing why the state was chosen
    """

    state: ServiceState

    hint: Optional[str]

    metric: Optional["Metric"]

    context: Optional["Context"]

    def __init__(
        self,
        state: ServiceState,
        hint: Optional[str] = None,
        metric: Optional["Metric"] = None,
        context: Optional["Context"] = None,
    ) -> None:
        self.state = state
        self.hint = hint
        self.metric = metric
        self.context = context

    def __str__(self) -> str:
        return self.hint or ""

    def __repr__(self) -> str:
        return "Result({0!r}, {1!r})".format(self.state, self.hint)

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Result):
            return False
        return (
            self.state == value.state
            and self.hint == value.hint
            and self.metric == value.metric
        )


class Results:
    """Ordered container of :class:`Result` objects."""

    results: list[Result]

    def __init__(self, *results: Result) -> None:
        self.results = []
        if results:
            self.add(*results)

    def add(self, *results: Result) -> "Results":
        """Appends *results*.

        :raises ValueError: if something else than a :class:`Result` is
            passed
        """
        for result in results:
            if not isinstance(result, Result):  # type: ignore
                raise ValueError(
                    "trying to add non-Result to Results container", result
                )
            self.results.append(result)
        return self

    def __iter__(self) -> typing.Iterator[Result]:
        return iter(self.results)

    @property
    def first_problem(self) -> Optional[Result]:
        """The earliest result whose state is not ok, if any."""
        for result in self:
            if result.state != ok:
                return result
        return None


class Outcome:
    """Final verdict of a check run.

    Holds everything the status line consists of.
    """

    state: ServiceState
    message: str
    perfdata: PerfData

    def __init__(
        self,
        state: ServiceState,
        message: str,
        perfdata: Optional[PerfData] = None,
    ) -> None:
        self.state = state
        self.message = message
        self.perfdata = perfdata if perfdata is not None else PerfData.zeros()

    @property
    def exitcode(self) -> int:
        return int(self.state)

    def __repr__(self) -> str:
        return "Outcome({0!r}, {1!r})".format(self.state, self.message)

    def __eq__(self, value: object) -> bool:
        if not isinstance(value, Outcome):
            return False
        return (
            self.state == value.state
            and self.message == value.message
            and self.perfdata == value.perfdata
        )
