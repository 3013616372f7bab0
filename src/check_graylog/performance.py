"""Performance data (perfdata) representation.

Performance data are written behind the ``|`` of the status line and are
consumed by graphing backends. The labels, number formats and the empty
warn/crit/min/max fields (the trailing semicolons) are fixed, because
existing graph templates rely on them.
"""

import re
import typing
from typing import Any

if typing.TYPE_CHECKING:
    from check_graylog.models import ClusterSample


def quote(label: str) -> str:
    if re.match(r"^\w+$", label):
        return label
    return f"'{label}'"


class Performance:
    """Single perfdata entry.

    :param label: short identifier, quoted if it contains special characters
    :param value: measured value
    :param fmt: format specification applied to *value*
    :param empty_fields: number of semicolons appended after the value
    """

    label: str
    value: Any
    fmt: str
    empty_fields: int

    def __init__(
        self, label: str, value: Any, fmt: str = "", empty_fields: int = 4
    ) -> None:
        if "'" in label or "=" in label:
            raise RuntimeError("label contains illegal characters", label)
        self.label = label
        self.value = value
        self.fmt = fmt
        self.empty_fields = empty_fields

    def __str__(self) -> str:
        return "{0}={1}{2}".format(
            quote(self.label), format(self.value, self.fmt), ";" * self.empty_fields
        )

    def __repr__(self) -> str:
        return "Performance({0!r}, {1!r})".format(self.label, self.value)


class PerfData:
    """Immutable sequence of :class:`Performance` entries.

    A value object that is threaded through the check. :meth:`zeros`
    gives the initial value, so that early exits still print a complete
    perfdata block.
    """

    _entries: tuple[Performance, ...]

    def __init__(self, *entries: Performance) -> None:
        self._entries = tuple(entries)

    @classmethod
    # pylint: disable-next=too-many-arguments
    def build(
        cls,
        elapsed: float,
        events_total: float,
        inputs_total: float,
        throughput: float,
        index_failures_total: float,
        uncommitted: float,
        process_buffer_p95: float,
        input_buffer_m15: float,
    ) -> "PerfData":
        return cls(
            Performance("time", elapsed, ".6f"),
            Performance("total", events_total, ".0f"),
            Performance("sources", inputs_total, ".0f"),
            Performance("throughput", throughput, ".0f"),
            Performance("index_failures", index_failures_total, ".0f"),
            Performance("uncommited", uncommitted, ".0f", 5),
            Performance("processbuffertime", process_buffer_p95, ".10f", 5),
            Performance("inputbufferate_m15", input_buffer_m15, ".6f", 0),
        )

    @classmethod
    def zeros(cls) -> "PerfData":
        return cls.build(0, 0, 0, 0, 0, 0, 0, 0)

    @classmethod
    def from_sample(cls, sample: "ClusterSample") -> "PerfData":
        return cls.build(
            sample.elapsed,
            sample.events_total,
            sample.inputs_total,
            sample.throughput,
            sample.index_failures_total,
            sample.uncommitted,
            sample.process_buffer_p95,
            sample.input_buffer_m15,
        )

    def __iter__(self) -> typing.Iterator[Performance]:
        return iter(self._entries)

    def __str__(self) -> str:
        return " ".join(str(entry) for entry in self)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PerfData) and str(self) == str(other)

    def __hash__(self) -> int:
        return hash(str(self))
