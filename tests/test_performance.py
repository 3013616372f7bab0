import pytest

from check_graylog.models import ClusterSample
from check_graylog.performance import PerfData, Performance

ZEROS = (
    "time=0.000000;;;; total=0;;;; sources=0;;;; throughput=0;;;; "
    "index_failures=0;;;; uncommited=0;;;;; processbuffertime=0.0000000000;;;;; "
    "inputbufferate_m15=0.000000"
)


class TestPerformance:
    def test_normal_label(self) -> None:
        assert "d=10;;;;" == str(Performance("d", 10))

    def test_format_and_fields(self) -> None:
        assert "d=1.50;" == str(Performance("d", 1.5, ".2f", 1))

    def test_label_quoted(self) -> None:
        assert "'d d'=10" == str(Performance("d d", 10, empty_fields=0))

    def test_label_must_not_contain_quotes(self) -> None:
        with pytest.raises(RuntimeError):
            Performance("d'", 10)

    def test_label_must_not_contain_equals(self) -> None:
        with pytest.raises(RuntimeError):
            Performance("d=", 10)


class TestPerfData:
    def test_zeros(self) -> None:
        assert ZEROS == str(PerfData.zeros())

    def test_label_order(self) -> None:
        assert [
            "time",
            "total",
            "sources",
            "throughput",
            "index_failures",
            "uncommited",
            "processbuffertime",
            "inputbufferate_m15",
        ] == [entry.label for entry in PerfData.zeros()]

    def test_from_sample(self) -> None:
        sample = ClusterSample(
            elapsed=1.25,
            events_total=123456.4,
            inputs_total=3,
            throughput=41.6,
            index_failures_total=7,
            uncommitted=2000,
            process_buffer_p95=0.00123,
            input_buffer_m15=512.3456789,
        )
        assert (
            "time=1.250000;;;; total=123456;;;; sources=3;;;; throughput=42;;;; "
            "index_failures=7;;;; uncommited=2000;;;;; "
            "processbuffertime=0.0012300000;;;;; inputbufferate_m15=512.345679"
        ) == str(PerfData.from_sample(sample))

    def test_equality(self) -> None:
        assert PerfData.zeros() == PerfData.zeros()
        assert PerfData.zeros() != PerfData.from_sample(ClusterSample(elapsed=1))
