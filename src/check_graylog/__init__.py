from importlib import metadata

from check_graylog.check import Check
from check_graylog.client import GraylogClient
from check_graylog.config import Config, Thresholds
from check_graylog.context import (
    Context,
    IndexFailureContext,
    LowerLimitContext,
    Metric,
    UpperLimitContext,
)
from check_graylog.error import ApiError, CheckError
from check_graylog.models import ClusterSample
from check_graylog.performance import PerfData, Performance
from check_graylog.resource import GraylogCluster
from check_graylog.result import Outcome, Result, Results
from check_graylog.runtime import Runtime, guarded
from check_graylog.state import (
    Critical,
    Ok,
    ServiceState,
    Unknown,
    Warn,
    critical,
    ok,
    unknown,
    warn,
)
from check_graylog.summary import Summary
from check_graylog.url import normalize_url

__version__: str = metadata.version("check-graylog")

__all__ = [
    "ApiError",
    "Check",
    "CheckError",
    "ClusterSample",
    "Config",
    "Context",
    "Critical",
    "GraylogClient",
    "GraylogCluster",
    "IndexFailureContext",
    "LowerLimitContext",
    "Metric",
    "Ok",
    "Outcome",
    "PerfData",
    "Performance",
    "Result",
    "Results",
    "Runtime",
    "ServiceState",
    "Summary",
    "Thresholds",
    "Unknown",
    "UpperLimitContext",
    "Warn",
    "critical",
    "guarded",
    "normalize_url",
    "ok",
    "unknown",
    "warn",
]
