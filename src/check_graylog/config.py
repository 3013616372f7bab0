"""Check configuration resolved from the command line and environment."""

import argparse
import os
import typing
from typing import Optional

from check_graylog.error import CheckError
from check_graylog.url import normalize_url

DEBUG_ENV = "NCG2"
"""Environment variable that enables debug output when non-empty."""

DEFAULT_TIMEOUT = 10
"""Seconds to wait for each API request."""


def debug_enabled(environ: Optional[typing.Mapping[str, str]] = None) -> bool:
    if environ is None:
        environ = os.environ
    return bool(environ.get(DEBUG_ENV))


def parse_threshold(value: Optional[str], description: str) -> Optional[float]:
    """Convert a threshold option to float.

    Empty and missing options count as unset and yield None.

    :param description: name of the threshold for the error message
    :raises CheckError: if *value* is not a decimal number
    """
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        raise CheckError("Cannot parse given {0} value.".format(description))


class Thresholds:
    """The five optional limits the cluster sample is compared against."""

    index_warn: Optional[float]
    index_crit: Optional[float]
    uncommitted_crit: Optional[float]
    process_buffer_p95_crit: Optional[float]
    input_buffer_m15_crit: Optional[float]

    # pylint: disable-next=too-many-arguments
    def __init__(
        self,
        index_warn: Optional[float] = None,
        index_crit: Optional[float] = None,
        uncommitted_crit: Optional[float] = None,
        process_buffer_p95_crit: Optional[float] = None,
        input_buffer_m15_crit: Optional[float] = None,
    ) -> None:
        self.index_warn = index_warn
        self.index_crit = index_crit
        self.uncommitted_crit = uncommitted_crit
        self.process_buffer_p95_crit = process_buffer_p95_crit
        self.input_buffer_m15_crit = input_buffer_m15_crit

    @classmethod
    def parse(
        cls,
        index_warn: Optional[str] = None,
        index_crit: Optional[str] = None,
        uncommitted_crit: Optional[str] = None,
        process_buffer_p95_crit: Optional[str] = None,
        input_buffer_m15_crit: Optional[str] = None,
    ) -> "Thresholds":
        """Creates thresholds from raw option strings.

        :raises CheckError: naming the first threshold that is not a number
        """
        return cls(
            parse_threshold(index_warn, "index warning error"),
            parse_threshold(index_crit, "index critical error"),
            parse_threshold(uncommitted_crit, "uncommited critical error"),
            parse_threshold(process_buffer_p95_crit, "process buffer time critical"),
            parse_threshold(input_buffer_m15_crit, "input buffer critical"),
        )

    @property
    def any_set(self) -> bool:
        return any(
            value is not None
            for value in (
                self.index_warn,
                self.index_crit,
                self.uncommitted_crit,
                self.process_buffer_p95_crit,
                self.input_buffer_m15_crit,
            )
        )

    def __repr__(self) -> str:
        return (
            "Thresholds(index_warn={0!r}, index_crit={1!r}, uncommitted_crit={2!r}, "
            "process_buffer_p95_crit={3!r}, input_buffer_m15_crit={4!r})".format(
                self.index_warn,
                self.index_crit,
                self.uncommitted_crit,
                self.process_buffer_p95_crit,
                self.input_buffer_m15_crit,
            )
        )


class Config:
    url: str
    username: str
    password: str
    thresholds: Thresholds
    timeout: float

    # pylint: disable-next=too-many-arguments
    def __init__(
        self,
        url: str,
        username: str,
        password: str,
        thresholds: Optional[Thresholds] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.url = url
        self.username = username
        self.password = password
        self.thresholds = thresholds or Thresholds()
        self.timeout = timeout

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """Resolves the configuration from parsed command line options.

        The URL is normalised and the thresholds are converted before
        any request is made.

        :raises CheckError: on a malformed URL, threshold or timeout
        """
        if args.timeout is not None and args.timeout <= 0:
            raise CheckError("Timeout must be a positive number of seconds.")
        return cls(
            normalize_url(args.url),
            args.username,
            args.password,
            Thresholds.parse(
                args.index_warn,
                args.index_crit,
                args.uncommitted_crit,
                args.process_buffer_p95_crit,
                args.input_buffer_m15_crit,
            ),
            timeout=args.timeout or DEFAULT_TIMEOUT,
        )
