"""Command line entry point of the ``check_graylog`` plugin."""

import argparse
import logging
import sys
import typing
from typing import Optional, Sequence

from check_graylog import __version__
from check_graylog.check import Check
from check_graylog.client import GraylogClient
from check_graylog.config import DEFAULT_TIMEOUT, Config, debug_enabled
from check_graylog.error import CheckError
from check_graylog.resource import GraylogCluster
from check_graylog.result import Outcome
from check_graylog.runtime import Runtime, guarded
from check_graylog.url import DEFAULT_URL

_log = logging.getLogger(__name__)

AUTHOR = "Antonino Catinello"
LICENSE = "BSD"
YEAR = "2016 - 2018"
CONTRIBUTORS = "kahluagenie, theherodied"


def version_line(version: Optional[str] = None) -> str:
    if version is None:
        version = __version__
    return "Version: {0} License: {1} © {2} {3} Contributors: {4}".format(
        version, LICENSE, YEAR, AUTHOR, CONTRIBUTORS
    )


class _ArgumentParser(argparse.ArgumentParser):
    """
    Exits with ``Unknown`` (exit code 3) on ``--help``, ``--version`` and
    usage errors, according to the
    `Monitoring Plugin Guidelines
    <https://github.com/monitoring-plugins/monitoring-plugin-guidelines/blob/main/monitoring_plugins_interface/02.Input.md>`__.
    """

    def exit(
        self, status: int = 3, message: Optional[str] = None
    ) -> typing.NoReturn:
        if message:
            self._print_message(message, sys.stderr)
        sys.exit(3)


def setup_argparser(version: Optional[str] = None) -> argparse.ArgumentParser:
    """Sets up the argument parser.

    The single-dash option names are kept for compatibility with existing
    command definitions. Thresholds are read as strings and converted by
    :class:`~check_graylog.config.Thresholds`, so that a malformed value
    is reported as UNKNOWN status line.
    """
    parser = _ArgumentParser(
        prog="check_graylog",
        formatter_class=lambda prog: argparse.RawDescriptionHelpFormatter(
            prog, width=80
        ),
        description="Checks the health of a Graylog cluster through its REST API.",
        epilog="Set the environment variable NCG2 to print debug output.",
    )
    parser.add_argument(
        "-l",
        dest="url",
        default=DEFAULT_URL,
        metavar="URL",
        help="Graylog API URL (default: %(default)s)",
    )
    parser.add_argument("-u", dest="username", default="", help="API username")
    parser.add_argument("-p", dest="password", default="", help="API password")
    parser.add_argument(
        "-w",
        dest="index_warn",
        metavar="FLOAT",
        help="Index error warning limit. (optional)",
    )
    parser.add_argument(
        "-c",
        dest="index_crit",
        metavar="FLOAT",
        help="Index error critical limit. (optional)",
    )
    parser.add_argument(
        "-uc",
        dest="uncommitted_crit",
        metavar="FLOAT",
        help="Uncommited journal entries critical threshold. (optional)",
    )
    parser.add_argument(
        "-pbtc",
        dest="process_buffer_p95_crit",
        metavar="FLOAT",
        help="Process buffer time critical threshold in s. (optional)",
    )
    parser.add_argument(
        "-ibc",
        dest="input_buffer_m15_crit",
        metavar="FLOAT",
        help="Input buffer rate below critical threshold in events/second. "
        "(optional)",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        metavar="SECONDS",
        help="Timeout of each API request (default: %(default)s)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=version_line(version),
        help="Display version and license information.",
    )
    return parser


@guarded
def main(argv: Optional[Sequence[str]] = None) -> typing.NoReturn:
    runtime = Runtime()
    runtime.debug = debug_enabled()
    parser = setup_argparser()
    args = parser.parse_args(argv)

    if not args.username or not args.password:
        out = runtime.stdout or sys.stdout
        print("API Username/Password is mandatory.", file=out)
        parser.print_help(out)
        sys.exit(3)

    try:
        config = Config.from_args(args)
    except CheckError as exc:
        _log.debug("%r", exc)
        runtime.report(Outcome(exc.state, exc.message))

    with GraylogClient(
        config.url, config.username, config.password, config.timeout
    ) as client:
        Check(GraylogCluster(client), config.thresholds).main()


if __name__ == "__main__":
    main()
