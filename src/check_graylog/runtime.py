"""Functions and classes to interface with the system.

This module contains the :class:`Runtime` class that prints the status
line, exits with the plugin's code and routes log messages. The
:func:`guarded` decorator keeps the plugin within the Nagios plugin API
when something unexpected happens.
"""

from __future__ import annotations

import functools
import logging
import sys
import traceback
import typing
from typing import Any, Callable, Optional, ParamSpec, TypeVar

from typing_extensions import Self

from check_graylog.output import Output
from check_graylog.result import Outcome
from check_graylog.state import unknown

if typing.TYPE_CHECKING:
    from check_graylog.check import Check


P = ParamSpec("P")
R = TypeVar("R")


def guarded(func: Callable[P, R]) -> Callable[P, R]:
    """Runs a function in the check's Runtime environment.

    If the decorated function aborts with an uncaught exception, the
    plugin prints an UNKNOWN status line naming the exception and exits
    with code 3. In debug mode the traceback is logged as well.

    This function should be used as a decorator for the script's `main`
    function.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwds: Any) -> Any:
        runtime = Runtime()
        try:
            return func(*args, **kwds)
        except Exception:
            runtime._handle_exception()  # type: ignore

    return wrapper  # type: ignore


class Runtime:
    instance = None
    check: Optional["Check"] = None
    _debug = False
    logchan: logging.StreamHandler[typing.TextIO]
    stdout: Optional[typing.TextIO] = None
    exitcode: int = 70  # EX_SOFTWARE

    def __new__(cls) -> Self:
        if not cls.instance:
            cls.instance = super(Runtime, cls).__new__(cls)
        return cls.instance

    def __init__(self) -> None:
        if hasattr(self, "logchan"):
            return
        rootlogger = logging.getLogger(__name__.split(".", 1)[0])
        rootlogger.setLevel(logging.DEBUG)
        self.logchan = logging.StreamHandler(sys.stderr)
        self.logchan.setFormatter(logging.Formatter("%(message)s"))
        self.logchan.setLevel(logging.WARNING)
        rootlogger.addHandler(self.logchan)

    @property
    def debug(self) -> bool:
        return self._debug

    @debug.setter
    def debug(self, debug: bool) -> None:
        """In debug mode all log messages go to stdout, ahead of the
        status line. Otherwise only warnings are logged, to stderr."""
        self._debug = debug
        if debug:
            self.logchan.setStream(self.stdout or sys.stdout)
            self.logchan.setLevel(logging.DEBUG)
        else:
            self.logchan.setStream(sys.stderr)
            self.logchan.setLevel(logging.WARNING)

    def _handle_exception(self) -> typing.NoReturn:
        exc_type, value = sys.exc_info()[0:2]
        if self.debug:
            logging.getLogger(__name__).debug(traceback.format_exc().rstrip("\n"))
        self.report(
            Outcome(
                unknown, traceback.format_exception_only(exc_type, value)[0].strip()
            )
        )

    def report(self, outcome: Outcome) -> typing.NoReturn:
        """Prints the status line of *outcome* and exits."""
        print("{0}".format(Output(outcome)), end="", file=self.stdout or sys.stdout)
        self.exitcode = outcome.exitcode
        self.sysexit()

    def execute(self, check: "Check") -> typing.NoReturn:
        self.check = check
        self.report(check())

    def sysexit(self) -> typing.NoReturn:
        sys.exit(self.exitcode)
