"""Exceptions that abort the check with a specific state."""

from typing import Optional

from check_graylog.state import ServiceState, critical, unknown


class CheckError(RuntimeError):
    """Abort check execution.

    Raised when it becomes clear that the cluster state cannot be
    determined. The check reports the exception's message together with
    :attr:`state`, which is UNKNOWN (3) unless given otherwise.
    """

    state: ServiceState = unknown

    def __init__(self, message: str, state: Optional[ServiceState] = None) -> None:
        super().__init__(message)
        if state is not None:
            self.state = state

    @property
    def message(self) -> str:
        return str(self.args[0])


class ApiError(CheckError):
    """The Graylog API could not be reached or answered with an error.

    Transport problems are reported as CRITICAL (2).
    """

    state = critical
