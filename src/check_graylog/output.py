"""Rendering of the status line."""

import logging

from check_graylog.result import Outcome

_log = logging.getLogger(__name__)


def filter_output(output: str, filtered: str) -> str:
    """Filters out characters from output"""
    for char in filtered:
        output = output.replace(char, "")
    return output


class Output:
    """Formats an :class:`~check_graylog.result.Outcome` as
    ``STATE - message|perfdata``.

    The pipe separates message and perfdata, so it is removed from the
    message.
    """

    ILLEGAL = "|"

    outcome: Outcome

    def __init__(self, outcome: Outcome) -> None:
        self.outcome = outcome

    @property
    def message(self) -> str:
        message = self.outcome.message
        screened = filter_output(message, self.ILLEGAL)
        if screened != message:
            _log.warning(
                "removed illegal characters (%s) from status line",
                ", ".join(
                    "0x{0:x}".format(ord(c)) for c in set(message) - set(screened)
                ),
            )
        return screened

    def __str__(self) -> str:
        return "{0} - {1}|{2}\n".format(
            str(self.outcome.state).upper(), self.message, self.outcome.perfdata
        )
