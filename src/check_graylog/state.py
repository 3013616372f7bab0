"""Service states of the Nagios plugin API.

The four states are singletons of :class:`ServiceState` subclasses. The
warning state is named :class:`Warn` to stay clear of the built-in
`Warning` exception.
"""

from __future__ import annotations

from typing import Any


class ServiceState:
    """Base class for all states.

    :attr:`text` is printed in upper case at the beginning of the status
    line, :attr:`code` is the exit code of the plugin.
    """

    code: int

    text: str

    def __init__(self, code: int, text: str) -> None:
        self.code = code
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __int__(self) -> int:
        return self.code

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, ServiceState)
            and self.code == other.code
            and self.text == other.text
        )

    def __hash__(self) -> int:
        return hash((self.code, self.text))

    def __repr__(self) -> str:
        return "<{0} {1}>".format(self.__class__.__name__, self.code)


class Ok(ServiceState):
    def __init__(self) -> None:
        super().__init__(0, "ok")


ok = Ok()


class Warn(ServiceState):
    def __init__(self) -> None:
        super().__init__(1, "warning")


warn = Warn()


class Critical(ServiceState):
    def __init__(self) -> None:
        super().__init__(2, "critical")


critical = Critical()


class Unknown(ServiceState):
    def __init__(self) -> None:
        super().__init__(3, "unknown")


unknown = Unknown()
