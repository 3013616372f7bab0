"""Read-only access to the Graylog REST API.

:class:`GraylogClient` performs authenticated GET requests and turns every
failure into a :class:`~check_graylog.error.CheckError` carrying the state
the check has to report. Requests are never retried.
"""

import json
import logging
import typing
from typing import Any, Optional, TypeVar

import pydantic
import requests

from check_graylog.error import ApiError, CheckError

_log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


class GraylogClient:
    base_url: str
    timeout: float
    session: requests.Session

    def __init__(
        self,
        base_url: str,
        username: str,
        password: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        :param base_url: normalised ``scheme://host:port[/path]``
        :param timeout: seconds to wait for connect and for each read
        :param session: optional session to use instead of a new one
        """
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = (username, password)
        self.session.headers.update({"Accept": "application/json"})

    def __enter__(self) -> "GraylogClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get(self, endpoint: str) -> dict[str, Any]:
        """Fetches *endpoint* and decodes the JSON object in the body.

        :raises ApiError: on timeouts, connection failures, unreadable or
            empty bodies and HTTP codes other than 200
        :raises CheckError: if the body is not a JSON object
        """
        url = self.base_url + endpoint
        _log.info("GET %s", url)
        try:
            with self.session.get(url, timeout=self.timeout) as response:
                body = response.text
                status = response.status_code
        except requests.exceptions.Timeout:
            raise ApiError(
                "Graylog API did not respond within {0}s".format(self.timeout)
            )
        except requests.exceptions.ConnectionError:
            raise ApiError("Cannot connect to Graylog API")
        except requests.exceptions.RequestException:
            raise ApiError("No response received from Graylog API")

        _log.debug("%s", body)

        if status != 200:
            raise ApiError("Graylog API replied with HTTP code {0}".format(status))
        if not body:
            raise ApiError("No response received from Graylog API")

        try:
            data = json.loads(body)
        except ValueError:
            raise CheckError("Cannot parse JSON from Graylog API")
        if not isinstance(data, dict):
            raise CheckError("Cannot parse JSON from Graylog API")
        return typing.cast(dict[str, Any], data)

    def fetch(self, endpoint: str, model: type[ModelT]) -> ModelT:
        """Fetches *endpoint* and projects the response onto *model*.

        :raises CheckError: if required fields are missing or mistyped
        """
        try:
            return model.model_validate(self.get(endpoint))
        except pydantic.ValidationError as exc:
            _log.debug("%s", exc)
            raise CheckError(
                "Unexpected response from Graylog API endpoint {0}".format(endpoint)
            )
