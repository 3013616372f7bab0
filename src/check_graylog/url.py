"""Normalisation of the Graylog API base URL."""

from urllib.parse import urlsplit

from check_graylog.error import CheckError

DEFAULT_URL = "http://localhost:12900"


def normalize_url(url: str) -> str:
    """Reduce *url* to ``scheme://host:port[/path]``.

    User info, query and fragment are dropped. A trailing slash of the
    path is removed so that endpoint paths can be appended directly.

    :raises CheckError: if the URL cannot be parsed, lacks an explicit
        port or does not use HTTP(S)
    """
    try:
        parts = urlsplit(url.strip())
        # accessing the port validates it
        parts.port
    except ValueError:
        raise CheckError("Cannot parse given URL.")

    host = parts.netloc.rpartition("@")[2]
    if ":" not in host:
        raise CheckError(
            "Port number is missing. Please try {0}://hostname:port".format(
                parts.scheme
            )
        )

    if not parts.scheme.lower().startswith("http"):
        raise CheckError("Only HTTP is supported as protocol.")

    return "{0}://{1}{2}".format(parts.scheme, host, parts.path.rstrip("/"))
