import logging

import pytest
from fakes import FakeSession, cluster_answers

from check_graylog.runtime import Runtime


@pytest.fixture
def healthy_session() -> FakeSession:
    return FakeSession(cluster_answers())


@pytest.fixture(autouse=True)
def fresh_runtime(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("NCG2", raising=False)
    Runtime.instance = None
    yield
    if Runtime.instance is not None and hasattr(Runtime.instance, "logchan"):
        logging.getLogger("check_graylog").removeHandler(Runtime.instance.logchan)
    Runtime.instance = None
