import pytest

from formstack_api import AsyncFormstackAPI, FormstackAPI
from tests.util import TOKEN, FakeClientSession, FakeSession


@pytest.fixture
def transport(monkeypatch) -> FakeSession:
    fake = FakeSession()
    monkeypatch.setattr("formstack_api.session.Session", fake)
    return fake


@pytest.fixture
def async_transport(monkeypatch) -> FakeClientSession:
    fake = FakeClientSession()
    monkeypatch.setattr("formstack_api.session_async.ClientSession", fake)
    return fake


@pytest.fixture
def api(transport) -> FormstackAPI:
    return FormstackAPI(TOKEN)


@pytest.fixture
def async_api(async_transport) -> AsyncFormstackAPI:
    return AsyncFormstackAPI(TOKEN)
