"""
pytest fixtures shared by the test suite.
"""
import pytest
import requests

from svg_importer.figma_client import FigmaClient
from tests.fakes import FakeResponse, FakeSession, file_url, images_url, make_file


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session) -> FigmaClient:
    return FigmaClient("figd_xyz", session=session)


@pytest.fixture
def icon_session(session) -> FakeSession:
    """One component ``Icon`` (1:2) rendered at https://cdn/svg1"""
    session.add(file_url(), FakeResponse(200, make_file({
        '1:2': {'key': 'k', 'name': 'Icon', 'description': '', 'remote': False, 'documentationLinks': []},
    })))
    session.add(images_url(), FakeResponse(200, {'err': None, 'images': {'1:2': 'https://cdn/svg1'}}))
    session.add('https://cdn/svg1', FakeResponse(200, text='<svg/>'))
    return session


@pytest.fixture
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
