"""Shared fixtures: an application bound to in-memory SQLite plus fake collaborators."""

import pytest

from app import create_app
from config import TestConfig
from database import Database
from extensions import db
from festivals import Festivals
from options import Options
from settings import Settings
from tests.fakes import FakeOptions, FakeRowStore


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def database(app):
    return Database()


@pytest.fixture(params=['sqlalchemy', 'memory'])
def festivals(request):
    """The festival repository over both the real row store and the in-memory fake."""
    if request.param == 'sqlalchemy':
        request.getfixturevalue('app')
        return Festivals(Database())
    return Festivals(FakeRowStore())


@pytest.fixture(params=['sqlalchemy', 'memory'])
def settings(request):
    if request.param == 'sqlalchemy':
        request.getfixturevalue('app')
        return Settings(Options(), environ={})
    return Settings(FakeOptions(), environ={})
