import os
import sys
from dataclasses import dataclass

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from studyflow_app import create_app, db
from studyflow_app.config import Config
from studyflow_app.modules.auth.schemas import Actor
from studyflow_app.modules.auth.services import AuthService


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_TO_FILE = False
    LOG_LEVEL = 'WARNING'
    # Fast hashing keeps the suite quick; production uses scrypt.
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'


@dataclass(frozen=True)
class Account:
    user_id: int
    name: str
    email: str
    password: str
    token: str

    @property
    def headers(self):
        return {'Authorization': f'Bearer {self.token}'}

    @property
    def actor(self):
        return Actor(user_id=self.user_id, session_id=self.token)


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def file_app(tmp_path):
    """App on a file-backed SQLite database, for tests that hit it from several threads."""

    class FileConfig(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'studyflow.db'}"
        SQLALCHEMY_ENGINE_OPTIONS = {
            'connect_args': {'timeout': 30, 'check_same_thread': False}
        }

    app = create_app(FileConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def ctx(app):
    """Application context for calling services directly.

    HTTP tests should not use it: a pushed context is reused by every test
    client request, and with it ``g`` and the logged-in user.
    """
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def register(app):
    def _register(name, email, password='password123'):
        with app.app_context():
            user, session = AuthService.register(name, email, password)
            return Account(user.user_id, name, email, password, session.id)
    return _register


@pytest.fixture
def alice(register):
    return register('Alice', 'alice@example.com')


@pytest.fixture
def bob(register):
    return register('Bob', 'bob@example.com')


@pytest.fixture
def carol(register):
    return register('Carol', 'carol@example.com')
