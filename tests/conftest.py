import pytest

from app import create_app
from users_api.user_store import UserStore


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / 'Data' / 'users.json'


@pytest.fixture
def app(users_file):
    return create_app({'TESTING': True, 'USERS_FILE': str(users_file)})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(users_file):
    return UserStore(str(users_file))
