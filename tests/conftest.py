import pytest

from habitlists.app import create_app
from habitlists.store import Store


@pytest.fixture
def store():
    s = Store(":memory:")
    yield s
    s.close()


@pytest.fixture
def app(store, tmp_path):
    return create_app(store, TESTING=True, LOG_DIR=str(tmp_path / "logs"))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def grocery_list(store):
    return store.add_list("Groceries", 1)


@pytest.fixture
def habit(store):
    return store.add_habit("Reading", 3)
