import pytest

from javelin.core import ListController
from javelin.storage import ListStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "javelin.db")


@pytest.fixture
def store(db_path):
    return ListStore.open(db_path)


@pytest.fixture
def make_controller(store):
    def _make(files=(), key="project__work_demo"):
        if files:
            store.put(key, list(files))
        return ListController(store, key)

    return _make
