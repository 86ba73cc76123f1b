import pytest
from fastapi.testclient import TestClient

from filedrop.config.config import Settings
from filedrop.main import create_app
from filedrop.storage import FileStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def storage_root(tmp_path):
    root = tmp_path / "store"
    root.mkdir()
    return root


@pytest.fixture
def store(storage_root):
    return FileStore(storage_root)


@pytest.fixture
def client(storage_root):
    app = create_app(Settings(STORAGE_ROOT=str(storage_root)))
    with TestClient(app) as c:
        yield c
