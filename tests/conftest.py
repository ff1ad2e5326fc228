import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_evento_store
from utils.eventos import JsonEventoStore, MemoriaEventoStore

@pytest.fixture
def eventos_file(tmp_path):
    return tmp_path / "eventos.json"

@pytest.fixture
def store(eventos_file):
    return JsonEventoStore(eventos_file)

@pytest.fixture
def app(store):
    from main import app

    app.dependency_overrides[get_evento_store] = lambda: store
    yield app
    app.dependency_overrides.clear()

@pytest.fixture
def client(app):
    return TestClient(app)

@pytest.fixture
def memoria_client(app):
    """
    Cliente cuyo almacén vive en memoria.
    """
    memoria = MemoriaEventoStore()
    app.dependency_overrides[get_evento_store] = lambda: memoria
    return TestClient(app), memoria
