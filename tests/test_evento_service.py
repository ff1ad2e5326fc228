from datetime import datetime, timedelta

import pytest
import pytz

from api.errors import NotFoundError, StorageError, ValidationError
from services import EventoService
from utils.eventos import MemoriaEventoStore

INICIO = datetime(2024, 1, 1, 12, 0, 0, tzinfo=pytz.utc)

class RelojFalso:
    """Reloj que avanza un segundo en cada llamada."""
    def __init__(self, inicio=INICIO):
        self.actual = inicio

    def __call__(self):
        ahora = self.actual
        self.actual += timedelta(seconds=1)
        return ahora

@pytest.fixture
def store():
    return MemoriaEventoStore()

@pytest.fixture
def service(store):
    return EventoService(store, reloj=RelojFalso())

def test_create_builds_event(service, store):
    evento = service.crear({"nombre": "A", "fecha": "2024-01-01"})

    assert evento == {
        "id": 1704110400000,
        "nombre": "A",
        "fecha": "2024-01-01",
        "creado": "2024-01-01T12:00:00.000Z",
    }
    assert store.cargar() == [evento]

def test_create_ignores_extra_fields(service):
    evento = service.crear({"nombre": "A", "fecha": "2024-01-01", "id": 5, "creado": "ayer"})

    assert evento["id"] != 5
    assert evento["creado"] == "2024-01-01T12:00:00.000Z"

def test_create_same_millisecond_gets_distinct_ids(store):
    service = EventoService(store, reloj=lambda: INICIO)

    primero = service.crear({"nombre": "A", "fecha": "2024-01-01"})
    segundo = service.crear({"nombre": "B", "fecha": "2024-01-01"})

    assert segundo["id"] == primero["id"] + 1

@pytest.mark.parametrize("payload", [
    {},
    {"nombre": "A"},
    {"fecha": "2024-01-01"},
    {"nombre": "", "fecha": "2024-01-01"},
    {"nombre": "A", "fecha": None},
    {"nombre": ["A"], "fecha": "2024-01-01"},
    ["A", "2024-01-01"],
])
def test_create_rejects_invalid_payload(service, store, payload):
    with pytest.raises(ValidationError) as exc:
        service.crear(payload)

    assert exc.value.status_code == 400
    assert store.cargar() == []

def test_create_storage_error(service, store):
    store.fallar_guardado = True

    with pytest.raises(StorageError) as exc:
        service.crear({"nombre": "A", "fecha": "2024-01-01"})
    assert exc.value.detail == "Error al guardar evento"

def test_update_preserves_identity(service, store):
    creado = service.crear({"nombre": "A", "fecha": "2024-01-01"})

    actualizado = service.actualizar(creado["id"], {"nombre": "B", "fecha": "2024-02-02"})

    assert actualizado["id"] == creado["id"]
    assert actualizado["creado"] == creado["creado"]
    assert actualizado["nombre"] == "B"
    assert actualizado["fecha"] == "2024-02-02"
    assert actualizado["actualizado"] == "2024-01-01T12:00:01.000Z"
    assert actualizado["actualizado"] > actualizado["creado"]
    assert store.cargar() == [actualizado]

def test_update_keeps_unknown_keys(store):
    store.guardar([{"id": 1, "nombre": "A", "fecha": "x", "creado": "c", "lugar": "Rosario"}])
    service = EventoService(store, reloj=RelojFalso())

    evento = service.actualizar(1, {"nombre": "B", "fecha": "y"})

    assert evento["lugar"] == "Rosario"

def test_update_not_found(service, store):
    service.crear({"nombre": "A", "fecha": "2024-01-01"})
    antes = store.cargar()

    with pytest.raises(NotFoundError):
        service.actualizar(42, {"nombre": "B", "fecha": "2024-02-02"})
    with pytest.raises(NotFoundError):
        service.actualizar(None, {"nombre": "B", "fecha": "2024-02-02"})
    assert store.cargar() == antes

def test_update_validates_before_lookup(service):
    with pytest.raises(ValidationError):
        service.actualizar(42, {"nombre": "B"})

def test_update_storage_error(service, store):
    evento = service.crear({"nombre": "A", "fecha": "2024-01-01"})
    store.fallar_guardado = True

    with pytest.raises(StorageError) as exc:
        service.actualizar(evento["id"], {"nombre": "B", "fecha": "2024-02-02"})
    assert exc.value.detail == "Error al actualizar evento"
    assert store.cargar() == [evento]

def test_delete_removes_exactly_one(service, store):
    eventos = [service.crear({"nombre": n, "fecha": "2024-01-01"}) for n in "ABCD"]

    service.eliminar(eventos[2]["id"])

    assert store.cargar() == [eventos[0], eventos[1], eventos[3]]

def test_delete_not_found(service, store):
    service.crear({"nombre": "A", "fecha": "2024-01-01"})
    antes = store.cargar()

    with pytest.raises(NotFoundError):
        service.eliminar(1)
    with pytest.raises(NotFoundError):
        service.eliminar(None)
    assert store.cargar() == antes

def test_delete_storage_error(service, store):
    evento = service.crear({"nombre": "A", "fecha": "2024-01-01"})
    store.fallar_guardado = True

    with pytest.raises(StorageError) as exc:
        service.eliminar(evento["id"])
    assert exc.value.detail == "Error al eliminar evento"

def test_list_returns_collection(service):
    assert service.listar() == []
    evento = service.crear({"nombre": "A", "fecha": "2024-01-01"})
    assert service.listar() == [evento]
