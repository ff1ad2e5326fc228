"""
Dependencias comunes para los endpoints de la API.
"""
from functools import lru_cache

from fastapi import Depends

from core import Settings, settings
from services import EventoService
from utils.eventos import EventoStore, JsonEventoStore

def get_settings() -> Settings:
    """Devuelve la configuración de la aplicación."""
    return settings

@lru_cache()
def _store_para(ruta: str) -> JsonEventoStore:
    # Una sola instancia por archivo para compartir el mismo lock
    return JsonEventoStore(ruta)

def get_evento_store(config: Settings = Depends(get_settings)) -> EventoStore:
    """Obtiene el almacén de eventos configurado."""
    return _store_para(str(config.EVENTOS_FILE))

def get_evento_service(store: EventoStore = Depends(get_evento_store)) -> EventoService:
    return EventoService(store)
