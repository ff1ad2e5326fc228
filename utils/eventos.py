"""
Módulo de persistencia de eventos.
La colección completa se lee y se escribe de una sola vez: no hay lecturas
ni escrituras parciales.
"""
from typing import Any, Dict, List, Optional
from pathlib import Path
import copy
import json
import logging
import threading

logger = logging.getLogger(__name__)

class EventoStore:
    """Interfaz común de los almacenes de eventos."""

    def __init__(self):
        # Se mantiene tomado durante todo un ciclo leer-modificar-guardar
        self.lock = threading.Lock()

    def cargar(self) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def guardar(self, eventos: List[Dict[str, Any]]) -> bool:
        raise NotImplementedError

class JsonEventoStore(EventoStore):
    """Guarda los eventos como un arreglo JSON en un único archivo."""

    def __init__(self, ruta: Path):
        super().__init__()
        self.ruta = Path(ruta)

    def cargar(self) -> List[Dict[str, Any]]:
        """
        Carga los eventos desde el archivo JSON.

        Returns:
            List[Dict]: La colección completa. Si el archivo no existe o
            está corrupto se devuelve una lista vacía.
        """
        if not self.ruta.exists():
            return []

        try:
            with open(self.ruta, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"No se pudo leer {self.ruta}, se usa una colección vacía: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"{self.ruta} no contiene un arreglo JSON, se usa una colección vacía")
            return []
        return data

    def guardar(self, eventos: List[Dict[str, Any]]) -> bool:
        """Sobrescribe el archivo con la colección completa."""
        try:
            self.ruta.parent.mkdir(parents=True, exist_ok=True)
            contenido = json.dumps(eventos, indent=2, ensure_ascii=False)
            with open(self.ruta, "w", encoding="utf-8") as f:
                f.write(contenido)
            return True
        except (OSError, TypeError, ValueError):
            logger.exception(f"Error guardando eventos en {self.ruta}")
            return False

class MemoriaEventoStore(EventoStore):
    """Almacén en memoria, útil para pruebas."""

    def __init__(self, eventos: Optional[List[Dict[str, Any]]] = None):
        super().__init__()
        self._eventos = copy.deepcopy(eventos or [])
        self.fallar_guardado = False

    def cargar(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._eventos)

    def guardar(self, eventos: List[Dict[str, Any]]) -> bool:
        if self.fallar_guardado:
            logger.error("Error guardando eventos: almacén configurado para fallar")
            return False
        self._eventos = copy.deepcopy(eventos)
        return True
