"""
Servicio de eventos: cada operación carga la colección completa, la modifica
en memoria y la vuelve a guardar.
"""
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from api.errors import NotFoundError, StorageError, ValidationError
from config import messages
from models import Evento, EventoPayload
from utils.date_utils import get_current_datetime, timestamp_ms, to_iso_string
from utils.eventos import EventoStore

logger = logging.getLogger(__name__)

class EventoService:
    """Servicio para listar, crear, actualizar y eliminar eventos."""

    def __init__(self, store: EventoStore, reloj: Callable[[], datetime] = get_current_datetime):
        self.store = store
        self.reloj = reloj

    def listar(self) -> List[Dict[str, Any]]:
        return self.store.cargar()

    def crear(self, payload: Any) -> Dict[str, Any]:
        """
        Crea un evento nuevo al final de la colección.

        Args:
            payload: Cuerpo de la petición, debe traer nombre y fecha

        Returns:
            Dict: El evento creado
        """
        datos = self._validar(payload)
        ahora = self.reloj()

        with self.store.lock:
            eventos = self.store.cargar()
            evento = Evento(
                id=self._nuevo_id(eventos, timestamp_ms(ahora)),
                nombre=datos.nombre,
                fecha=datos.fecha,
                creado=to_iso_string(ahora),
            ).model_dump(exclude_none=True)
            eventos.append(evento)

            if not self.store.guardar(eventos):
                raise StorageError(messages.ERROR_GUARDAR)

        logger.info(f"Evento creado: {evento['id']}")
        return evento

    def actualizar(self, evento_id: Optional[int], payload: Any) -> Dict[str, Any]:
        """Reemplaza nombre y fecha de un evento existente."""
        datos = self._validar(payload)

        with self.store.lock:
            eventos = self.store.cargar()
            indice = next(
                (i for i, e in enumerate(eventos) if evento_id is not None and e.get("id") == evento_id),
                None,
            )
            if indice is None:
                raise NotFoundError()

            eventos[indice] = {
                **eventos[indice],
                "nombre": datos.nombre,
                "fecha": datos.fecha,
                "actualizado": to_iso_string(self.reloj()),
            }

            if not self.store.guardar(eventos):
                raise StorageError(messages.ERROR_ACTUALIZAR)

        logger.info(f"Evento actualizado: {evento_id}")
        return eventos[indice]

    def eliminar(self, evento_id: Optional[int]) -> None:
        """Elimina de la colección los eventos con el id indicado."""
        with self.store.lock:
            eventos = self.store.cargar()
            filtrados = [e for e in eventos if evento_id is None or e.get("id") != evento_id]

            if len(filtrados) == len(eventos):
                raise NotFoundError()

            if not self.store.guardar(filtrados):
                raise StorageError(messages.ERROR_ELIMINAR)

        logger.info(f"Evento eliminado: {evento_id}")

    @staticmethod
    def _validar(payload: Any) -> EventoPayload:
        try:
            datos = EventoPayload.model_validate(payload)
        except PydanticValidationError:
            raise ValidationError()
        if not datos.completo():
            raise ValidationError()
        return datos

    @staticmethod
    def _nuevo_id(eventos: List[Dict[str, Any]], candidato: int) -> int:
        # Dos altas en el mismo milisegundo no deben compartir id
        usados = {e.get("id") for e in eventos}
        while candidato in usados:
            candidato += 1
        return candidato
