from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool
from contextlib import contextmanager
from typing import Any, Optional
import json
import logging
import re

from api.dependencies import get_evento_service
from api.errors import APIError, InternalServerError
from config import messages
from models import ErrorResponse, EventoResponse, ListaEventosResponse, MensajeResponse
from services import EventoService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/eventos", tags=["eventos"])

ERRORES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

@contextmanager
def _errores_internos(mensaje: str = messages.ERROR_INTERNO):
    """Convierte cualquier excepción inesperada en un error 500 de la API."""
    try:
        yield
    except APIError:
        raise
    except Exception as e:
        logger.exception(f"Error no manejado: {e}")
        raise InternalServerError(mensaje) from e

async def _leer_payload(request: Request) -> Any:
    cuerpo = await request.body()
    if not cuerpo.strip():
        return {}
    return json.loads(cuerpo)

def _parsear_id(valor: str) -> Optional[int]:
    # Igual que parseInt: toma el entero inicial, si lo hay
    coincidencia = re.match(r"\s*([+-]?\d+)", valor)
    return int(coincidencia.group(1)) if coincidencia else None

@router.get("", responses={200: {"model": ListaEventosResponse}, 500: ERRORES[500]})
@router.get("/", include_in_schema=False)
async def listar_eventos(service: EventoService = Depends(get_evento_service)):
    with _errores_internos(messages.ERROR_OBTENER):
        eventos = await run_in_threadpool(service.listar)
    return {"success": True, "eventos": eventos}

@router.post("", responses={200: {"model": EventoResponse}, **ERRORES})
@router.post("/", include_in_schema=False)
async def crear_evento(request: Request, service: EventoService = Depends(get_evento_service)):
    with _errores_internos():
        payload = await _leer_payload(request)
        evento = await run_in_threadpool(service.crear, payload)
    return {"success": True, "evento": evento}

@router.put("/{evento_id}", responses={200: {"model": EventoResponse}, **ERRORES})
async def actualizar_evento(
    evento_id: str,
    request: Request,
    service: EventoService = Depends(get_evento_service),
):
    with _errores_internos():
        payload = await _leer_payload(request)
        evento = await run_in_threadpool(service.actualizar, _parsear_id(evento_id), payload)
    return {"success": True, "evento": evento}

@router.delete("/{evento_id}", responses={200: {"model": MensajeResponse}, 404: ERRORES[404], 500: ERRORES[500]})
async def eliminar_evento(evento_id: str, service: EventoService = Depends(get_evento_service)):
    with _errores_internos():
        await run_in_threadpool(service.eliminar, _parsear_id(evento_id))
    return {"success": True, "message": messages.EVENTO_ELIMINADO}
