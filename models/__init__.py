"""
Modelos de datos de la aplicación.
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, List

class EventoPayload(BaseModel):
    """Cuerpo recibido al crear o actualizar un evento."""
    model_config = ConfigDict(extra="ignore")

    nombre: Optional[str] = None
    fecha: Optional[str] = None

    def completo(self) -> bool:
        """True si nombre y fecha vienen informados y no vacíos."""
        return bool(self.nombre) and bool(self.fecha)

class Evento(BaseModel):
    """Modelo para eventos tal como se guardan en el archivo JSON."""
    model_config = ConfigDict(extra="allow")

    id: int
    nombre: str
    fecha: str
    creado: str
    actualizado: Optional[str] = None

# Sobres de respuesta
class RespuestaBase(BaseModel):
    success: bool

class ListaEventosResponse(RespuestaBase):
    eventos: List[Evento]

class EventoResponse(RespuestaBase):
    evento: Evento

class MensajeResponse(RespuestaBase):
    message: str

class ErrorResponse(RespuestaBase):
    success: bool = False
    error: str
