"""
Manejo centralizado de errores para la API.
"""
from fastapi import HTTPException, status
from typing import Any, Dict, Optional

from config import messages

class APIError(HTTPException):
    """Clase base para errores de la API."""
    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)

class ValidationError(APIError):
    """Error 400: faltan campos requeridos."""
    def __init__(self, detail: Any = messages.CAMPOS_REQUERIDOS) -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

class NotFoundError(APIError):
    """Error 404: Recurso no encontrado."""
    def __init__(self, detail: str = messages.EVENTO_NO_ENCONTRADO) -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)

class StorageError(APIError):
    """Error 500: no se pudo persistir la colección."""
    def __init__(self, detail: str = messages.ERROR_GUARDAR) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

class InternalServerError(APIError):
    """Error 500: fallo inesperado al atender la petición."""
    def __init__(self, detail: str = messages.ERROR_INTERNO) -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
