"""
Módulo para manejo de fechas y horas.
Todas las marcas de tiempo del servicio se generan en UTC.
"""
from datetime import datetime, timedelta
import pytz

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)

def get_current_datetime() -> datetime:
    """Obtiene la fecha y hora actual en UTC."""
    return datetime.now(pytz.utc)

def to_iso_string(dt: datetime) -> str:
    """
    Formatea un datetime como ISO-8601 en UTC con milisegundos.

    Args:
        dt: Fecha a formatear (si no tiene zona horaria se asume UTC)

    Returns:
        str: Fecha con el formato "2024-01-01T12:30:00.000Z"
    """
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    dt = dt.astimezone(pytz.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"

def timestamp_ms(dt: datetime) -> int:
    """Milisegundos transcurridos desde el epoch Unix."""
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return (dt - EPOCH) // timedelta(milliseconds=1)
