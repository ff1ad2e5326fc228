"""
Módulo de servicios de la aplicación.

Este módulo exporta el servicio de eventos para ser utilizado en toda la aplicación.
"""
from .evento_service import EventoService

__all__ = ['EventoService']
