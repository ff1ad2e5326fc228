"""
Módulo para el manejo de la API: dependencias y errores comunes.
"""
