"""
Módulo principal para la configuración central de la aplicación.
"""
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent

class Settings(BaseSettings):
    """Configuración de la aplicación."""
    APP_NAME: str = "API de Eventos"
    DEBUG: bool = False

    # Servidor (Render y similares entregan el puerto en la variable PORT)
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Almacenamiento
    EVENTOS_FILE: Path = BASE_DIR / "eventos.json"
    STATIC_DIR: Path = BASE_DIR / "static"

    CORS_ORIGINS: List[str] = ["*"]

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env")

# Instancia de configuración
settings = Settings()
