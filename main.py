from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import traceback

from config import messages
from core import settings
from routers import eventos

# Configuración de logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(messages.SERVIDOR_INICIADO.format(port=settings.PORT))
    logger.info("Rutas disponibles:")
    for route in app.routes:
        if hasattr(route, 'methods'):
            logger.info(f"{route.path} - {route.methods}")
    yield

# Configuración de la aplicación
app = FastAPI(
    title=settings.APP_NAME,
    description="API para gestionar eventos con nombre y fecha, guardados en un archivo JSON",
    version="1.0.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configuración de CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

def _respuesta_error(status_code: int, error: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})

# Manejo de errores global
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _respuesta_error(exc.status_code, str(exc.detail))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Error de validación: {exc.errors()}")
    return _respuesta_error(status.HTTP_400_BAD_REQUEST, messages.DATOS_INVALIDOS)

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error no manejado: {str(exc)}\n{traceback.format_exc()}")
    return _respuesta_error(status.HTTP_500_INTERNAL_SERVER_ERROR, messages.ERROR_INTERNO)

# Incluir routers con prefijo /api
api_prefix = "/api"

app.include_router(eventos.router, prefix=api_prefix)  # /api/eventos

if settings.STATIC_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

@app.get("/", include_in_schema=False)
async def root():
    index = settings.STATIC_DIR / "index.html"
    if not index.is_file():
        return _respuesta_error(status.HTTP_404_NOT_FOUND, messages.PAGINA_NO_ENCONTRADA)
    return FileResponse(index)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
