# Arranque
SERVIDOR_INICIADO = "🚀 Servidor corriendo en el puerto {port}"

# Eventos
EVENTO_ELIMINADO = "Evento eliminado correctamente"

# Mensajes de error
CAMPOS_REQUERIDOS = "Nombre y fecha son requeridos"
EVENTO_NO_ENCONTRADO = "Evento no encontrado"
ERROR_OBTENER = "Error al obtener eventos"
ERROR_GUARDAR = "Error al guardar evento"
ERROR_ACTUALIZAR = "Error al actualizar evento"
ERROR_ELIMINAR = "Error al eliminar evento"
ERROR_INTERNO = "Error interno del servidor"
DATOS_INVALIDOS = "Datos inválidos"
PAGINA_NO_ENCONTRADA = "Página no encontrada"
