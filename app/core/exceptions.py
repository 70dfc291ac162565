"""Excepciones de dominio del sistema de autogestión académica.

Cada excepción lleva un mensaje legible y el código HTTP con el que la
expone la capa de rutas. Los servicios lanzan estas excepciones; los
handlers de ``app.core.error_handlers`` las convierten en respuestas.
"""


class AcademicoException(Exception):
    """Excepción base para errores académicos"""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidArgumentError(AcademicoException):
    """Entrada mal formada o fuera de rango (ids, nota, estado)"""

    status_code = 400
    error = "Bad Request"

    def __init__(self, message: str = "Parámetros inválidos"):
        super().__init__(message)


class UnauthorizedError(AcademicoException):
    """Credenciales ausentes o inválidas"""

    status_code = 401
    error = "Unauthorized"

    def __init__(self, message: str = "Credenciales inválidas"):
        super().__init__(message)


class ForbiddenError(AcademicoException):
    """El usuario autenticado no tiene permiso para la operación"""

    status_code = 403
    error = "Forbidden"

    def __init__(self, message: str = "No tienes permisos para esta operación"):
        super().__init__(message)


class NotFoundError(AcademicoException):
    """El recurso solicitado no existe"""

    status_code = 404
    error = "Not Found"

    def __init__(self, message: str = "Recurso no encontrado"):
        super().__init__(message)


class ConflictError(AcademicoException):
    """Petición bien formada que viola una regla de negocio"""

    status_code = 409
    error = "Conflict"

    def __init__(self, message: str):
        super().__init__(message)
