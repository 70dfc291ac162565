from typing import Optional

from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.config.settings import settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import verify_token
from app.core.validation import unwrap, validar_id
from app.crud.comision import comision as comision_crud
from app.crud.examen import examen as examen_crud
from app.crud.inscripcion import inscripcion as inscripcion_crud
from app.crud.materia import materia as materia_crud
from app.crud.usuario import usuario as usuario_crud
from app.models.usuario import RolUsuario, Usuario
from app.services.auth_service import AuthService
from app.services.examen_service import ExamenService
from app.services.inscripcion_service import InscripcionService
from app.services.materia_service import MateriaService

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Usuario:
    """
    Obtener usuario actual desde el token JWT
    """
    if credentials is None:
        raise UnauthorizedError("No autenticado")

    subject = verify_token(credentials.credentials)
    if subject is None or not subject.isdigit():
        raise UnauthorizedError("No se pudo validar las credenciales")

    user = usuario_crud.get_with_plan(db, int(subject))
    if user is None:
        raise UnauthorizedError("No se pudo validar las credenciales")

    return user


def get_current_active_user(current_user: Usuario = Depends(get_current_user)) -> Usuario:
    """
    Obtener usuario activo (se puede extender para verificar si está activo)
    """
    return current_user


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(
        db,
        usuarios=usuario_crud,
        access_token_expire_minutes=settings.access_token_expire_minutes,
    )


def get_examen_service(db: Session = Depends(get_db)) -> ExamenService:
    return ExamenService(
        db,
        usuarios=usuario_crud,
        materias=materia_crud,
        inscripciones=inscripcion_crud,
        examenes=examen_crud,
        stc_aprobatorios=settings.stc_aprobatorios,
    )


def get_inscripcion_service(db: Session = Depends(get_db)) -> InscripcionService:
    return InscripcionService(
        db,
        usuarios=usuario_crud,
        materias=materia_crud,
        comisiones=comision_crud,
        inscripciones=inscripcion_crud,
        stc_aprobatorios=settings.stc_aprobatorios,
    )


def get_materia_service(db: Session = Depends(get_db)) -> MateriaService:
    return MateriaService(db, materias=materia_crud, comisiones=comision_crud)


def require_jefe_catedra(
    examen_id: int = Path(..., description="ID del examen"),
    current_user: Usuario = Depends(get_current_active_user),
    service: ExamenService = Depends(get_examen_service),
) -> Usuario:
    """Guard: solo el jefe de cátedra de la materia del examen pasa"""
    unwrap(validar_id(examen_id, "examenId inválido"))

    if current_user.rol != RolUsuario.PROFESOR.value:
        raise ForbiddenError("Solo profesores pueden acceder")

    if not service.es_jefe_de_catedra(current_user.id, examen_id):
        raise ForbiddenError("No eres jefe de cátedra de esta materia")

    return current_user
