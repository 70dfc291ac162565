from typing import List

from fastapi import APIRouter, Depends, status

from app.api.deps import (
    get_current_active_user,
    get_examen_service,
    require_jefe_catedra,
)
from app.models.usuario import Usuario
from app.schemas.examen import (
    CargaNotaRequest,
    EsJefeResponse,
    ExamenOut,
    ExamenResumen,
    VerificacionCorrelativas,
)
from app.services.examen_service import ExamenService

router = APIRouter()


@router.get("/correlativas/{materia_id}", response_model=VerificacionCorrelativas)
def verificar_correlativas(
    materia_id: int,
    current_user: Usuario = Depends(get_current_active_user),
    service: ExamenService = Depends(get_examen_service),
):
    """Correlativas del final que el estudiante todavía no aprobó"""
    return service.verificar_correlativas_final(current_user.id, materia_id)


@router.post(
    "/inscribirse/{materia_id}",
    response_model=ExamenOut,
    status_code=status.HTTP_201_CREATED,
)
def inscribirse_examen(
    materia_id: int,
    current_user: Usuario = Depends(get_current_active_user),
    service: ExamenService = Depends(get_examen_service),
):
    """Inscripción del estudiante actual al examen final de una materia"""
    return service.inscribirse(current_user.id, materia_id)


@router.get("/mis-examenes", response_model=List[ExamenResumen])
def mis_examenes(
    current_user: Usuario = Depends(get_current_active_user),
    service: ExamenService = Depends(get_examen_service),
):
    """Exámenes del estudiante actual, más recientes primero"""
    return service.ver_examenes(current_user.id)


@router.get("/{examen_id}/es-jefe", response_model=EsJefeResponse)
def es_jefe(
    examen_id: int,
    current_user: Usuario = Depends(get_current_active_user),
    service: ExamenService = Depends(get_examen_service),
):
    """Indica si el usuario actual es jefe de cátedra de la materia del examen"""
    return {
        "examen_id": examen_id,
        "es_jefe": service.es_jefe_de_catedra(current_user.id, examen_id),
    }


@router.patch("/{examen_id}/nota", response_model=ExamenOut)
def cargar_nota(
    examen_id: int,
    carga: CargaNotaRequest,
    jefe: Usuario = Depends(require_jefe_catedra),
    service: ExamenService = Depends(get_examen_service),
):
    """Carga de nota por el jefe de cátedra de la materia"""
    return service.cargar_nota(jefe.id, examen_id, carga.nota, carga.estado)
