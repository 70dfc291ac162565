from typing import List

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_current_active_user, get_inscripcion_service
from app.models.usuario import Usuario
from app.schemas.inscripcion import BloqueHorario, InscripcionOut, InscripcionRequest
from app.schemas.materia import MateriaDetalle
from app.services.inscripcion_service import InscripcionService

router = APIRouter()


@router.get("/mis-inscripciones", response_model=List[InscripcionOut])
def mis_inscripciones(
    current_user: Usuario = Depends(get_current_active_user),
    service: InscripcionService = Depends(get_inscripcion_service),
):
    """Inscripciones del estudiante actual con comisión y horarios"""
    return service.mis_inscripciones(current_user.id)


@router.get("/materia/disponibles", response_model=List[MateriaDetalle])
def materias_disponibles(
    current_user: Usuario = Depends(get_current_active_user),
    service: InscripcionService = Depends(get_inscripcion_service),
):
    """Materias del plan a las que el estudiante todavía no se inscribió"""
    return service.materias_disponibles(current_user.id)


@router.get("/mi-horario", response_model=List[BloqueHorario])
def mi_horario(
    current_user: Usuario = Depends(get_current_active_user),
    service: InscripcionService = Depends(get_inscripcion_service),
):
    """Horario semanal de las materias en curso"""
    return service.mi_horario(current_user.id)


@router.post("/materia/{materia_id}", status_code=status.HTTP_201_CREATED)
def inscribirse_materia(
    materia_id: int,
    data: InscripcionRequest,
    current_user: Usuario = Depends(get_current_active_user),
    service: InscripcionService = Depends(get_inscripcion_service),
):
    """Inscribir al estudiante actual en una comisión de la materia"""
    inscripcion = service.inscribir(current_user.id, materia_id, data.comision_id)
    return {
        "id": inscripcion.id,
        "materia_id": inscripcion.materia_id,
        "comision_id": inscripcion.comision_id,
        "stc": inscripcion.stc,
        "message": "Inscripción realizada con éxito",
    }


@router.delete("/{inscripcion_id}", status_code=status.HTTP_204_NO_CONTENT)
def dar_de_baja(
    inscripcion_id: int,
    current_user: Usuario = Depends(get_current_active_user),
    service: InscripcionService = Depends(get_inscripcion_service),
):
    """Dar de baja una inscripción propia en curso"""
    service.dar_de_baja(current_user.id, inscripcion_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
