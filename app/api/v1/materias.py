from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_current_active_user, get_materia_service
from app.models.usuario import Usuario
from app.schemas.materia import MateriaDetalle
from app.services.materia_service import MateriaService

router = APIRouter()


@router.get("/", response_model=List[MateriaDetalle])
def get_materias(
    current_user: Usuario = Depends(get_current_active_user),
    service: MateriaService = Depends(get_materia_service),
):
    """Materias del plan de estudios del usuario actual"""
    return service.listar_del_plan(current_user)


@router.get("/{materia_id}", response_model=MateriaDetalle)
def get_materia(
    materia_id: int,
    current_user: Usuario = Depends(get_current_active_user),
    service: MateriaService = Depends(get_materia_service),
):
    """Ver materia con correlativas, comisiones y cupo"""
    return service.detalle(materia_id)
