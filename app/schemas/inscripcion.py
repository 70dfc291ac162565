from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime, time

from app.models.inscripcion import EstadoCursada
from .materia import ComisionBrief, ComisionOut, MateriaBrief


class InscripcionCreate(BaseModel):
    estudiante_id: int
    materia_id: int
    comision_id: Optional[int] = None
    stc: EstadoCursada = EstadoCursada.CURSANDO


class InscripcionUpdate(BaseModel):
    comision_id: Optional[int] = None
    stc: Optional[EstadoCursada] = None


class InscripcionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    comision_id: int = Field(..., alias="comisionId")


class InscripcionOut(BaseModel):
    id: int
    materia: MateriaBrief
    comision: Optional[ComisionOut] = None
    stc: str
    fecha_inscripcion: Optional[datetime] = None
    puede_darse_de_baja: bool
    motivo_no_baja: Optional[str] = None


class BloqueHorario(BaseModel):
    dia: str
    hora_inicio: time
    hora_fin: time
    aula: str
    materia: MateriaBrief
    comision: ComisionBrief
