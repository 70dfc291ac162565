from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from typing import Optional, List, Union
from datetime import datetime

from app.models.examen import EstadoExamen


class ExamenCreate(BaseModel):
    estudiante_id: int
    materia_id: int
    estado: EstadoExamen = EstadoExamen.INSCRIPTO
    nota: Optional[float] = None


class ExamenUpdate(BaseModel):
    estado: Optional[EstadoExamen] = None
    nota: Optional[float] = None


class ExamenOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    estudiante_id: int
    materia_id: int
    estado: str
    nota: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ExamenResumen(BaseModel):
    """Vista mínima de un examen: no expone datos del estudiante"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    estado: str
    nota: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CargaNotaRequest(BaseModel):
    # Sin coerción: un booleano no es una nota
    nota: Union[StrictInt, StrictFloat]
    estado: str


class CorrelativaFaltante(BaseModel):
    id: int
    nombre: str


class VerificacionCorrelativas(BaseModel):
    cumple: bool
    faltantes: List[CorrelativaFaltante] = []


class EsJefeResponse(BaseModel):
    examen_id: int
    es_jefe: bool
