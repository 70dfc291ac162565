from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import time


class MateriaBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str


class ComisionBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str


class DocenteBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    apellido: str


class HorarioOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    dia: str
    hora_inicio: time
    hora_fin: time
    aula: Optional[str] = None


class ComisionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    cupo_maximo: int
    cupo_disponible: int
    docente: Optional[DocenteBrief] = None
    horarios: List[HorarioOut] = []


class MateriaOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    nombre: str
    descripcion: Optional[str] = None
    nivel: Optional[int] = None
    jefe_catedra: Optional[DocenteBrief] = None
    correlativas_final: List[MateriaBrief] = []
    correlativas_cursada: List[MateriaBrief] = []


class MateriaDetalle(MateriaOut):
    comisiones: List[ComisionOut] = []
