from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional
from datetime import datetime

from app.models.usuario import RolUsuario


class PlanEstudioBrief(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    codigo: str
    nombre: str


class UsuarioBase(BaseModel):
    nombre: str = Field(..., min_length=1, max_length=100)
    apellido: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    legajo: str = Field(..., min_length=1, max_length=20)


class UsuarioCreate(UsuarioBase):
    password: str = Field(..., min_length=6)
    rol: Optional[RolUsuario] = None
    plan_estudio_id: Optional[int] = None


class UsuarioUpdate(BaseModel):
    nombre: Optional[str] = None
    apellido: Optional[str] = None
    email: Optional[EmailStr] = None
    plan_estudio_id: Optional[int] = None


class UsuarioResponse(UsuarioBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rol: RolUsuario
    plan_estudio: Optional[PlanEstudioBrief] = None
    created_at: Optional[datetime] = None
