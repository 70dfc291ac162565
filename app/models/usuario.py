import enum

from sqlalchemy import Column, String, Integer, ForeignKey
from sqlalchemy.orm import relationship
from .base import BaseModel


class RolUsuario(str, enum.Enum):
    ESTUDIANTE = "estudiante"
    PROFESOR = "profesor"
    ADMIN = "admin"


class Usuario(BaseModel):
    __tablename__ = "usuarios"

    nombre = Column(String(100), nullable=False)
    apellido = Column(String(100), nullable=False)
    legajo = Column(String(20), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    rol = Column(String(20), nullable=False, default=RolUsuario.ESTUDIANTE.value)
    plan_estudio_id = Column(Integer, ForeignKey("planes_estudio.id"), nullable=True)

    # Relationships
    plan_estudio = relationship("PlanEstudio", back_populates="estudiantes")
    inscripciones = relationship("Inscripcion", back_populates="estudiante")
    examenes = relationship("ExamenFinal", back_populates="estudiante")
    materias_a_cargo = relationship("Materia", back_populates="jefe_catedra")
