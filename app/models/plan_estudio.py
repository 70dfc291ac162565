from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from .base import BaseModel


class PlanEstudio(BaseModel):
    __tablename__ = "planes_estudio"

    codigo = Column(String(20), unique=True, nullable=False, index=True)
    nombre = Column(String(200), nullable=False)

    # Relationships
    materias = relationship("Materia", back_populates="plan_estudio")
    estudiantes = relationship("Usuario", back_populates="plan_estudio")
