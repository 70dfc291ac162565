import enum

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .base import BaseModel


class EstadoCursada(str, enum.Enum):
    CURSANDO = "cursando"
    APROBADA = "aprobada"
    DESAPROBADA = "desaprobada"
    AUSENTE = "ausente"


class Inscripcion(BaseModel):
    __tablename__ = "inscripciones"
    __table_args__ = (
        UniqueConstraint(
            "estudiante_id", "materia_id", name="uq_inscripcion_estudiante_materia"
        ),
    )

    estudiante_id = Column(Integer, ForeignKey("usuarios.id"), nullable=False)
    materia_id = Column(Integer, ForeignKey("materias.id"), nullable=False)
    comision_id = Column(Integer, ForeignKey("comisiones.id"), nullable=True)
    stc = Column(String(20), nullable=False, default=EstadoCursada.CURSANDO.value)

    # Relationships
    estudiante = relationship("Usuario", back_populates="inscripciones")
    materia = relationship("Materia")
    comision = relationship("Comision", back_populates="inscripciones")
